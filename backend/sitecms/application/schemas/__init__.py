from .auth import AdminLogin
from .brands import BestSeller, BrandCreate, BrandPatch
from .clients import ClientCreate, ClientPatch
from .common import ApiResponse, empty_value, format_validation_error, patch_changes
from .form_responses import FormResponseCreate, Pagination
from .products import ProductCreate, ProductPatch
from .team import TeamMemberCreate, TeamMemberPatch

__all__ = [
    "AdminLogin",
    "ApiResponse",
    "BestSeller",
    "BrandCreate",
    "BrandPatch",
    "ClientCreate",
    "ClientPatch",
    "FormResponseCreate",
    "Pagination",
    "ProductCreate",
    "ProductPatch",
    "TeamMemberCreate",
    "TeamMemberPatch",
    "empty_value",
    "format_validation_error",
    "patch_changes",
]
