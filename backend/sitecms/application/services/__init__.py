from .admin_auth_service import SESSION_COOKIE_NAME, AdminAuthService
from .form_response_service import FormResponseService
from .section_service import NOT_PERSISTED_WARNING, MutationResult, SectionService
from .site_content_service import SiteContentService
from .upload_service import ALLOWED_CONTENT_TYPES, UploadService, build_media_key, content_type_for

__all__ = [
    "AdminAuthService",
    "ALLOWED_CONTENT_TYPES",
    "FormResponseService",
    "MutationResult",
    "NOT_PERSISTED_WARNING",
    "SESSION_COOKIE_NAME",
    "SectionService",
    "SiteContentService",
    "UploadService",
    "build_media_key",
    "content_type_for",
]
