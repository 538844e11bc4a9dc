from .api_client import ApiResult, CrudApiClient
from .item_state import ItemState, TrackedItem
from .section_sync import SectionSync

__all__ = [
    "ApiResult",
    "CrudApiClient",
    "ItemState",
    "SectionSync",
    "TrackedItem",
]
