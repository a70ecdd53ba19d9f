from .webradio import WebradioEntry
from .results import CatalogIndexEntry, ListResult, MutationResult, SortKey

__all__ = [
    "WebradioEntry",
    "CatalogIndexEntry",
    "ListResult",
    "MutationResult",
    "SortKey",
]
