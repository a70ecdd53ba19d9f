"""Catalog of favorite internet radio stations stored as playlist files."""

from .catalog import Catalog
from .errors import (
    CatalogError,
    CatalogUnavailableError,
    DeleteFailedError,
    EntryDecodeError,
    EntryNotFoundError,
    PartialRenameError,
    WriteFailedError,
)
from .models import CatalogIndexEntry, ListResult, MutationResult, WebradioEntry

__all__ = [
    "Catalog",
    "CatalogError",
    "CatalogUnavailableError",
    "DeleteFailedError",
    "EntryDecodeError",
    "EntryNotFoundError",
    "PartialRenameError",
    "WriteFailedError",
    "CatalogIndexEntry",
    "ListResult",
    "MutationResult",
    "WebradioEntry",
]
