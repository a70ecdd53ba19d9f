"""Result types returned by catalog operations."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from ..errors import CatalogError
from .webradio import WebradioEntry

# (casefolded title, filename, disambiguator)
SortKey = Tuple[str, str, int]


@dataclass(frozen=True)
class CatalogIndexEntry:
    """One matching favorite inside a single listing build."""

    sort_key: SortKey
    filename: str
    entry: WebradioEntry
    title: str = ""

    def to_dict(self) -> Dict[str, Any]:
        data = self.entry.to_dict()
        data["filename"] = self.filename
        return data


@dataclass
class ListResult:
    """A window of the ordered listing plus its counters."""

    entries: List[CatalogIndexEntry] = field(default_factory=list)
    total_matched: int = 0
    returned: int = 0

    def __iter__(self):
        return iter(self.entries)

    def __len__(self):
        return len(self.entries)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "data": [entry.to_dict() for entry in self.entries],
            "totalEntities": self.total_matched,
            "returnedEntities": self.returned,
        }


@dataclass(frozen=True)
class MutationResult:
    """
    Outcome of a save or delete.

    Falsy on failure; ``error`` then holds the reason including the OS error.
    A failed rename can leave the new file in place, see PartialRenameError.
    """

    ok: bool
    filename: str = ""
    error: Optional[CatalogError] = None

    def __bool__(self):
        return self.ok

    @classmethod
    def succeeded(cls, filename: str) -> "MutationResult":
        return cls(ok=True, filename=filename)

    @classmethod
    def failed(cls, error: CatalogError, filename: str = "") -> "MutationResult":
        return cls(ok=False, filename=filename, error=error)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"ok": self.ok, "filename": self.filename}
        if self.error is not None:
            data["error"] = str(self.error)
        return data
