"""Ordered, deduplicating index of catalog entries."""

import logging
from typing import Dict, Iterator, List

from ..models import CatalogIndexEntry, SortKey, WebradioEntry

logger = logging.getLogger(__name__)


class SortedIndex:
    """
    Catalog entries keyed by a composite sort key.

    Keys are (casefolded title, filename, disambiguator). A key that is
    already taken gets the next free disambiguator, so every inserted entry
    is kept and iteration order never depends on insertion order.
    """

    def __init__(self):
        self._entries: Dict[SortKey, CatalogIndexEntry] = {}

    def __len__(self):
        return len(self._entries)

    def __iter__(self) -> Iterator[CatalogIndexEntry]:
        for key in sorted(self._entries):
            yield self._entries[key]

    def insert(self, title: str, filename: str, entry: WebradioEntry) -> CatalogIndexEntry:
        """Add an entry and return it with its unique sort key."""
        folded = title.casefold()
        disambiguator = 0
        while (folded, filename, disambiguator) in self._entries:
            disambiguator += 1
        if disambiguator:
            logger.debug(f"Duplicate sort key for {filename}, using #{disambiguator}")

        key = (folded, filename, disambiguator)
        indexed = CatalogIndexEntry(
            sort_key=key, filename=filename, entry=entry, title=title
        )
        self._entries[key] = indexed
        return indexed

    def ordered(self) -> List[CatalogIndexEntry]:
        """All entries in sort key order."""
        return list(self)
