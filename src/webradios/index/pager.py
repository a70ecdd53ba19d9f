"""Pagination of listing results."""

from typing import Iterable

from ..config import DEFAULT_LIMIT, DEFAULT_OFFSET
from ..models import CatalogIndexEntry, ListResult


def paginate(
    entries: Iterable[CatalogIndexEntry],
    offset: int = DEFAULT_OFFSET,
    limit: int = DEFAULT_LIMIT,
) -> ListResult:
    """
    Select the window ``[offset, offset + limit)`` of ordered entries.

    ``total_matched`` counts all entries, so ``limit=0`` can be used to get
    the number of matches without any data.

    Args:
        entries: ordered entries, e.g. a SortedIndex
        offset: position of the first returned entry
        limit: maximum number of returned entries

    Returns:
        ListResult with the window and both counters
    """
    if offset < 0:
        raise ValueError(f"offset must not be negative: {offset}")
    if limit < 0:
        raise ValueError(f"limit must not be negative: {limit}")

    ordered = list(entries)
    window = ordered[offset:offset + limit]
    return ListResult(
        entries=window,
        total_matched=len(ordered),
        returned=len(window),
    )
