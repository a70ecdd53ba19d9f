from .deduplication import SortedIndex
from .search_filter import SearchFilter

__all__ = ["SortedIndex", "SearchFilter"]
