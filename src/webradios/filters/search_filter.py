"""Search term filtering of webradio titles."""

import logging

logger = logging.getLogger(__name__)


class SearchFilter:
    """Match titles against a case-insensitive search term."""

    def __init__(self, search_term: str = ""):
        self.search_term = search_term or ""
        self._needle = self.search_term.casefold()

    def __bool__(self):
        return bool(self._needle)

    def matches(self, title: str) -> bool:
        """
        An empty search term matches everything, otherwise the title must
        contain the term. Comparison uses Unicode case folding.
        """
        if not self._needle:
            return True
        return self._needle in title.casefold()
