"""Build the ordered view of the webradios directory."""

import logging
import os
from pathlib import Path
from typing import List, Optional

from ..codec.base import EntryCodec
from ..codec.filename import has_playlist_extension
from ..codec.m3u import M3uEntryCodec
from ..errors import CatalogUnavailableError
from ..filters import SearchFilter, SortedIndex

logger = logging.getLogger(__name__)


class CatalogIndexBuilder:
    """
    Scan the catalog directory into a SortedIndex.

    Nothing is cached, every build reads the directory again. Files that
    can not be read or parsed are left out without failing the build.
    """

    def __init__(self, directory: Path, codec: Optional[EntryCodec] = None):
        self.directory = Path(directory)
        self.codec = codec or M3uEntryCodec()

    def build(self, search_term: str = "") -> SortedIndex:
        """
        Collect all favorites whose title matches ``search_term``.

        Raises:
            CatalogUnavailableError: the directory can not be opened
        """
        search = SearchFilter(search_term)
        index = SortedIndex()
        skipped = 0

        for filename in self._list_candidates():
            path = self.directory / filename
            try:
                data = path.read_bytes()
            except OSError as e:
                # Removed or replaced while scanning
                logger.debug(f"Skipping unreadable webradio {path}: {e}")
                skipped += 1
                continue

            decoded = self.codec.decode(data, filename)
            if decoded is None:
                logger.warning(f"Skipping invalid webradio file: {path}")
                skipped += 1
                continue

            entry, title = decoded
            if search.matches(title):
                index.insert(title, filename, entry)

        logger.debug(
            f"Indexed {len(index)} webradios in {self.directory} "
            f"(search: {search_term!r}, skipped: {skipped})"
        )
        return index

    def _list_candidates(self) -> List[str]:
        """Names of all playlist files in the directory."""
        candidates = []
        try:
            with os.scandir(self.directory) as it:
                for dir_entry in it:
                    if not has_playlist_extension(dir_entry.name):
                        continue
                    if dir_entry.is_dir():
                        continue
                    candidates.append(dir_entry.name)
        except OSError as e:
            logger.error(f"Can not open directory {self.directory}: {e}")
            raise CatalogUnavailableError(self.directory, e) from e
        return candidates
