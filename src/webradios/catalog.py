"""Webradio favorites catalog."""

import logging
from pathlib import Path
from typing import Optional, Union

from .codec.base import EntryCodec
from .codec.m3u import M3uEntryCodec
from .config import DEFAULT_LIMIT, DEFAULT_OFFSET, WEBRADIOS_DIRNAME
from .index import CatalogIndexBuilder, paginate
from .models import ListResult, MutationResult, WebradioEntry
from .store import CatalogStore

logger = logging.getLogger(__name__)


class Catalog:
    """
    Favorites stored in ``<workdir>/webradios``, one playlist file each.

    Listings go through the index builder and pager, single entries go
    straight to the store. There is no locking: concurrent writers race and
    the last one wins, a scan may or may not see files changed meanwhile.
    """

    def __init__(self, workdir: Union[Path, str], codec: Optional[EntryCodec] = None):
        self.workdir = Path(workdir)
        self.directory = self.workdir / WEBRADIOS_DIRNAME
        self.codec = codec or M3uEntryCodec()
        self.store = CatalogStore(self.directory, self.codec)
        self.index_builder = CatalogIndexBuilder(self.directory, self.codec)

    def list(
        self,
        search_term: str = "",
        offset: int = DEFAULT_OFFSET,
        limit: int = DEFAULT_LIMIT,
    ) -> ListResult:
        """
        List favorites ordered by title.

        Raises:
            CatalogUnavailableError: the webradios directory can not be opened
        """
        index = self.index_builder.build(search_term)
        result = paginate(index, offset, limit)
        logger.info(
            f"Listed {result.returned} of {result.total_matched} webradios "
            f"(offset: {offset}, limit: {limit})"
        )
        return result

    def get(self, filename: str) -> WebradioEntry:
        """Load a favorite by filename, see CatalogStore.get_by_filename."""
        return self.store.get_by_filename(filename)

    def find(self, uri: str) -> Optional[WebradioEntry]:
        """Favorite for a stream uri or None."""
        return self.store.get_by_uri(uri)

    def save(self, entry: WebradioEntry, uri_old: str = "") -> MutationResult:
        return self.store.save(entry, uri_old)

    def delete(self, filename: str) -> MutationResult:
        return self.store.delete(filename)
