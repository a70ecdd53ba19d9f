"""Single-entry persistence of webradio favorites."""

import errno
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from ..codec.base import EntryCodec
from ..codec.filename import encode_filename, is_plain_filename
from ..codec.m3u import M3uEntryCodec
from ..errors import (
    DeleteFailedError,
    EntryDecodeError,
    EntryNotFoundError,
    PartialRenameError,
    WriteFailedError,
)
from ..models import MutationResult, WebradioEntry

logger = logging.getLogger(__name__)


class CatalogStore:
    """Read, write and delete favorites in the webradios directory."""

    def __init__(self, directory: Path, codec: Optional[EntryCodec] = None):
        self.directory = Path(directory)
        self.codec = codec or M3uEntryCodec()

    def path_for(self, filename: str) -> Path:
        return self.directory / filename

    def get_by_filename(self, filename: str) -> WebradioEntry:
        """
        Load the favorite stored in ``filename``.

        Raises:
            EntryNotFoundError: the file does not exist
            EntryDecodeError: the file can not be read or parsed
        """
        path = self.path_for(filename)
        if not is_plain_filename(filename):
            raise EntryNotFoundError(
                path, FileNotFoundError(errno.ENOENT, "Invalid filename", filename)
            )
        try:
            data = path.read_bytes()
        except (
            FileNotFoundError,
            IsADirectoryError,
            NotADirectoryError,
            ValueError,
        ) as e:
            raise EntryNotFoundError(path, e) from e
        except OSError as e:
            logger.error(f"Failed to read webradio {path}: {e}")
            raise EntryDecodeError(path, e) from e

        decoded = self.codec.decode(data, filename)
        if decoded is None:
            logger.error(f"Can not parse webradio favorite file {path}")
            raise EntryDecodeError(path)
        entry, _ = decoded
        return entry

    def get_by_uri(self, uri: str) -> Optional[WebradioEntry]:
        """
        Look up the favorite for a stream uri.

        Missing and unparsable files both return None.
        """
        filename = encode_filename(uri)
        if not self.path_for(filename).is_file():
            return None
        try:
            return self.get_by_filename(filename)
        except (EntryNotFoundError, EntryDecodeError) as e:
            logger.debug(f"No usable favorite for {uri}: {e}")
            return None

    def save(self, entry: WebradioEntry, uri_old: str = "") -> MutationResult:
        """
        Write a favorite, replacing any existing file for the same uri.

        If ``uri_old`` is set and differs from ``entry.uri`` the file of the
        old uri is removed afterwards. When that removal fails the result is
        a failure although the new file has already been written.
        """
        filename = encode_filename(entry.uri)
        entry.filename = filename
        path = self.path_for(filename)

        try:
            self._write(path, self.codec.encode(entry))
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Failed to write webradio {path}: {e}")
            return MutationResult.failed(WriteFailedError(path, e), filename)

        if uri_old and uri_old != entry.uri:
            old_path = self.path_for(encode_filename(uri_old))
            if old_path == path:
                logger.debug(f"Old and new uri share {filename}, nothing to remove")
            else:
                try:
                    old_path.unlink()
                except (OSError, ValueError) as e:
                    logger.error(f'Deleting old file "{old_path}" failed: {e}')
                    return MutationResult.failed(PartialRenameError(old_path, e), filename)
                logger.info(f"Renamed webradio {old_path.name} -> {filename}")

        logger.info(f"Saved webradio {filename}")
        return MutationResult.succeeded(filename)

    def delete(self, filename: str) -> MutationResult:
        """Remove a favorite. A missing file is a failure."""
        path = self.path_for(filename)
        try:
            if not is_plain_filename(filename):
                raise FileNotFoundError(errno.ENOENT, "Invalid filename", filename)
            path.unlink()
        except (OSError, ValueError) as e:
            logger.error(f'Unlinking webradio file "{path}" failed: {e}')
            return MutationResult.failed(DeleteFailedError(path, e), filename)

        logger.info(f"Deleted webradio {filename}")
        return MutationResult.succeeded(filename)

    def _write(self, path: Path, content: bytes):
        """Write through a temporary file so readers never see half a file."""
        self.directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f"{path.name}.", suffix=".tmp", dir=self.directory
        )
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(content)
            os.replace(tmp_name, path)
        except OSError:
            try:
                os.unlink(tmp_name)
            except OSError:
                pass
            raise
