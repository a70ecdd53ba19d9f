"""Exceptions raised and reported by the webradio catalog."""

import errno
from pathlib import Path
from typing import Optional, Union


class CatalogError(Exception):
    """Base exception for catalog errors."""

    message = "Webradio catalog error"

    def __init__(
        self,
        path: Union[Path, str, None] = None,
        os_error: Optional[Exception] = None,
    ):
        self.path = Path(path) if path is not None else None
        self.os_error = os_error
        super().__init__(self._format())

    def _format(self) -> str:
        text = self.message
        if self.path is not None:
            text = f'{text} "{self.path}"'
        if self.detail:
            text = f"{text}: {self.detail}"
        return text

    @property
    def detail(self) -> str:
        """Underlying error detail, empty if there is none."""
        if self.os_error is None:
            return ""
        return getattr(self.os_error, "strerror", None) or str(self.os_error)

    @property
    def not_found(self) -> bool:
        """True if the underlying OS error says the file does not exist."""
        return (
            self.os_error is not None
            and getattr(self.os_error, "errno", None) == errno.ENOENT
        )


class EntryNotFoundError(CatalogError):
    """Raised when a webradio file does not exist."""

    message = "Webradio favorite not found"


class EntryDecodeError(CatalogError):
    """Raised when a webradio file exists but can not be parsed."""

    message = "Can not parse webradio favorite file"


class CatalogUnavailableError(CatalogError):
    """Raised when the webradios directory can not be opened."""

    message = "Can not open webradios directory"


class WriteFailedError(CatalogError):
    """Writing a webradio file failed."""

    message = "Writing webradio favorite failed"


class DeleteFailedError(CatalogError):
    """Removing a webradio file failed."""

    message = "Deleting webradio favorite failed"


class PartialRenameError(DeleteFailedError):
    """
    The renamed favorite was written but the file of the old uri is still there.

    The catalog now holds both files.
    """

    message = "Deleting old webradio favorite failed"
