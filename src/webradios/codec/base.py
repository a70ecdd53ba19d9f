"""Base entry codec."""

from abc import ABC, abstractmethod
from typing import Optional, Tuple

from ..models.webradio import WebradioEntry

# (decoded entry, title used to build the sort key)
DecodedEntry = Tuple[WebradioEntry, str]


class EntryCodec(ABC):
    """Abstract base class for playlist file formats."""

    @abstractmethod
    def encode(self, entry: WebradioEntry) -> bytes:
        """Serialize all fields of ``entry`` into file content."""
        pass

    @abstractmethod
    def decode(self, data: bytes, filename: str = "") -> Optional[DecodedEntry]:
        """
        Parse file content.

        Must not raise on malformed input; returns None instead.
        """
        pass
