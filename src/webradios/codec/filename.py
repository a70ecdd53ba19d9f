"""Mapping of stream uris to playlist filenames."""

from ..config import FILENAME_REPLACEMENT, INVALID_FILENAME_CHARS, PLAYLIST_EXTENSION


def sanitize_filename(value: str) -> str:
    """
    Replace characters that are unsafe in a filename.

    Path separators and dots are replaced, so neither a directory part nor
    a ".." component can survive. Never returns an empty string.
    """
    sanitized = "".join(
        FILENAME_REPLACEMENT if _is_invalid(ch) else ch for ch in value
    )
    return sanitized.strip(FILENAME_REPLACEMENT) or FILENAME_REPLACEMENT


def encode_filename(uri: str) -> str:
    """Filename of the playlist file that stores the favorite for ``uri``."""
    return sanitize_filename(uri) + PLAYLIST_EXTENSION


def has_playlist_extension(name: str) -> bool:
    """True if ``name`` ends with the playlist extension, ignoring case."""
    _, dot, ext = name.rpartition(".")
    return bool(dot) and f".{ext}".lower() == PLAYLIST_EXTENSION


def is_plain_filename(name: str) -> bool:
    """True if ``name`` addresses a file directly inside one directory."""
    if name in ("", ".", ".."):
        return False
    return "/" not in name and "\\" not in name and "\x00" not in name


def _is_invalid(ch: str) -> bool:
    return ch in INVALID_FILENAME_CHARS or ord(ch) < 32 or ord(ch) == 127
