"""Extended M3U encoding of webradio favorites."""

import logging
from typing import Dict, List, Optional

from ..config import PLAYLIST_ENCODING
from ..models.webradio import WebradioEntry
from .base import DecodedEntry, EntryCodec

logger = logging.getLogger(__name__)

HEADER = "#EXTM3U"
EXTINF = "#EXTINF"

# Tag -> WebradioEntry attribute ("playlist" is the title)
TAGS = {
    "#EXTGENRE": "genre",
    "#PLAYLIST": "playlist",
    "#EXTIMG": "picture",
    "#HOMEPAGE": "homepage",
    "#COUNTRY": "country",
    "#LANGUAGE": "language",
    "#DESCRIPTION": "description",
    "#CODEC": "codec",
    "#BITRATE": "bitrate",
}


class M3uEntryCodec(EntryCodec):
    """Read and write favorites as single stream extended M3U playlists."""

    def encode(self, entry: WebradioEntry) -> bytes:
        """
        Build the playlist file for an entry.

        Format:
        1. #EXTM3U header
        2. #EXTINF display line and one tag line per field
        3. The stream uri as the only playlist item

        Raises:
            ValueError: the uri can not be stored as a playlist item
            UnicodeEncodeError: a field is not encodable, e.g. lone surrogates
        """
        uri = _single_line(entry.uri)
        if not uri or uri.startswith("#"):
            raise ValueError(f"Stream uri can not be stored in a playlist: {entry.uri!r}")

        lines = [
            HEADER,
            f"{EXTINF}:-1,{_single_line(entry.name)}",
            f"#EXTGENRE:{_single_line(entry.genre)}",
            f"#PLAYLIST:{_single_line(entry.name)}",
            f"#EXTIMG:{_single_line(entry.picture)}",
            f"#HOMEPAGE:{_single_line(entry.homepage)}",
            f"#COUNTRY:{_single_line(entry.country)}",
            f"#LANGUAGE:{_single_line(entry.language)}",
            f"#DESCRIPTION:{_single_line(entry.description)}",
            f"#CODEC:{_single_line(entry.codec)}",
            f"#BITRATE:{int(entry.bitrate)}",
            uri,
        ]
        content = "\n".join(lines) + "\n"
        return content.encode(PLAYLIST_ENCODING)

    def decode(self, data: bytes, filename: str = "") -> Optional[DecodedEntry]:
        """
        Parse a playlist file.

        The name is taken from #PLAYLIST, then from the #EXTINF display
        name. The returned title falls back to the stream uri for unnamed
        entries.
        """
        try:
            text = data.decode(PLAYLIST_ENCODING)
        except UnicodeDecodeError:
            logger.debug(f"Not valid {PLAYLIST_ENCODING}: {filename}")
            return None

        lines = [line.strip() for line in text.lstrip("\ufeff").splitlines()]
        lines = [line for line in lines if line]
        if not lines or lines[0] != HEADER:
            logger.debug(f"Missing {HEADER} header: {filename}")
            return None

        values: Dict[str, str] = {}
        extinf_name = ""
        uri = ""
        for line in lines[1:]:
            if line.startswith(f"{EXTINF}:"):
                _, _, extinf_name = line.partition(",")
                extinf_name = extinf_name.strip()
            elif line.startswith("#"):
                tag, sep, value = line.partition(":")
                if sep and tag in TAGS:
                    values[TAGS[tag]] = value.strip()
            elif not uri:
                uri = line

        if not uri:
            logger.debug(f"No stream uri found: {filename}")
            return None

        name = values.pop("playlist", "") or extinf_name
        title = name or uri
        try:
            bitrate = int(values.pop("bitrate", "0") or 0)
        except ValueError:
            bitrate = 0

        entry = WebradioEntry(
            uri=uri,
            name=name,
            bitrate=bitrate,
            filename=filename,
            **values,
        )
        return entry, title


def _single_line(value: str) -> str:
    parts: List[str] = str(value).splitlines()
    return " ".join(part.strip() for part in parts)
