"""Data model for webradio favorites."""

from dataclasses import dataclass
from typing import Any, Dict

from ..codec.filename import encode_filename


@dataclass
class WebradioEntry:
    """Represents a favorite radio station stored as one playlist file."""

    uri: str
    name: str
    genre: str = ""
    picture: str = ""
    homepage: str = ""
    country: str = ""
    language: str = ""
    codec: str = ""
    bitrate: int = 0
    description: str = ""
    filename: str = ""

    def __post_init__(self):
        if not self.filename:
            self.filename = encode_filename(self.uri)

    def to_dict(self) -> Dict[str, Any]:
        """Fields keyed the way the web api reports them."""
        return {
            "filename": self.filename,
            "Name": self.name,
            "StreamUri": self.uri,
            "Genre": self.genre,
            "Image": self.picture,
            "Homepage": self.homepage,
            "Country": self.country,
            "Language": self.language,
            "Codec": self.codec,
            "Bitrate": self.bitrate,
            "Description": self.description,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WebradioEntry":
        """Build an entry from api style keys. The filename is always derived."""
        try:
            bitrate = int(data.get("Bitrate") or 0)
        except (TypeError, ValueError):
            bitrate = 0
        return cls(
            uri=data["StreamUri"],
            name=data.get("Name", ""),
            genre=data.get("Genre", ""),
            picture=data.get("Image", ""),
            homepage=data.get("Homepage", ""),
            country=data.get("Country", ""),
            language=data.get("Language", ""),
            codec=data.get("Codec", ""),
            bitrate=bitrate,
            description=data.get("Description", ""),
        )
