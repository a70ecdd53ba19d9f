"""Shared fixtures for catalog tests."""

import pytest

from webradios import Catalog, WebradioEntry
from webradios.codec.m3u import M3uEntryCodec


@pytest.fixture
def catalog(tmp_path):
    catalog = Catalog(tmp_path)
    catalog.directory.mkdir()
    return catalog


@pytest.fixture
def codec():
    return M3uEntryCodec()


@pytest.fixture
def sample_entry():
    return WebradioEntry(
        uri="http://stream.example.org/jazz.mp3",
        name="Jazz FM",
        genre="Jazz",
        picture="http://example.org/jazz.png",
        homepage="http://example.org",
        country="United Kingdom",
        language="English",
        codec="MP3",
        bitrate=128,
        description="Smooth jazz around the clock",
    )


@pytest.fixture
def add_station(catalog):
    """Save a favorite with the given name and return its entry."""

    def _add(name, uri=None, **fields):
        entry = WebradioEntry(uri=uri or f"http://radio.example/{name}", name=name, **fields)
        assert catalog.save(entry)
        return entry

    return _add
