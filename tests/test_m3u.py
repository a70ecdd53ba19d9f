"""Tests for the extended M3U entry codec."""

import pytest

from webradios import WebradioEntry


class TestEncode:
    @pytest.mark.parametrize("uri", ["#stream", " #stream", "", "\n"])
    def test_rejects_uri_read_as_tag(self, codec, uri):
        with pytest.raises(ValueError):
            codec.encode(WebradioEntry(uri=uri, name="Hash"))

    def test_rejects_lone_surrogates(self, codec):
        with pytest.raises(UnicodeEncodeError):
            codec.encode(WebradioEntry(uri="http://a/\udcff", name="X"))

    def test_layout(self, codec, sample_entry):
        lines = codec.encode(sample_entry).decode("utf-8").splitlines()
        assert lines == [
            "#EXTM3U",
            "#EXTINF:-1,Jazz FM",
            "#EXTGENRE:Jazz",
            "#PLAYLIST:Jazz FM",
            "#EXTIMG:http://example.org/jazz.png",
            "#HOMEPAGE:http://example.org",
            "#COUNTRY:United Kingdom",
            "#LANGUAGE:English",
            "#DESCRIPTION:Smooth jazz around the clock",
            "#CODEC:MP3",
            "#BITRATE:128",
            "http://stream.example.org/jazz.mp3",
        ]

    def test_newlines_in_fields_do_not_break_format(self, codec):
        entry = WebradioEntry(uri="http://x", name="Two\nLines", description="a\r\nb")
        decoded, title = codec.decode(codec.encode(entry), entry.filename)
        assert title == "Two Lines"
        assert decoded.description == "a b"
        assert decoded.uri == "http://x"


class TestDecode:
    def test_all_fields(self, codec, sample_entry):
        decoded, title = codec.decode(codec.encode(sample_entry), sample_entry.filename)
        assert title == "Jazz FM"
        assert decoded == sample_entry

    def test_filename_derived_when_not_given(self, codec, sample_entry):
        decoded, _ = codec.decode(codec.encode(sample_entry))
        assert decoded.filename == "http___stream_example_org_jazz_mp3.m3u"

    def test_missing_header(self, codec):
        assert codec.decode(b"http://x\n") is None

    def test_empty_file(self, codec):
        assert codec.decode(b"") is None

    def test_invalid_utf8(self, codec):
        assert codec.decode(b"#EXTM3U\n#PLAYLIST:\xff\xfe\nhttp://x\n") is None

    def test_missing_uri(self, codec):
        assert codec.decode(b"#EXTM3U\n#PLAYLIST:Nothing\n") is None

    def test_title_falls_back_to_extinf(self, codec):
        decoded, title = codec.decode(b"#EXTM3U\n#EXTINF:-1,Radio One\nhttp://one\n")
        assert title == "Radio One"
        assert decoded.name == "Radio One"

    def test_title_falls_back_to_uri(self, codec):
        _, title = codec.decode(b"#EXTM3U\nhttp://one\n")
        assert title == "http://one"

    def test_empty_name_kept(self, codec):
        entry = WebradioEntry(uri="http://a", name="")
        decoded, title = codec.decode(codec.encode(entry), entry.filename)
        assert decoded == entry
        assert decoded.name == ""
        assert title == "http://a"

    def test_name_from_extinf_when_playlist_missing(self, codec):
        decoded, title = codec.decode(b"#EXTM3U\n#PLAYLIST:\n#EXTINF:-1,Radio One\nhttp://one\n")
        assert decoded.name == title == "Radio One"

    def test_invalid_bitrate(self, codec):
        decoded, _ = codec.decode(b"#EXTM3U\n#BITRATE:fast\nhttp://one\n")
        assert decoded.bitrate == 0

    def test_bom_and_crlf(self, codec):
        data = "\ufeff#EXTM3U\r\n#PLAYLIST:Café\r\nhttp://cafe\r\n".encode("utf-8")
        decoded, title = codec.decode(data)
        assert title == "Café"
        assert decoded.uri == "http://cafe"
