"""Tests for listing pagination."""

import pytest

from webradios import WebradioEntry
from webradios.filters import SortedIndex
from webradios.index import paginate


@pytest.fixture
def index():
    index = SortedIndex()
    for i in range(7):
        name = f"Station {i}"
        index.insert(name, f"{i}.m3u", WebradioEntry(uri=f"http://{i}", name=name))
    return index


class TestPaginate:
    def test_first_page(self, index):
        result = paginate(index, 0, 3)
        assert [e.filename for e in result] == ["0.m3u", "1.m3u", "2.m3u"]
        assert result.total_matched == 7
        assert result.returned == 3

    def test_last_page_is_clipped(self, index):
        result = paginate(index, 5, 10)
        assert [e.filename for e in result] == ["5.m3u", "6.m3u"]
        assert result.returned == 2

    def test_offset_past_end(self, index):
        result = paginate(index, 20, 5)
        assert result.entries == []
        assert result.total_matched == 7
        assert result.returned == 0

    def test_zero_limit_counts_only(self, index):
        result = paginate(index, 0, 0)
        assert result.returned == 0
        assert result.total_matched == 7

    @pytest.mark.parametrize("offset", [0, 1, 3, 6, 7, 9])
    @pytest.mark.parametrize("limit", [0, 1, 2, 7, 50])
    def test_window_is_contiguous_slice(self, index, offset, limit):
        ordered = index.ordered()
        result = paginate(index, offset, limit)
        assert result.returned == min(limit, max(0, result.total_matched - offset))
        assert result.entries == ordered[offset:offset + result.returned]

    @pytest.mark.parametrize("offset, limit", [(-1, 10), (0, -1)])
    def test_negative_arguments(self, index, offset, limit):
        with pytest.raises(ValueError):
            paginate(index, offset, limit)

    def test_to_dict(self, index):
        data = paginate(index, 1, 1).to_dict()
        assert data["totalEntities"] == 7
        assert data["returnedEntities"] == 1
        assert data["data"][0]["filename"] == "1.m3u"
        assert data["data"][0]["Name"] == "Station 1"
