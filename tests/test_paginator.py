"""
Tests for Paginator and page_window.
"""

import pytest
from starlette.requests import Request

from dolphin.common.paginator import Paginator, page_window
from dolphin.schemas.page import PageSchema


def _request(path: str) -> Request:
    return Request({
        "type": "http",
        "method": "GET",
        "path": path,
        "query_string": b"page=3",
        "headers": [],
    })


class TestPageWindow:
    """Tests for the page offset arithmetic."""

    def test_first_page(self):
        assert page_window(1, 10) == (1, 0, 10)

    def test_later_page(self):
        assert page_window(3, 25) == (3, 50, 75)

    @pytest.mark.parametrize("page_number", [0, -1])
    def test_non_positive_page_is_clamped(self, page_number):
        assert page_window(page_number, 10) == (1, 0, 10)

    def test_non_positive_page_size_is_rejected(self):
        with pytest.raises(ValueError, match="page_size must be at least 1"):
            page_window(1, 0)


class TestPaginator:
    """Tests for page construction and link building."""

    def test_first_page_of_hundred_items(self):
        """
        Arrange: 100 items, page 1, page size 10
        Act: Build paginator
        Assert: Count, results, next link present, no previous link
        """
        # Arrange
        data = list(range(100))

        # Act
        paginator = Paginator(data, 1, 10, "/foos")

        # Assert
        assert paginator.count == 100
        assert paginator.current_page == 1
        assert paginator.total_pages == 10
        assert paginator.results == list(range(10))
        assert paginator.previous is None
        assert paginator.next == "/foos?page=2"

    def test_middle_page_links(self):
        paginator = Paginator(list(range(100)), 5, 10, "/foos")

        assert paginator.results == list(range(40, 50))
        assert paginator.next == "/foos?page=6"
        assert paginator.previous == "/foos?page=4"

    def test_last_page_has_no_next(self):
        paginator = Paginator(list(range(25)), 3, 10, "/foos")

        assert paginator.total_pages == 3
        assert paginator.results == [20, 21, 22, 23, 24]
        assert paginator.next is None
        assert paginator.previous == "/foos?page=2"

    def test_page_past_end_is_empty(self):
        paginator = Paginator(list(range(25)), 7, 10, "/foos")

        assert paginator.results == []
        assert paginator.next is None
        assert paginator.previous == "/foos?page=6"

    def test_empty_collection(self):
        paginator = Paginator([], 1, 10, "/foos")

        assert paginator.count == 0
        assert paginator.total_pages == 0
        assert paginator.results == []
        assert paginator.next is None
        assert paginator.previous is None

    def test_non_positive_page_is_clamped(self):
        paginator = Paginator(list(range(30)), 0, 10, "/foos")

        assert paginator.current_page == 1
        assert paginator.results == list(range(10))
        assert paginator.previous is None

    def test_accepts_generators(self):
        paginator = Paginator((i * i for i in range(12)), 2, 5, "/squares")

        assert paginator.count == 12
        assert paginator.results == [25, 36, 49, 64, 81]

    def test_links_are_reproducible(self):
        first = Paginator(list(range(50)), 2, 10, "/api/v1/foos")
        second = Paginator(list(range(50)), 2, 10, "/api/v1/foos")

        assert (first.next, first.previous) == (second.next, second.previous)
        assert first.next == "/api/v1/foos?page=3"
        assert first.previous == "/api/v1/foos?page=1"

    def test_custom_query_param(self):
        paginator = Paginator(list(range(50)), 2, 10, "/foos", query_param="p")

        assert paginator.next == "/foos?p=3"
        assert paginator.previous == "/foos?p=1"

    def test_from_request_uses_request_path(self):
        paginator = Paginator.from_request(list(range(30)), 3, 10, _request("/foos"))

        assert paginator.previous == "/foos?page=2"
        assert paginator.next is None

    def test_to_schema(self):
        paginator = Paginator(list(range(30)), 2, 10, "/foos")

        schema = paginator.to_schema()

        assert isinstance(schema, PageSchema)
        assert schema.model_dump() == {
            "count": 30,
            "current_page": 2,
            "total_pages": 3,
            "next": "/foos?page=3",
            "previous": "/foos?page=1",
            "results": list(range(10, 20)),
        }
