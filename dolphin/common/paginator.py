"""
Pagination over an already materialized collection.

Slices a result set into one page and computes next/previous links from
the current request path.
"""

import logging
import math
from typing import Generic, Iterable, List, Optional, Tuple, TypeVar

from starlette.requests import Request

from dolphin.core.config import settings
from dolphin.schemas.page import PageSchema

logger = logging.getLogger(__name__)

T = TypeVar("T")


def page_window(page_number: int, page_size: int) -> Tuple[int, int, int]:
    """
    Compute the effective page and its slice bounds.

    Page numbers are 1-based; values below 1 are clamped to 1.

    Args:
        page_number: Requested page number
        page_size: Number of items per page

    Returns:
        Tuple of (effective page number, start offset, stop offset)

    Raises:
        ValueError: If page_size is less than 1
    """
    if page_size < 1:
        raise ValueError(f"page_size must be at least 1, got {page_size}")

    if page_number < 1:
        logger.debug(
            "Clamping page number to 1",
            extra={"page_number": page_number, "page_size": page_size},
        )
        page_number = 1

    start = (page_number - 1) * page_size
    return page_number, start, start + page_size


class Paginator(Generic[T]):
    """
    Read-only page view over a materialized collection.

    Attributes:
        count: Total number of items in the source collection
        current_page: Effective 1-based page number
        total_pages: Number of pages needed for all items
        next: Link to the following page, or None on the last page
        previous: Link to the preceding page, or None on the first page
        results: Items on the current page

    Example:
        >>> paginator = Paginator(range(100), 1, 10, "/foos")
        >>> paginator.next, paginator.previous
        ('/foos?page=2', None)
    """

    def __init__(
        self,
        data: Iterable[T],
        page_number: int,
        page_size: int,
        path: str,
        query_param: Optional[str] = None,
    ):
        items = list(data)
        self.page_size = page_size
        self.query_param = query_param or settings.page_query_param

        self.current_page, start, stop = page_window(page_number, page_size)
        self.count = len(items)
        self.total_pages = math.ceil(self.count / page_size)

        self.next = self._link(path, self.current_page + 1) \
            if self.current_page < self.total_pages else None
        self.previous = self._link(path, self.current_page - 1) \
            if self.current_page > 1 else None

        self.results: List[T] = items[start:stop]

    @classmethod
    def from_request(
        cls,
        data: Iterable[T],
        page_number: int,
        page_size: int,
        request: Request,
    ) -> "Paginator[T]":
        """
        Build a paginator whose links point at the request's path.

        Args:
            data: Materialized collection to paginate
            page_number: Requested page number
            page_size: Number of items per page
            request: Current Starlette/FastAPI request
        """
        return cls(data, page_number, page_size, request.url.path)

    def _link(self, path: str, page_number: int) -> str:
        return f"{path}?{self.query_param}={page_number}"

    def to_schema(self) -> PageSchema:
        """Serialize the page as a pydantic model."""
        return PageSchema(
            count=self.count,
            current_page=self.current_page,
            total_pages=self.total_pages,
            next=self.next,
            previous=self.previous,
            results=self.results,
        )
