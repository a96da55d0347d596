"""
Pydantic schema for paginated responses.
"""

from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class PageSchema(BaseModel, Generic[T]):
    """
    Response model for one page of results.

    Attributes:
        count: Total number of items across all pages
        current_page: 1-based page number
        total_pages: Number of pages
        next: Link to the next page (optional)
        previous: Link to the previous page (optional)
        results: Items on this page
    """
    model_config = ConfigDict(from_attributes=True)

    count: int = Field(
        ge=0,
        description="Total number of items across all pages"
    )
    current_page: int = Field(
        ge=1,
        description="1-based page number"
    )
    total_pages: int = Field(
        ge=0,
        description="Number of pages"
    )
    next: Optional[str] = Field(
        default=None,
        description="Link to the next page"
    )
    previous: Optional[str] = Field(
        default=None,
        description="Link to the previous page"
    )
    results: List[T] = Field(
        default_factory=list,
        description="Items on this page"
    )
