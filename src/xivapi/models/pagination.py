"""Pagination envelope shared by XIVAPI search endpoints."""

from typing import Generic, TypeVar

from pydantic import Field

from .base import U8, U16, U32, XIVModel

T = TypeVar("T")


class Pagination(XIVModel):
    """Paging metadata of a search response.

    `page_next`/`page_prev` are absent (or null) at the respective end of
    the result sequence.
    """

    page: U16 = Field(..., description="Current page number")
    page_next: U16 | None = Field(None, description="Next page, if any")
    page_prev: U16 | None = Field(None, description="Previous page, if any")
    page_total: U16 = Field(..., description="Total number of pages")
    results: U8 = Field(..., description="Number of results on this page")
    results_per_page: U8 = Field(..., description="Page size used by upstream")
    results_total: U32 = Field(..., description="Total number of matches")

    @property
    def has_next(self) -> bool:
        """Whether another page can be requested after this one."""
        return self.page_next is not None

    @property
    def has_prev(self) -> bool:
        """Whether a page precedes this one."""
        return self.page_prev is not None


class SearchResults(XIVModel, Generic[T]):
    """A page of search results, in the order ranked by upstream."""

    pagination: Pagination
    results: list[T]
