"""Pagination value objects shared by every listing."""

import math

from pydantic import Field

from blog.domain.value.common import ValueObject


class PageRequest(ValueObject):
    """1-based page number and page size."""

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)

    @property
    def offset(self) -> int:
        """Number of rows to skip."""
        return (self.page - 1) * self.limit


class Pagination(ValueObject):
    """Pagination metadata returned alongside a page of items."""

    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int

    @classmethod
    def from_total(cls, page_request: PageRequest, total: int) -> "Pagination":
        """Build metadata for a page given the total number of matching items.

        total_pages is ceil(total / limit), so the last page carries
        the remainder.
        """
        return cls(
            current_page=page_request.page,
            total_pages=math.ceil(total / page_request.limit),
            total_items=total,
            items_per_page=page_request.limit,
        )
