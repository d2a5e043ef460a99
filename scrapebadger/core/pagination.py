"""Cursor-based pagination helpers."""

from typing import AsyncIterator, Awaitable, Callable, Generic, TypeVar

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

T = TypeVar("T")


class PaginatedResponse(BaseModel, Generic[T]):
    """
    One page of results.

    ``has_more`` is derived from ``next_cursor`` and cannot be set directly.
    """

    model_config = ConfigDict(frozen=True)

    data: list[T] = Field(default_factory=list, description="Items in the current page")
    next_cursor: str | None = Field(default=None, description="Cursor for the next page")

    @field_validator("next_cursor")
    @classmethod
    def empty_cursor_is_none(cls, v: str | None) -> str | None:
        return v or None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_more(self) -> bool:
        """Whether another page is available."""
        return self.next_cursor is not None

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self):
        return iter(self.data)


def create_paginated_response(data: list[T], cursor: str | None = None) -> PaginatedResponse[T]:
    """Create a page from its items and optional continuation cursor."""
    return PaginatedResponse(data=data, next_cursor=cursor)


async def paginate(
    fetch_page: Callable[[str | None], Awaitable[PaginatedResponse[T]]],
    max_items: int | None = None,
) -> AsyncIterator[T]:
    """
    Follow cursors and yield items one at a time.

    Pages are fetched lazily: the next page is only requested once every
    item of the current page has been consumed, so abandoning the iterator
    stops all further requests.

    Args:
        fetch_page: Async callable returning the page for a cursor
            (``None`` for the first page)
        max_items: Maximum total items to yield (None for all)

    Yields:
        Items from each page, in order
    """
    if max_items is not None and max_items <= 0:
        return

    cursor: str | None = None
    yielded = 0
    page_num = 0

    while True:
        page = await fetch_page(cursor)
        page_num += 1
        logger.debug(f"Page {page_num}: {len(page.data)} items (has_more={page.has_more})")

        for item in page.data:
            yield item
            yielded += 1

            if max_items is not None and yielded >= max_items:
                logger.debug(f"Reached max items limit ({max_items})")
                return

        cursor = page.next_cursor
        if not cursor:
            return


async def collect_all(iterator: AsyncIterator[T]) -> list[T]:
    """
    Collect every item of an async iterator into a list.

    The iterator must be finite (pass ``max_items`` or rely on the API
    running out of pages).
    """
    return [item async for item in iterator]
