"""
Offset pagination for list endpoints that return neither a total nor a cursor.

Each request asks for list_limit + 1 records. Receiving the extra record
proves another page exists; it is dropped and re-read as the first record of
the next window.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import (
    AsyncIterator,
    Awaitable,
    Callable,
    Generic,
    List,
    Optional,
    Sequence,
    Tuple,
    TypeVar,
)

T = TypeVar("T")

LIST_LIMIT = 100

# fetch_page(offset, window) -> records starting at offset, at most window long
PageFetcher = Callable[[int, int], Awaitable[Sequence[T]]]


@dataclass(frozen=True)
class PageState:
    offset: int = 0
    done: bool = False


def validate_list_limit(list_limit: int) -> int:
    if isinstance(list_limit, bool) or not isinstance(list_limit, int):
        raise TypeError(
            f"list_limit must be an int, got {type(list_limit).__name__}"
        )
    if list_limit <= 0:
        raise ValueError(f"list_limit must be positive, got {list_limit}")
    return list_limit


def advance(
    state: PageState, page: Sequence[T], list_limit: int
) -> Tuple[List[T], PageState]:
    """Return the records to keep from page and the state for the next fetch."""
    if state.done:
        raise RuntimeError("Pagination already finished.")
    if len(page) > list_limit:
        return list(page[:list_limit]), PageState(offset=state.offset + list_limit)
    return list(page), PageState(offset=state.offset, done=True)


class Paginator(Generic[T]):
    """
    Drives fetch_page sequentially until a short page arrives.
    - Preserves server order; no sorting or dedup
    - Cancellation during a fetch propagates; no further pages are requested
    """

    def __init__(
        self,
        fetch_page: PageFetcher[T],
        *,
        list_limit: int = LIST_LIMIT,
        logger: Optional[logging.Logger] = None,
    ):
        self.fetch_page = fetch_page
        self.list_limit = validate_list_limit(list_limit)
        self.log = logger or logging.getLogger("cloudian_admin.pagination")

    @property
    def window(self) -> int:
        return self.list_limit + 1

    async def pages(self) -> AsyncIterator[List[T]]:
        state = PageState()
        while not state.done:
            page = await self.fetch_page(state.offset, self.window)
            self.log.debug(
                "page.fetched",
                extra={"offset": state.offset, "page_size": len(page)},
            )
            records, state = advance(state, page, self.list_limit)
            if records:
                yield records

    async def collect(self) -> List[T]:
        out: List[T] = []
        async for records in self.pages():
            out.extend(records)
        return out


__all__ = [
    "LIST_LIMIT",
    "PageFetcher",
    "PageState",
    "Paginator",
    "advance",
    "validate_list_limit",
]
