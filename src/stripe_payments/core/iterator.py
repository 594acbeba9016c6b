"""
Lazy iteration over paginated list endpoints.

A :class:`ListIterator` keeps one page in memory and asks for the next one
only when the caller has consumed the current page::

    it = client.bitcoin_transactions.list(params)
    while it.advance():
        print(it.current.id)
    if it.last_error is not None:
        raise it.last_error

Plain ``for`` loops work as well and re-raise the fetch error at the end.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, Callable, Generic, Iterator, List, Optional, TypeVar

from .errors import StripeError
from .models import ListMeta, Page
from .params import ListParams

__all__ = ["FetchPage", "ListIterator"]

T = TypeVar("T")

FetchPage = Callable[[ListParams], Page]


def _item_id(item: Any) -> str:
    return getattr(item, "id")


class ListIterator(Generic[T]):
    def __init__(
        self,
        params: Optional[ListParams],
        fetch_page: FetchPage,
    ) -> None:
        if params is None:
            params = ListParams()
        params.validate()
        # cursors are written to this copy, never to the caller's object
        self._params = dataclasses.replace(params, filters=params.filters.copy())
        self._fetch_page = fetch_page
        self._backward = self._params.backward

        self._page: Optional[Page] = None
        self._values: List[T] = []
        self._index = -1
        self._error: Optional[StripeError] = None
        self._exhausted = False

    @property
    def params(self) -> ListParams:
        """The parameters the next fetch will use."""
        return self._params

    @property
    def current(self) -> T:
        if self._error is not None or self._exhausted or not 0 <= self._index < len(self._values):
            raise RuntimeError("No current element; call advance() first")
        return self._values[self._index]

    @property
    def meta(self) -> Optional[ListMeta]:
        return self._page.meta if self._page is not None else None

    @property
    def last_error(self) -> Optional[StripeError]:
        return self._error

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def advance(self) -> bool:
        """
        Move to the next element, fetching a new page when needed.

        Returns ``False`` once the results are exhausted or a fetch failed;
        the failure is then available from :attr:`last_error` and no further
        requests are made.
        """
        if self._error is not None or self._exhausted:
            return False

        if self._index + 1 < len(self._values):
            self._index += 1
            return True

        if self._page is not None and (self._params.single or not self._page.meta.has_more):
            return self._exhaust()

        retried = False
        while True:
            if self._values:
                self._move_cursor(_item_id(self._values[-1]))

            if not self._fetch():
                return False

            if self._values:
                self._index = 0
                return True

            # an empty page claiming more results gets one retry
            if self._params.single or not self._page.meta.has_more or retried:
                return self._exhaust()
            logging.debug("Received an empty page with has_more set; retrying once")
            retried = True

    def _move_cursor(self, item_id: str) -> None:
        if self._backward:
            self._params.ending_before = item_id
        else:
            self._params.starting_after = item_id

    def _fetch(self) -> bool:
        logging.debug(
            "Fetching list page (starting_after=%s, ending_before=%s)",
            self._params.starting_after,
            self._params.ending_before,
        )
        try:
            page = self._fetch_page(self._params)
        except StripeError as exc:
            logging.debug("List page fetch failed: %s", exc)
            self._error = exc
            self._values = []
            self._index = -1
            return False

        self._page = page
        # pages arrive newest first; when paging backward the newest item
        # must end up last so that it becomes the next ending_before cursor
        self._values = list(reversed(page.data)) if self._backward else list(page.data)
        self._index = -1
        return True

    def _exhaust(self) -> bool:
        self._exhausted = True
        self._values = []
        self._index = -1
        return False

    def __iter__(self) -> Iterator[T]:
        while self.advance():
            yield self.current
        if self._error is not None:
            raise self._error
