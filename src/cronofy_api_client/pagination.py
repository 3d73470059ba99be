import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, List, Mapping, Optional, Tuple, TypeVar, TYPE_CHECKING

from .utils.log_sanitizer import sanitize_for_logging

if TYPE_CHECKING:
    from .transport import ApiTransport

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Pages:
    """
    Pagination envelope accompanying multi-page list responses.
    Args:
        current: The number of this page, starting at 1.
        total: The total number of pages.
        next_page: Absolute URL of the following page, unset on the last page.
    """
    current: int = 1
    total: int = 1
    next_page: Optional[str] = None

    def has_next_page(self) -> bool:
        return bool(self.next_page)


def from_api_pages(pages_data: Optional[Mapping[str, Any]]) -> Pages:
    """Map a ``pages`` envelope; a missing envelope means a single page."""
    if not pages_data:
        return Pages()
    return Pages(
        current=int(pages_data.get("current", 1)),
        total=int(pages_data.get("total", 1)),
        next_page=pages_data.get("next_page"),
    )


class PagedResultIterator(Generic[T]):
    """
    Iterates over every item of a multi-page list endpoint.

    The first page is requested when the iterator is created, so errors such
    as invalid credentials or parameters are raised where the call is made
    rather than wherever the iterator is first consumed. Later pages are
    fetched one at a time, only once the items before them have been consumed,
    by following each page's ``next_page`` URL.

    The iterator is forward-only: once exhausted, call the endpoint again for a
    fresh one.

    Example:
        events = client.read_events({"from": start})
        first = next(events)        # no second page request yet
        remaining = list(events)    # fetches the remaining pages
    """

    def __init__(
            self,
            transport: "ApiTransport",
            data_key: str,
            mapper: Callable[[Mapping[str, Any]], T],
            path: str,
            params: Optional[List[Tuple[str, str]]] = None
    ):
        """
        Args:
            transport: Transport used for every page request.
            data_key: Key of the item array in each page, e.g. "events".
            mapper: Function turning one item into an entity.
            path: Path of the first page.
            params: Encoded query parameters for the first page only.
        """
        self._transport = transport
        self._data_key = data_key
        self._mapper = mapper

        first_page = transport.get(path, params=params)
        self.pages = self._read_pages(first_page)
        self._items = self._iterate(first_page)

    def _read_pages(self, page: Optional[Mapping[str, Any]]) -> Pages:
        return from_api_pages((page or {}).get("pages"))

    def _iterate(self, page: Optional[Mapping[str, Any]]) -> Iterator[T]:
        while True:
            items = (page or {}).get(self._data_key) or []
            logger.info("Fetched %d %s on page %d of %d",
                        len(items), self._data_key, self.pages.current, self.pages.total)
            for item in items:
                yield self._mapper(item)

            if not self.pages.has_next_page():
                return

            next_page = self.pages.next_page
            logger.debug("Following next page %s", sanitize_for_logging(next_page=next_page)["next_page"])
            page = self._transport.get(next_page)
            self.pages = self._read_pages(page)

    def __iter__(self) -> "PagedResultIterator[T]":
        return self

    def __next__(self) -> T:
        return next(self._items)
