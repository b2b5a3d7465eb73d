"""
Client-side search and pagination state for the listing.

SearchState owns everything the listing page keeps between fetches: the text
being typed, the committed search, the current page, the last good result,
and the load status.

Every committed search or page change produces a FetchRequest tagged with a
monotonically increasing generation. A response is applied only when its
request is still the newest one; responses for older requests are dropped,
so a slow fetch can never overwrite the state of a newer one. After close()
no response is applied at all.
"""

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, List, Optional

from pitchcraft.errors import PitchCraftError
from pitchcraft.listing.pagination import PAGE_SIZE, PageWindow, clamp_page, page_window, total_pages_for
from pitchcraft.listing.query import ListingPage, ListingQuery, build_listing_query
from pitchcraft.types import StartupListingRow

logger = logging.getLogger(__name__)


class LoadStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class FetchRequest:
    """A pending fetch, tagged with the generation that issued it."""

    generation: int
    query: ListingQuery


class SearchState:
    """
    Search/pagination state with a stale-response guard.

    Typical use:

        state = SearchState()
        request = state.commit_search("#ai")
        page = client.fetch_listing_page(request.query)
        state.apply_result(request, page)

    or, from async code, `await state.refresh(fetch)`.
    """

    def __init__(self, page_size: int = PAGE_SIZE) -> None:
        self.page_size = page_size
        self.input_text = ""
        self.committed_text = ""
        self.current_page = 1
        self.total_count = 0
        self.rows: List[StartupListingRow] = []
        self.status = LoadStatus.IDLE
        self.error: Optional[str] = None

        self._generation = 0
        self._closed = False

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------
    @property
    def generation(self) -> int:
        return self._generation

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def total_pages(self) -> int:
        return total_pages_for(self.total_count, self.page_size)

    def window(self) -> PageWindow:
        return page_window(clamp_page(self.current_page, self.total_pages), self.total_pages)

    def current_query(self) -> ListingQuery:
        return build_listing_query(self.current_page, self.committed_text, self.page_size)

    # ------------------------------------------------------------------
    # Transitions that issue a new request
    # ------------------------------------------------------------------
    def _issue(self) -> FetchRequest:
        self._generation += 1
        self.status = LoadStatus.LOADING
        self.error = None
        return FetchRequest(generation=self._generation, query=self.current_query())

    def set_input(self, text: str) -> None:
        """Update the text being typed; nothing is fetched until commit."""
        self.input_text = text

    def commit_search(self, text: Optional[str] = None) -> FetchRequest:
        """
        Commit the search text and jump back to page 1.

        `committed_text` never changes without the page being reset.
        """
        if text is not None:
            self.input_text = text
        self.committed_text = self.input_text
        self.current_page = 1
        return self._issue()

    def go_to_page(self, page: int) -> FetchRequest:
        """Move to `page`, clamped to the pages known so far."""
        self.current_page = clamp_page(page, self.total_pages)
        return self._issue()

    def reload(self) -> FetchRequest:
        """Re-issue the current query (initial load, or retry after an error)."""
        return self._issue()

    # ------------------------------------------------------------------
    # Applying responses
    # ------------------------------------------------------------------
    def is_current(self, request: FetchRequest) -> bool:
        return not self._closed and request.generation == self._generation

    def apply_result(self, request: FetchRequest, page: ListingPage) -> bool:
        """
        Apply a successful response if `request` is still current.

        Returns True when the response was applied, False when it was stale.
        """
        if not self.is_current(request):
            logger.debug("Dropping stale listing response generation=%s", request.generation)
            return False

        self.rows = list(page.rows)
        self.total_count = page.total_count
        self.status = LoadStatus.SUCCESS
        self.error = None
        return True

    def apply_error(self, request: FetchRequest, message: str) -> bool:
        """
        Apply a failed response if `request` is still current.

        The previous rows are cleared: an error is never shown alongside
        stale data.
        """
        if not self.is_current(request):
            logger.debug("Dropping stale listing error generation=%s", request.generation)
            return False

        self.rows = []
        self.status = LoadStatus.ERROR
        self.error = message
        return True

    async def refresh(
        self,
        fetch: Callable[[ListingQuery], Awaitable[ListingPage]],
        request: Optional[FetchRequest] = None,
    ) -> bool:
        """
        Run `fetch` for `request` (or a fresh reload) and apply the outcome.

        Other transitions may happen while the fetch is awaited; the result
        is applied only if nothing newer was issued in the meantime.
        """
        request = request or self.reload()
        try:
            page = await fetch(request.query)
        except PitchCraftError as exc:
            logger.error("Listing fetch failed: %s", exc)
            return self.apply_error(request, str(exc))
        return self.apply_result(request, page)

    def close(self) -> None:
        """Stop applying responses; in-flight fetches are simply ignored."""
        self._closed = True


def threaded_fetch(fetch: Callable[[ListingQuery], ListingPage]) -> Callable[[ListingQuery], Awaitable[ListingPage]]:
    """
    Adapt a blocking fetch (e.g. SupabaseClient.fetch_listing_page) for
    SearchState.refresh() by running it in a worker thread.
    """

    async def _fetch(query: ListingQuery) -> ListingPage:
        return await asyncio.to_thread(fetch, query)

    return _fetch
