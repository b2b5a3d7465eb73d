"""
Listing query construction.

Translates a (page, search_text) pair into a Supabase query against the
`StartupInfo` table:

    • order by id, newest first
    • offset window of PAGE_SIZE rows for the requested page
    • exact count of the filtered set, independent of the window
    • one of three search modes:

          "#ai"   → tag mode:  hashtags contains ["ai"]
          "ai"    → text mode: name ILIKE %ai% OR description ILIKE %ai%
          ""      → no filter

The ordering on `id` is what keeps pagination stable: for a fixed snapshot
no row appears on two pages and none is skipped.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional

from pitchcraft.listing.pagination import PAGE_SIZE, total_pages_for
from pitchcraft.types import StartupListingRow

STARTUP_TABLE = "StartupInfo"
LISTING_COLUMNS = "id,name,description,hashtags"

# Characters that must be quoted inside a PostgREST `or=(...)` expression.
_RESERVED = set(',()"\\')


class SearchMode(str, Enum):
    NONE = "none"
    TAG = "tag"
    TEXT = "text"


def _quote_or_value(value: str) -> str:
    if not any(ch in _RESERVED for ch in value):
        return value
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


@dataclass(frozen=True)
class ListingQuery:
    """
    An immutable description of one listing fetch.

    Two ListingQuery values built from the same inputs compare equal, and
    applying either to an unchanged table yields the same page and count.
    """

    page: int
    search_text: str = ""
    page_size: int = PAGE_SIZE

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError("page must be >= 1")
        if self.page_size < 1:
            raise ValueError("page_size must be >= 1")

    # ------------------------------------------------------------------
    # Window
    # ------------------------------------------------------------------
    @property
    def range_from(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def range_to(self) -> int:
        return self.page * self.page_size - 1

    # ------------------------------------------------------------------
    # Search mode
    # ------------------------------------------------------------------
    @property
    def trimmed(self) -> str:
        return (self.search_text or "").strip()

    @property
    def tag(self) -> Optional[str]:
        """Lower-cased tag for tag mode, or None."""
        text = self.trimmed
        if not text.startswith("#"):
            return None
        return text[1:].lower() or None

    @property
    def mode(self) -> SearchMode:
        text = self.trimmed
        if not text:
            return SearchMode.NONE
        if text.startswith("#"):
            return SearchMode.TAG if self.tag else SearchMode.NONE
        return SearchMode.TEXT

    def text_filter(self) -> Optional[str]:
        """PostgREST `or` expression for text mode, or None."""
        if self.mode is not SearchMode.TEXT:
            return None
        pattern = _quote_or_value(f"%{self.trimmed}%")
        return f"name.ilike.{pattern},description.ilike.{pattern}"

    # ------------------------------------------------------------------
    # Builder translation
    # ------------------------------------------------------------------
    def apply(self, table: Any) -> Any:
        """
        Apply this query to a Supabase table builder.

        `table` is the object returned by `client.table(STARTUP_TABLE)`.
        The returned builder is ready for `.execute()`.
        """
        builder = table.select(LISTING_COLUMNS, count="exact")

        if self.mode is SearchMode.TAG:
            builder = builder.contains("hashtags", [self.tag])
        elif self.mode is SearchMode.TEXT:
            builder = builder.or_(self.text_filter())

        return builder.order("id", desc=True).range(self.range_from, self.range_to)


def build_listing_query(page: int, search_text: str = "", page_size: int = PAGE_SIZE) -> ListingQuery:
    """Build the query for `page` (1-based) and the committed search text."""
    return ListingQuery(page=page, search_text=search_text or "", page_size=page_size)


@dataclass
class ListingPage:
    """One page of listing rows plus the exact filtered total."""

    rows: List[StartupListingRow]
    total_count: int
    page: int
    page_size: int = PAGE_SIZE
    query: Optional[ListingQuery] = field(default=None, compare=False)

    @property
    def total_pages(self) -> int:
        return total_pages_for(self.total_count, self.page_size)

    @property
    def is_empty(self) -> bool:
        return not self.rows
