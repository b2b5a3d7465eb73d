"""
Public listing API surface.

Pure helpers for the startup listing: tag normalization, query
construction, the page window, and the client-side search state.

The Supabase-backed detail lookup lives in pitchcraft.listing.detail and is
intentionally not re-exported here.
"""

from .hashtags import MAX_HASHTAGS, format_hashtag, normalize_hashtags
from .pagination import PAGE_SIZE, PageWindow, clamp_page, page_window, total_pages_for
from .query import ListingPage, ListingQuery, SearchMode, build_listing_query
from .search_state import FetchRequest, LoadStatus, SearchState

__all__ = [
    "MAX_HASHTAGS",
    "format_hashtag",
    "normalize_hashtags",
    "PAGE_SIZE",
    "PageWindow",
    "clamp_page",
    "page_window",
    "total_pages_for",
    "ListingPage",
    "ListingQuery",
    "SearchMode",
    "build_listing_query",
    "FetchRequest",
    "LoadStatus",
    "SearchState",
]
