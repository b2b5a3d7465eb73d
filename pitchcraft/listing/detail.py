"""
Startup detail lookup and presentation helpers.

A detail lookup has three distinct outcomes:

    • found       → the StartupDetailRow
    • not found   → StartupNotFound (rendered as "not found", not an error)
    • failure     → SupabaseError / ValidationError (rendered as an error)
"""

import re
from typing import Any, List, Optional

from pitchcraft.errors import StartupNotFound, ValidationError
from pitchcraft.listing.hashtags import format_hashtag
from pitchcraft.supabase_client import SupabaseClient
from pitchcraft.types import StartupDetailRow

MAX_DETAIL_TAGS = 12
CARD_DESCRIPTION_CHARS = 100
CARD_TAGS = 4

_SCHEME = re.compile(r"^https?://")


def parse_startup_id(raw: Any) -> int:
    """
    Parse a route/CLI id into a positive integer.

    Raises ValidationError("Invalid startup id") for anything else.
    """
    try:
        value = int(str(raw).strip())
    except (TypeError, ValueError):
        raise ValidationError("Invalid startup id") from None
    if value < 1:
        raise ValidationError("Invalid startup id")
    return value


def get_startup(client: SupabaseClient, raw_id: Any) -> StartupDetailRow:
    startup_id = parse_startup_id(raw_id)
    row = client.fetch_startup(startup_id)
    if row is None:
        raise StartupNotFound(startup_id)
    return row


def display_linkedin(url: Optional[str]) -> str:
    """Founder LinkedIn URL without its http(s):// scheme."""
    if not url:
        return ""
    return _SCHEME.sub("", url)


def detail_tags(row: StartupDetailRow) -> List[str]:
    return [format_hashtag(tag) for tag in (row.get("hashtags") or [])[:MAX_DETAIL_TAGS]]


def card_tags(row: Any) -> List[str]:
    return [format_hashtag(tag) for tag in (row.get("hashtags") or [])[:CARD_TAGS]]


def card_description(description: str, expanded: bool = False) -> str:
    """Listing-card description, cut to CARD_DESCRIPTION_CHARS unless expanded."""
    if expanded or len(description) <= CARD_DESCRIPTION_CHARS:
        return description
    return description[:CARD_DESCRIPTION_CHARS] + "…"
