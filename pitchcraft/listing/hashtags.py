"""
Hashtag normalization for startup listings.

Pure helpers used by the admin form and the listing search. These functions
never touch Supabase; they only turn free-text tag input into the canonical
list stored in the `hashtags` column.

Canonical tags:
    • carry no leading "#"
    • keep the case they were entered with ("AI" and "ai" are distinct)
    • appear at most once, in first-seen order
    • number at most MAX_HASHTAGS
"""

import re
from typing import Iterable, List, Set

from pitchcraft.errors import HashtagValidationError

MAX_HASHTAGS = 20

_SEPARATORS = re.compile(r"[\s,]+")


def _canonical(token: str) -> str:
    token = token.strip()
    if token.startswith("#"):
        token = token[1:]
    return token


def dedupe_tags(tokens: Iterable[str], limit: int = MAX_HASHTAGS) -> List[str]:
    """
    Canonicalize and deduplicate already-split tokens.

    Empty tokens (including a bare "#") are dropped. The result is cut to
    `limit` entries after deduplication.
    """
    seen: Set[str] = set()
    tags: List[str] = []

    for raw in tokens:
        tag = _canonical(raw)
        if not tag or tag in seen:
            continue
        seen.add(tag)
        tags.append(tag)

    return tags[:limit]


def normalize_hashtags(raw: str) -> List[str]:
    """
    Convert free-text tag input into a canonical tag list.

    Example:
        normalize_hashtags("#AI, ai, startup startup") == ["AI", "ai", "startup"]

    Args:
        raw:
            Tags separated by any run of whitespace and/or commas. Each tag
            may carry a single leading "#".

    Returns:
        Between 1 and MAX_HASHTAGS canonical tags.

    Raises:
        HashtagValidationError:
            If no valid tag remains after normalization.
    """
    tags = dedupe_tags(_SEPARATORS.split(raw or ""))
    if not tags:
        raise HashtagValidationError("At least one hashtag is required.")
    return tags


def format_hashtag(tag: str) -> str:
    """Render a stored tag for display, adding the "#" prefix once."""
    return tag if tag.startswith("#") else f"#{tag}"
