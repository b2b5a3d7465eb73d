"""
Supabase client wrapper for PitchCraft.

This wrapper provides a stable, typed interface over the Supabase Python
client for every table the application touches:

    • StartupInfo  — listing pages, detail lookups, admin inserts
    • userData     — profile lookups and upserts

It supports both real mode (the official SDK created via create_client())
and dry‑run mode (writes are echoed back without touching the database).

Injected clients only need to satisfy SupabaseClientInterface from
pitchcraft/types.py:
    • table(name) → a builder supporting the PostgREST filter chain
    • .execute()  → an SDK response object or a dict with status/data/count
"""

import logging
from typing import Any, Dict, List, Optional, TypeVar, Union, cast

import httpx
from postgrest.exceptions import APIError
from supabase import create_client

from pitchcraft.config import Settings
from pitchcraft.errors import SupabaseError
from pitchcraft.listing.query import STARTUP_TABLE, ListingPage, ListingQuery
from pitchcraft.types import (
    StartupDetailRow,
    StartupInsert,
    StartupListingRow,
    SupabaseClientInterface,
    SupabaseExecuteResponse,
    UserProfileRecord,
)

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Dict[str, Any])

PROFILE_TABLE = "userData"

DETAIL_COLUMNS = (
    "id,name,description,hashtags,extendedDescription,"
    "founderLinkedIn,founderEmail,funding_info,tips"
)
PROFILE_COLUMNS = (
    "id,email,name,education,hobbies,Work_Experience,"
    "Project1,Project2,skills,achievements,additional_data"
)

# ---------------------------------------------------------------------------
# Helpers: normalize Supabase responses
# ---------------------------------------------------------------------------


def _extract_data(resp: Union[SupabaseExecuteResponse, Any]) -> List[T]:
    """
    Normalize Supabase responses across:
        • real SDK response objects
        • dict-style test doubles

    Always returns a list of row dictionaries.
    Raises SupabaseError on any Supabase error.
    """

    # Dict-style response (test doubles)
    if isinstance(resp, dict):
        status = resp.get("status", 200)
        if status >= 400 or resp.get("error"):
            raise SupabaseError(f"Supabase error: {resp.get('error') or resp}")
        data = resp.get("data") or []
        if isinstance(data, list):
            return cast(List[T], data)
        return cast(List[T], [data])

    # maybe_single() on some SDK versions returns None for "no row"
    if resp is None:
        return []

    # SDK-style response
    error = getattr(resp, "error", None)
    if error:
        raise SupabaseError(f"Supabase error: {error}")

    data = getattr(resp, "data", None)
    if data is None:
        return []

    if isinstance(data, list):
        return cast(List[T], data)

    return cast(List[T], [data])


def _extract_count(resp: Union[SupabaseExecuteResponse, Any], fallback: int) -> int:
    """Read the exact count attached by `select(..., count="exact")`."""
    if isinstance(resp, dict):
        count = resp.get("count")
    else:
        count = getattr(resp, "count", None)
    return fallback if count is None else int(count)


# ---------------------------------------------------------------------------
# Main wrapper class
# ---------------------------------------------------------------------------


class SupabaseClient:
    """
    A thin, dependency‑injected wrapper around a Supabase‑compatible client.

    The wrapper forwards calls to the underlying client while providing:

        • typed read helpers for listings, startup details and profiles
        • typed write helpers for startup inserts and profile upserts
        • consistent error normalization (every failure is a SupabaseError)
        • deterministic dry‑run behavior for writes
    """

    def __init__(self, client: Optional[SupabaseClientInterface] = None, dry_run: bool = False) -> None:
        """
        Parameters
        ----------
        client : SupabaseClientInterface | None
            A Supabase‑compatible client (real SDK or test double). None
            leaves the wrapper unconfigured: every call raises SupabaseError.
        dry_run : bool
            If True, writes are validated and echoed back but never sent.
        """
        self.client = client
        self.dry_run = dry_run

    @classmethod
    def from_settings(cls, settings: Settings, dry_run: bool = False) -> "SupabaseClient":
        """
        Factory constructor for production usage.

        Creates the official SDK client from the configured URL and key.
        Missing credentials yield an unconfigured wrapper rather than an
        exception; config.load_settings() has already logged a warning.
        """
        if not settings.is_configured:
            return cls(client=None, dry_run=dry_run)

        sdk_client = create_client(cast(str, settings.supabase_url), cast(str, settings.supabase_key))
        return cls(sdk_client, dry_run=dry_run)

    @property
    def is_configured(self) -> bool:
        return self.client is not None

    # -----------------------------------------------------------------------
    # Internal helpers
    # -----------------------------------------------------------------------

    def _require_client(self) -> SupabaseClientInterface:
        """Return the configured Supabase client or raise SupabaseError."""
        if self.client is None:
            raise SupabaseError("Supabase client is not configured")
        return self.client

    def _execute(self, builder: Any) -> Any:
        """
        Run `.execute()` on a builder.

        The SDK raises APIError for PostgREST failures and lets httpx
        transport errors (connection refused, timeouts) escape; both are
        re-raised as SupabaseError so callers handle a single error type.
        """
        try:
            return builder.execute()
        except APIError as exc:
            raise SupabaseError(f"Supabase error: {exc.message or exc}") from exc
        except httpx.HTTPError as exc:
            logger.warning("Supabase request failed: %s", exc)
            raise SupabaseError(f"Supabase unreachable: {exc}") from exc

    # -----------------------------------------------------------------------
    # Listing
    # -----------------------------------------------------------------------

    def fetch_listing_page(self, query: ListingQuery) -> ListingPage:
        """
        Fetch one listing page and the exact filtered total.

        Raises
        ------
        SupabaseError
            If the client is unconfigured or the query fails. No partial
            data is returned in that case.
        """
        client = self._require_client()
        resp = self._execute(query.apply(client.table(STARTUP_TABLE)))

        rows = cast(List[StartupListingRow], _extract_data(resp))
        total = _extract_count(resp, fallback=len(rows))
        logger.debug(
            "Fetched listing page=%s mode=%s rows=%s total=%s",
            query.page,
            query.mode.value,
            len(rows),
            total,
        )
        return ListingPage(rows=rows, total_count=total, page=query.page, page_size=query.page_size, query=query)

    # -----------------------------------------------------------------------
    # Startup detail + admin insert
    # -----------------------------------------------------------------------

    def fetch_startup(self, startup_id: int) -> Optional[StartupDetailRow]:
        """Return the full startup row, or None when no row has this id."""
        client = self._require_client()
        builder = client.table(STARTUP_TABLE).select(DETAIL_COLUMNS).eq("id", startup_id).limit(1)
        rows = cast(List[StartupDetailRow], _extract_data(self._execute(builder)))
        return rows[0] if rows else None

    def insert_startup(self, record: StartupInsert) -> StartupDetailRow:
        """
        Insert a new startup listing.

        Dry‑run mode returns the payload unchanged (no server id).

        Raises
        ------
        SupabaseError
            If the insert fails or returns no rows.
        """
        if self.dry_run:
            return cast(StartupDetailRow, dict(record))

        client = self._require_client()
        resp = self._execute(client.table(STARTUP_TABLE).insert(dict(record)))
        rows = cast(List[StartupDetailRow], _extract_data(resp))
        if not rows:
            raise SupabaseError(f"Startup insert returned no rows for name={record['name']!r}")

        logger.info("Inserted startup id=%s name=%r", rows[0].get("id"), rows[0].get("name"))
        return rows[0]

    # -----------------------------------------------------------------------
    # Profiles
    # -----------------------------------------------------------------------

    def fetch_profile(self, user_id: str) -> Optional[UserProfileRecord]:
        """Return the profile row for `user_id`, or None if onboarding never ran."""
        client = self._require_client()
        builder = client.table(PROFILE_TABLE).select(PROFILE_COLUMNS).eq("id", user_id).limit(1)
        rows = cast(List[UserProfileRecord], _extract_data(self._execute(builder)))
        return rows[0] if rows else None

    def upsert_profile(self, record: UserProfileRecord) -> UserProfileRecord:
        """
        Insert or replace the profile row keyed by `id`.

        Idempotent: Supabase enforces one row per `id`, so repeating the call
        with the same record leaves stored state unchanged. The profile is
        only considered saved once the write acknowledges a row.

        Raises
        ------
        SupabaseError
            If the write fails or is not acknowledged.
        """
        if self.dry_run:
            return record

        client = self._require_client()
        resp = self._execute(client.table(PROFILE_TABLE).upsert(dict(record), on_conflict="id"))
        rows = cast(List[UserProfileRecord], _extract_data(resp))
        if not rows:
            raise SupabaseError("Profile upsert was not acknowledged.")

        logger.info("Saved profile for user id=%s", record["id"])
        return rows[0]
