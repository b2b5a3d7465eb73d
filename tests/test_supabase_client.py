"""
Unit tests for SupabaseClient using the deterministic DummyClient.

These tests verify:
    - response normalization for dict and SDK-style responses,
    - detail and profile lookups (found vs. missing),
    - insert and upsert behavior, including dry-run,
    - and proper error handling.

Run from project root:
    pytest -q
"""

from types import SimpleNamespace

import httpx
import pytest
from postgrest.exceptions import APIError

from pitchcraft.config import Settings
from pitchcraft.errors import SupabaseError
from pitchcraft.listing.query import build_listing_query
from pitchcraft.supabase_client import SupabaseClient, _extract_count, _extract_data
from tests.dummy_supabase import DummyClient, FailingClient, UnreachableClient


def _startup_payload(name: str = "NewCo") -> dict:
    return {
        "name": name,
        "description": "Something new",
        "hashtags": ["new"],
        "extendedDescription": None,
        "founderLinkedIn": None,
        "founderEmail": None,
        "funding_info": None,
        "tips": None,
    }


# =====================================================================
# Response normalization
# =====================================================================


def test_extract_data_handles_dict_and_sdk_shapes() -> None:
    assert _extract_data({"status": 200, "data": [{"id": 1}]}) == [{"id": 1}]
    assert _extract_data({"status": 200, "data": {"id": 1}}) == [{"id": 1}]
    assert _extract_data(SimpleNamespace(data=[{"id": 2}], count=None)) == [{"id": 2}]
    assert _extract_data(SimpleNamespace(data=None)) == []
    assert _extract_data(None) == []


def test_extract_data_raises_on_error() -> None:
    with pytest.raises(SupabaseError):
        _extract_data({"status": 500, "error": "boom"})
    with pytest.raises(SupabaseError):
        _extract_data(SimpleNamespace(error="boom", data=None))


def test_extract_count_prefers_exact_count() -> None:
    assert _extract_count({"count": 42, "data": []}, fallback=0) == 42
    assert _extract_count(SimpleNamespace(count=None), fallback=7) == 7


# =====================================================================
# Configuration
# =====================================================================


def test_unconfigured_client_refuses_every_call() -> None:
    client = SupabaseClient.from_settings(Settings(supabase_url=None, supabase_key=None))

    assert not client.is_configured
    with pytest.raises(SupabaseError, match="not configured"):
        client.fetch_listing_page(build_listing_query(1))
    with pytest.raises(SupabaseError, match="not configured"):
        client.fetch_profile("user-1")


def test_transport_error_is_normalized() -> None:
    client = SupabaseClient(UnreachableClient())

    with pytest.raises(SupabaseError, match="Supabase unreachable") as excinfo:
        client.fetch_listing_page(build_listing_query(1))

    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)


def test_api_error_is_normalized() -> None:
    class RaisingQuery:
        def select(self, *args, **kwargs):
            return self

        def eq(self, *args):
            return self

        def limit(self, *args):
            return self

        def execute(self):
            raise APIError({"message": "permission denied", "code": "42501"})

    client = SupabaseClient(SimpleNamespace(table=lambda name: RaisingQuery()))

    with pytest.raises(SupabaseError, match="permission denied"):
        client.fetch_startup(1)


# =====================================================================
# Startups
# =====================================================================


def test_fetch_startup_found_and_missing(data_client) -> None:
    row = data_client.fetch_startup(15)

    assert row is not None
    assert row["name"] == "Gradient"
    assert row["founderEmail"] == "founder@gradient.dev"
    assert data_client.fetch_startup(999) is None


def test_insert_startup_returns_server_row(dummy_client, data_client) -> None:
    row = data_client.insert_startup(_startup_payload())

    assert row["id"] == 21
    assert dummy_client.tables["StartupInfo"][-1]["name"] == "NewCo"


def test_insert_startup_dry_run_writes_nothing(dummy_client) -> None:
    client = SupabaseClient(dummy_client, dry_run=True)

    row = client.insert_startup(_startup_payload())

    assert "id" not in row
    assert len(dummy_client.tables["StartupInfo"]) == 20
    assert dummy_client.executed == []


def test_insert_startup_failure_propagates() -> None:
    with pytest.raises(SupabaseError, match="Simulated failure"):
        SupabaseClient(FailingClient()).insert_startup(_startup_payload())


# =====================================================================
# Profiles
# =====================================================================


def test_profile_upsert_then_fetch(data_client) -> None:
    record = {
        "id": "user-seeker",
        "email": "seeker@example.com",
        "name": "Ada",
        "education": None,
        "hobbies": None,
        "Work_Experience": "Analyst",
        "Project1": None,
        "Project2": None,
        "skills": "Python",
        "achievements": None,
        "additional_data": None,
    }

    assert data_client.fetch_profile("user-seeker") is None
    saved = data_client.upsert_profile(record)

    assert saved == record
    assert data_client.fetch_profile("user-seeker") == record


def test_upsert_uses_id_as_conflict_key(dummy_client, data_client) -> None:
    data_client.upsert_profile({"id": "u1", "name": "A"})  # type: ignore[typeddict-item]

    upsert_call = dummy_client.executed[-1].calls[-1]
    assert upsert_call[0] == "upsert"
    assert upsert_call[1][1] == "id"


def test_unacknowledged_upsert_raises() -> None:
    dummy = DummyClient()

    class SilentQuery:
        def upsert(self, payload, on_conflict=None):
            return self

        def execute(self):
            return {"status": 201, "data": []}

    dummy.table = lambda name: SilentQuery()  # type: ignore[assignment]

    with pytest.raises(SupabaseError, match="not acknowledged"):
        SupabaseClient(dummy).upsert_profile({"id": "u1"})  # type: ignore[typeddict-item]
