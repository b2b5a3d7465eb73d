"""
HTTP surface tests using FastAPI's TestClient.
"""

import pytest
from fastapi.testclient import TestClient

from pitchcraft.api import create_app
from pitchcraft.auth import AuthService
from pitchcraft.supabase_client import SupabaseClient
from tests.dummy_supabase import FailingClient, UnreachableClient

SEEKER_HEADERS = {"Authorization": "Bearer access-user-seeker"}


@pytest.fixture
def api(data_client, dummy_client, settings) -> TestClient:
    return TestClient(create_app(data_client, AuthService(dummy_client, settings)))


def test_health(api) -> None:
    response = api.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "supabase_configured": True}


def test_missing_or_invalid_token_is_unauthorized(api) -> None:
    assert api.get("/startups").status_code == 401
    assert api.get("/startups", headers={"Authorization": "Bearer nope"}).status_code == 401
    assert api.get("/startups/15", headers={"Authorization": "Token abc"}).status_code == 401


def test_listing_page(api) -> None:
    response = api.get("/startups", params={"page": 2}, headers=SEEKER_HEADERS)

    assert response.status_code == 200
    body = response.json()
    assert [row["id"] for row in body["startups"]] == list(range(11, 2, -1))
    assert body["total_count"] == 20
    assert body["total_pages"] == 3
    assert body["page_links"] == [1, 2, 3]


def test_listing_tag_search(api) -> None:
    response = api.get("/startups", params={"q": "#ai"}, headers=SEEKER_HEADERS)

    body = response.json()
    assert [row["id"] for row in body["startups"]] == [15, 8]
    assert body["total_pages"] == 1


def test_page_below_one_is_rejected(api) -> None:
    assert api.get("/startups", params={"page": 0}, headers=SEEKER_HEADERS).status_code == 422


def test_detail_outcomes(api) -> None:
    found = api.get("/startups/15", headers=SEEKER_HEADERS)
    assert found.status_code == 200
    assert found.json()["founderEmail"] == "founder@gradient.dev"

    assert api.get("/startups/999", headers=SEEKER_HEADERS).status_code == 404
    assert api.get("/startups/abc", headers=SEEKER_HEADERS).status_code == 400


def test_supabase_failure_is_bad_gateway(dummy_client, settings) -> None:
    api = TestClient(create_app(SupabaseClient(FailingClient()), AuthService(dummy_client, settings)))

    response = api.get("/startups", headers=SEEKER_HEADERS)

    assert response.status_code == 502
    assert "Simulated failure" in response.json()["detail"]


def test_auth_unavailable_is_service_unavailable(data_client, settings) -> None:
    api = TestClient(create_app(data_client, AuthService(None, settings)))

    assert api.get("/startups", headers=SEEKER_HEADERS).status_code == 503


def test_unreachable_database_is_bad_gateway(dummy_client, settings) -> None:
    api = TestClient(create_app(SupabaseClient(UnreachableClient()), AuthService(dummy_client, settings)))

    assert api.get("/startups", headers=SEEKER_HEADERS).status_code == 502
    assert api.get("/startups/15", headers=SEEKER_HEADERS).status_code == 502


def test_unreachable_auth_server_is_service_unavailable(api, dummy_client) -> None:
    dummy_client.auth.unreachable = True

    response = api.get("/startups", headers=SEEKER_HEADERS)

    assert response.status_code == 503
    assert "unreachable" in response.json()["detail"]
