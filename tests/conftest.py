"""
Shared pytest configuration for the PitchCraft test suite.

This file centralizes reusable testing utilities so that:
    • every test runs against the same deterministic in-memory tables
    • CLI tests use a fresh Typer CliRunner with injected services
    • auth tests share the same registered seeker and admin accounts

No test touches the network; the Supabase SDK is replaced by DummyClient.
"""

from typing import Any, Dict, List

import pytest
from typer.testing import CliRunner

from pitchcraft.auth import AuthService, SessionStore
from pitchcraft.cli import deps
from pitchcraft.config import Settings
from pitchcraft.supabase_client import SupabaseClient
from tests.dummy_supabase import DummyClient

ADMIN_EMAIL = "admin@pitchcraft.dev"
ADMIN_PASSWORD = "admin-pass"
SEEKER_EMAIL = "seeker@example.com"
SEEKER_PASSWORD = "hunter22"


# ============================================================================
# TABLE FIXTURES
# ============================================================================


def make_startup_rows() -> List[Dict[str, Any]]:
    """
    Twenty StartupInfo rows.

    Search fixtures:
        • "ai" as a substring of name/description → ids 3, 15, 17
        • "ai" as a tag                           → ids 8, 15
    """
    rows: List[Dict[str, Any]] = [
        {
            "id": i,
            "name": f"Startup {i}",
            "description": f"Description {i}",
            "hashtags": ["saas"],
            "extendedDescription": None,
            "founderLinkedIn": None,
            "founderEmail": None,
            "funding_info": None,
            "tips": None,
        }
        for i in range(1, 21)
    ]

    rows[2].update(name="Airbase", description="Spend management", hashtags=["fintech"])
    rows[7].update(name="Visionly", description="Computer vision for stores", hashtags=["ai", "vision"])
    rows[14].update(
        name="Gradient",
        description="Open-source AI tooling",
        hashtags=["ai", "devtools"],
        extendedDescription="Gradient builds evaluation tooling for ML teams.",
        founderLinkedIn="https://linkedin.com/in/gradient-founder",
        founderEmail="founder@gradient.dev",
        funding_info="Seed round $1.2M",
        tips="Mention their open-source repo.",
    )
    rows[16].update(name="Harbor", description="Supply chain tracking", hashtags=["logistics"])
    return rows


@pytest.fixture
def startup_rows() -> List[Dict[str, Any]]:
    return make_startup_rows()


@pytest.fixture
def dummy_client(startup_rows) -> DummyClient:
    """In-memory Supabase client with StartupInfo and an empty userData table."""
    client = DummyClient({"StartupInfo": startup_rows, "userData": []})
    client.auth.add_user(SEEKER_EMAIL, SEEKER_PASSWORD, user_id="user-seeker")
    client.auth.add_user(ADMIN_EMAIL, ADMIN_PASSWORD, user_id="user-admin")
    return client


@pytest.fixture
def data_client(dummy_client) -> SupabaseClient:
    return SupabaseClient(dummy_client)


# ============================================================================
# AUTH + SERVICES
# ============================================================================


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_key="public-anon-key",
        admin_email=ADMIN_EMAIL,
        session_path=tmp_path / "session.json",
    )


@pytest.fixture
def auth_service(dummy_client, settings) -> AuthService:
    return AuthService(dummy_client, settings, store=SessionStore(settings.session_path))


@pytest.fixture
def services(settings, data_client, auth_service) -> deps.Services:
    return deps.Services(settings=settings, data=data_client, auth=auth_service)


@pytest.fixture
def seeker(auth_service):
    """Sign in the job-seeker account and return its AuthContext."""
    return auth_service.sign_in(SEEKER_EMAIL, SEEKER_PASSWORD)


@pytest.fixture
def admin(auth_service):
    """Sign in the admin account and return its AuthContext."""
    return auth_service.sign_in(ADMIN_EMAIL, ADMIN_PASSWORD)


# ============================================================================
# CLI
# ============================================================================


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provides a fresh Typer CliRunner instance for CLI tests."""
    return CliRunner()


@pytest.fixture
def injected_services(monkeypatch, services) -> deps.Services:
    """
    Make every CLI command use the in-memory services.

    The --dry-run flag is honored by toggling dry_run on the shared wrapper.
    """

    def _build(dry_run: bool = False) -> deps.Services:
        services.data.dry_run = dry_run
        return services

    monkeypatch.setattr(deps, "build_services", _build)
    return services
