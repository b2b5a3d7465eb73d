"""
Tests for environment-driven settings.
"""

import logging
from pathlib import Path

import pytest

from pitchcraft.config import DEFAULT_SESSION_PATH, Settings, load_settings

ENV_KEYS = ("SUPABASE_URL", "SUPABASE_KEY", "PITCHCRAFT_ADMIN_EMAIL", "PITCHCRAFT_SESSION_PATH")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    # setenv first so values loaded from a .env file are undone on teardown.
    for key in ENV_KEYS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


def test_settings_from_environment(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("SUPABASE_URL", "https://example.supabase.co")
    monkeypatch.setenv("SUPABASE_KEY", "anon")
    monkeypatch.setenv("PITCHCRAFT_ADMIN_EMAIL", "Admin@PitchCraft.dev")
    monkeypatch.setenv("PITCHCRAFT_SESSION_PATH", str(tmp_path / "s.json"))

    settings = load_settings()

    assert settings.is_configured
    assert settings.session_path == tmp_path / "s.json"
    assert settings.is_admin("admin@pitchcraft.dev")
    assert not settings.is_admin("someone@else.dev")


def test_env_file_is_loaded(tmp_path) -> None:
    env_file = tmp_path / "custom.env"
    env_file.write_text("SUPABASE_URL=https://file.supabase.co\nSUPABASE_KEY=file-key\n")

    settings = load_settings(str(env_file))

    assert settings.supabase_url == "https://file.supabase.co"
    assert settings.supabase_key == "file-key"


def test_missing_credentials_warn_instead_of_raising(monkeypatch, caplog) -> None:
    monkeypatch.setattr("pitchcraft.config.load_dotenv", lambda *args, **kwargs: False)

    with caplog.at_level(logging.WARNING, logger="pitchcraft.config"):
        settings = load_settings()

    assert not settings.is_configured
    assert settings.session_path == DEFAULT_SESSION_PATH
    assert "Missing SUPABASE_URL or SUPABASE_KEY" in caplog.text


def test_no_admin_configured_means_nobody_is_admin() -> None:
    settings = Settings(supabase_url="u", supabase_key="k", session_path=Path("x"))

    assert not settings.is_admin("admin@pitchcraft.dev")
    assert not settings.is_admin(None)
