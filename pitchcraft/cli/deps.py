"""
Dependency creation for CLI commands.

The CLI is responsible for building the Supabase SDK client, the data
wrapper, and the auth service; commands receive them through Services.
Tests replace `build_services` to inject fakes.
"""

from dataclasses import dataclass
from typing import NoReturn

import typer

from pitchcraft.auth import AuthService, SessionStore
from pitchcraft.config import Settings, load_settings
from pitchcraft.errors import PitchCraftError
from pitchcraft.supabase_client import SupabaseClient


@dataclass
class Services:
    settings: Settings
    data: SupabaseClient
    auth: AuthService


def build_services(dry_run: bool = False) -> Services:
    """Create Settings, the data wrapper, and the auth service from the environment."""
    settings = load_settings()
    data = SupabaseClient.from_settings(settings, dry_run=dry_run)
    auth = AuthService(data.client, settings, store=SessionStore(settings.session_path))
    return Services(settings=settings, data=data, auth=auth)


def fail(exc: PitchCraftError) -> NoReturn:
    """Report a scoped failure on stderr and exit with status 1."""
    typer.echo(f"Error: {exc}", err=True)
    raise typer.Exit(code=1)
