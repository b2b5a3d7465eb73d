"""
Root entrypoint for the PitchCraft CLI.

This module defines the top‑level `pitchcraft` command and mounts the
sub‑apps from pitchcraft/cli/:

    • auth_cli.py      →  `pitchcraft auth ...`
    • startups_cli.py  →  `pitchcraft startups ...`
    • profile_cli.py   →  `pitchcraft profile ...`
    • admin_cli.py     →  `pitchcraft admin ...`

A typical first session:

    pitchcraft auth signup --email you@example.com
    pitchcraft profile onboard
    pitchcraft startups list --search "#ai"
    pitchcraft startups show 42
"""

from dotenv import load_dotenv
import typer

from .admin_cli import admin_app
from .auth_cli import auth_app
from .profile_cli import profile_app
from .startups_cli import startups_app

# Load environment variables
load_dotenv()

# ---------------------------------------------------------------------------
# Root CLI application
# ---------------------------------------------------------------------------
cli = typer.Typer(
    help=(
        "PitchCraft command‑line interface.\n\n"
        "Browse startups, read founder contact details, and keep your "
        "job‑seeker profile up to date.\n\n"
        "Requires SUPABASE_URL and SUPABASE_KEY in the environment or a .env file."
    )
)

# ---------------------------------------------------------------------------
# Register sub‑applications
# ---------------------------------------------------------------------------
cli.add_typer(auth_app, name="auth")
cli.add_typer(startups_app, name="startups")
cli.add_typer(profile_app, name="profile")
cli.add_typer(admin_app, name="admin")

# ---------------------------------------------------------------------------
# Entry point for `python -m pitchcraft.cli.main`
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    cli()
