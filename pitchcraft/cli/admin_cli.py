"""
Admin commands.

    • pitchcraft admin add-startup

Restricted to the account configured as PITCHCRAFT_ADMIN_EMAIL.
"""

import typer

from pitchcraft.admin import ADD_SUCCESS, StartupForm, add_startup, build_startup_record
from pitchcraft.cli import deps
from pitchcraft.errors import PitchCraftError
from pitchcraft.logging_utils import configure_logging, log_debug, log_verbose

admin_app = typer.Typer(help="Admin-only commands for managing startup listings.")


@admin_app.command("add-startup")
def add_startup_command(
    company: str = typer.Option(..., "--company", prompt="Company Name"),
    hashtags: str = typer.Option(..., "--hashtags", prompt="Hashtags (e.g. #tech, #AI)"),
    description: str = typer.Option(..., "--description", prompt="Short Description"),
    detailed_description: str = typer.Option("", "--detailed-description"),
    funding_info: str = typer.Option("", "--funding-info"),
    founder_linkedin: str = typer.Option("", "--founder-linkedin"),
    founder_email: str = typer.Option("", "--founder-email"),
    tips: str = typer.Option("", "--tips", help="Tips for cold mailing."),
    dry_run: bool = typer.Option(False, "--dry-run", help="Validate and show the payload without inserting."),
    verbose: bool = typer.Option(False, "--verbose", help="Show high‑level progress logs."),
    debug: bool = typer.Option(False, "--debug", help="Show the insert payload and returned row."),
) -> None:
    """Add a new startup listing."""
    configure_logging(verbose=verbose, debug=debug)
    services = deps.build_services(dry_run=dry_run)

    form = StartupForm(
        company=company,
        hashtags=hashtags,
        short_description=description,
        detailed_description=detailed_description,
        funding_info=funding_info,
        founder_linkedin=founder_linkedin,
        founder_email=founder_email,
        tips=tips,
    )

    try:
        context = services.auth.require_admin()
        log_verbose("Validated admin session.", verbose)
        log_debug("Payload", build_startup_record(form), debug)
        row = add_startup(services.data, context, form)
    except PitchCraftError as e:
        deps.fail(e)

    if dry_run:
        typer.echo("[dry-run] Skipping Supabase insert.")
        return

    log_debug("Inserted row", row, debug)
    typer.echo(ADD_SUCCESS)
    if row.get("id") is not None:
        typer.echo(f"View it with: pitchcraft startups show {row['id']}")
