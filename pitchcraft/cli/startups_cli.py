"""
Startup listing commands.

    • pitchcraft startups list [--page N] [--search TEXT]
    • pitchcraft startups show <id>

Search text starting with "#" matches a single tag exactly (case-insensitive);
any other text matches a substring of the name or description.
"""

import typer

from pitchcraft.cli import deps
from pitchcraft.cli.render import format_card, format_detail, format_pagination
from pitchcraft.errors import PitchCraftError, StartupNotFound
from pitchcraft.listing.detail import get_startup
from pitchcraft.listing.pagination import clamp_page, page_window
from pitchcraft.listing.query import build_listing_query
from pitchcraft.logging_utils import configure_logging, log_debug, log_verbose

startups_app = typer.Typer(help="Browse the startup directory.")


@startups_app.command("list")
def list_startups(
    page: int = typer.Option(1, "--page", min=1, help="Page to show (9 startups per page)."),
    search: str = typer.Option("", "--search", "-s", help='Text search, or "#tag" for a tag match.'),
    verbose: bool = typer.Option(False, "--verbose", help="Show high‑level progress logs."),
    debug: bool = typer.Option(False, "--debug", help="Show the query and raw rows."),
) -> None:
    """List startups, newest first."""
    configure_logging(verbose=verbose, debug=debug)
    services = deps.build_services()

    try:
        services.auth.require_context()
        query = build_listing_query(page, search)
        log_verbose(f"Fetching page {query.page} ({query.mode.value} search)...", verbose)
        log_debug("Query", {"range": [query.range_from, query.range_to], "tag": query.tag,
                            "text_filter": query.text_filter()}, debug)
        result = services.data.fetch_listing_page(query)
    except PitchCraftError as e:
        typer.echo("Failed to load startups.", err=True)
        deps.fail(e)

    log_debug("Rows", result.rows, debug)

    if result.is_empty:
        typer.echo("No startups found.")
        return

    for row in result.rows:
        for line in format_card(row):
            typer.echo(line)
        typer.echo("")

    window = page_window(clamp_page(result.page, result.total_pages), result.total_pages)
    typer.echo(format_pagination(window))
    typer.echo(f"{result.total_count} startups")


@startups_app.command("show")
def show_startup(
    startup_id: str = typer.Argument(..., help="Startup id."),
) -> None:
    """Show a startup with founder contact details."""
    services = deps.build_services()

    try:
        services.auth.require_context()
        row = get_startup(services.data, startup_id)
    except StartupNotFound:
        typer.echo("Startup not found.")
        raise typer.Exit(code=1)
    except PitchCraftError as e:
        deps.fail(e)

    for line in format_detail(row):
        typer.echo(line)
