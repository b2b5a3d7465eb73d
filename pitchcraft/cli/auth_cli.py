"""
Authentication commands.

    • pitchcraft auth login
    • pitchcraft auth signup
    • pitchcraft auth logout
    • pitchcraft auth reset-password
    • pitchcraft auth whoami

Session tokens are stored in the session file (see Settings.session_path)
so later commands run as the signed-in user.
"""

import typer

from pitchcraft.cli import deps
from pitchcraft.errors import PitchCraftError
from pitchcraft.logging_utils import configure_logging, log_verbose
from pitchcraft.profile.onboarding import has_profile

auth_app = typer.Typer(help="Sign in, sign up, sign out, and reset passwords.")


@auth_app.command("login")
def login(
    email: str = typer.Option(..., "--email", prompt=True, help="Account email."),
    password: str = typer.Option(..., "--password", prompt=True, hide_input=True, help="Account password."),
    verbose: bool = typer.Option(False, "--verbose", help="Show high‑level progress logs."),
) -> None:
    """Sign in, then point to onboarding if no profile exists yet."""
    configure_logging(verbose=verbose)
    services = deps.build_services()

    try:
        context = services.auth.sign_in(email, password)
        log_verbose("Signed in; checking for an existing profile...", verbose)
        onboarded = has_profile(services.data, context)
    except PitchCraftError as e:
        deps.fail(e)

    typer.echo(f"Signed in as {context.email}.")
    if onboarded:
        typer.echo("Browse startups with: pitchcraft startups list")
    else:
        typer.echo("Complete your profile with: pitchcraft profile onboard")


@auth_app.command("signup")
def signup(
    email: str = typer.Option(..., "--email", prompt=True, help="Account email."),
    password: str = typer.Option(
        ..., "--password", prompt=True, hide_input=True, confirmation_prompt=True, help="Account password."
    ),
) -> None:
    """Create an account."""
    services = deps.build_services()

    try:
        context = services.auth.sign_up(email, password)
    except PitchCraftError as e:
        deps.fail(e)

    if context is None:
        typer.echo("Check your email to confirm your account, then log in.")
        return

    typer.echo(f"Account created for {context.email}.")
    typer.echo("Complete your profile with: pitchcraft profile onboard")


@auth_app.command("logout")
def logout() -> None:
    """Sign out and forget the stored session."""
    services = deps.build_services()

    try:
        services.auth.sign_out()
    except PitchCraftError as e:
        deps.fail(e)

    typer.echo("Signed out.")


@auth_app.command("reset-password")
def reset_password(
    email: str = typer.Option(..., "--email", prompt=True, help="Account email."),
) -> None:
    """Send a password-reset email."""
    services = deps.build_services()

    try:
        services.auth.send_password_reset(email)
    except PitchCraftError as e:
        deps.fail(e)

    typer.echo(f"Password reset email sent to {email.strip()}.")


@auth_app.command("whoami")
def whoami() -> None:
    """Show the signed-in account."""
    services = deps.build_services()

    try:
        context = services.auth.require_context()
    except PitchCraftError as e:
        deps.fail(e)

    role = " (admin)" if context.is_admin else ""
    typer.echo(f"{context.email}{role}")
