"""
Profile commands.

    • pitchcraft profile onboard  — three-step interactive onboarding
    • pitchcraft profile show     — print the stored profile
    • pitchcraft profile edit     — update individual fields

Onboarding and edits both write with a single upsert keyed by the user id,
so running either twice with the same answers leaves one identical row.
"""

from typing import Optional

import typer

from pitchcraft.cli import deps
from pitchcraft.cli.render import format_profile
from pitchcraft.errors import PitchCraftError, ValidationError
from pitchcraft.logging_utils import configure_logging, log_debug, log_verbose
from pitchcraft.profile.mapper import OnboardingForm, build_profile_record, profile_to_form
from pitchcraft.profile.onboarding import SAVE_SUCCESS, OnboardingFlow, Step, apply_changes, save_profile

profile_app = typer.Typer(help="Create and maintain your job-seeker profile.")


# ---------------------------------------------------------------------------
# Step prompts
# ---------------------------------------------------------------------------
def _ask(label: str, default: str = "") -> str:
    return typer.prompt(label, default=default, show_default=bool(default))


def _prompt_step(step: Step, form: OnboardingForm) -> None:
    if step is Step.PERSONAL:
        typer.echo("Step 1 of 3 — Personal info")
        form.name = _ask("Name", form.name)
        form.email = _ask("Email", form.email)
        form.education = _ask("Education", form.education)
        form.hobbies = _ask("Hobbies", form.hobbies)

    elif step is Step.EXPERIENCE:
        typer.echo("Step 2 of 3 — Work experience and projects")
        paragraphs = []
        while True:
            label = "Work experience" if not paragraphs else "Another role (blank to finish)"
            text = _ask(label)
            if not text.strip():
                break
            paragraphs.append(text)
        form.work_experience = paragraphs or [""]
        for number, project in enumerate(form.projects, start=1):
            project.title = _ask(f"Project {number} title", project.title)
            project.description = _ask(f"Project {number} description", project.description)

    else:
        typer.echo("Step 3 of 3 — Skills and achievements")
        form.skills = _ask("Skills", form.skills)
        form.achievements = _ask("Achievements", form.achievements)
        form.additional_data = _ask("Additional notes", form.additional_data)


# ---------------------------------------------------------------------------
# Command: profile onboard
# ---------------------------------------------------------------------------
@profile_app.command("onboard")
def onboard(
    dry_run: bool = typer.Option(False, "--dry-run", help="Walk through onboarding without saving."),
    verbose: bool = typer.Option(False, "--verbose", help="Show high‑level progress logs."),
    debug: bool = typer.Option(False, "--debug", help="Show the profile payload."),
) -> None:
    """Collect profile details in three steps and save them."""
    configure_logging(verbose=verbose, debug=debug)
    services = deps.build_services(dry_run=dry_run)

    try:
        context = services.auth.require_context()
    except PitchCraftError as e:
        deps.fail(e)

    flow = OnboardingFlow(OnboardingForm(email=context.email or ""))

    def submit(form: OnboardingForm):
        log_debug("Payload", build_profile_record(form, context.user_id), debug)
        log_verbose("Saving profile...", verbose)
        return save_profile(services.data, context, form)

    while flow.saved is None:
        _prompt_step(flow.step, flow.form)
        try:
            flow.advance(submit)
        except ValidationError as e:
            typer.echo(str(e), err=True)
        except PitchCraftError as e:
            deps.fail(e)

    if dry_run:
        typer.echo("[dry-run] Skipping Supabase upsert.")
        return

    typer.echo(SAVE_SUCCESS)
    typer.echo("Browse startups with: pitchcraft startups list")


# ---------------------------------------------------------------------------
# Command: profile show
# ---------------------------------------------------------------------------
@profile_app.command("show")
def show() -> None:
    """Print the stored profile."""
    services = deps.build_services()

    try:
        context = services.auth.require_context()
        row = services.data.fetch_profile(context.user_id)
    except PitchCraftError as e:
        deps.fail(e)

    if row is None:
        typer.echo("No profile yet. Run: pitchcraft profile onboard")
        return

    for line in format_profile(row):
        typer.echo(line)


# ---------------------------------------------------------------------------
# Command: profile edit
# ---------------------------------------------------------------------------
@profile_app.command("edit")
def edit(
    name: Optional[str] = typer.Option(None, "--name"),
    email: Optional[str] = typer.Option(None, "--email"),
    education: Optional[str] = typer.Option(None, "--education"),
    hobbies: Optional[str] = typer.Option(None, "--hobbies"),
    work_experience: Optional[str] = typer.Option(None, "--work-experience"),
    project1_title: Optional[str] = typer.Option(None, "--project1-title"),
    project1_description: Optional[str] = typer.Option(None, "--project1-description"),
    project2_title: Optional[str] = typer.Option(None, "--project2-title"),
    project2_description: Optional[str] = typer.Option(None, "--project2-description"),
    skills: Optional[str] = typer.Option(None, "--skills"),
    achievements: Optional[str] = typer.Option(None, "--achievements"),
    additional_data: Optional[str] = typer.Option(None, "--notes"),
) -> None:
    """Update profile fields; fields not given keep their stored value."""
    services = deps.build_services()

    changes = {
        "name": name,
        "email": email,
        "education": education,
        "hobbies": hobbies,
        "work_experience": work_experience,
        "project1_title": project1_title,
        "project1_description": project1_description,
        "project2_title": project2_title,
        "project2_description": project2_description,
        "skills": skills,
        "achievements": achievements,
        "additional_data": additional_data,
    }

    try:
        context = services.auth.require_context()
        form = profile_to_form(services.data.fetch_profile(context.user_id), fallback_email=context.email)
        saved = save_profile(services.data, context, apply_changes(form, changes))
    except PitchCraftError as e:
        deps.fail(e)

    typer.echo("Profile updated.")
    for line in format_profile(saved):
        typer.echo(line)
