"""
Three-step onboarding flow and profile persistence.

Steps:
    0 — personal info      (name and email required)
    1 — work experience    (first paragraph required) and two projects
    2 — skills             (skills required), achievements, notes

A step must validate before the flow advances; the final step submits the
profile with a single upsert keyed by the user id.
"""

import logging
from enum import IntEnum
from typing import Callable, Dict, Optional

from pitchcraft.auth import AuthContext
from pitchcraft.errors import ValidationError
from pitchcraft.profile.mapper import OnboardingForm, build_profile_record
from pitchcraft.supabase_client import SupabaseClient
from pitchcraft.types import UserProfileRecord

logger = logging.getLogger(__name__)

SAVE_SUCCESS = "Your profile has been saved successfully."


class Step(IntEnum):
    PERSONAL = 0
    EXPERIENCE = 1
    SKILLS = 2


def _require(value: str, label: str) -> None:
    if not (value or "").strip():
        raise ValidationError(f"{label} is required.")


def validate_step(step: Step, form: OnboardingForm) -> None:
    """Raise ValidationError naming the first missing required field of `step`."""
    if step is Step.PERSONAL:
        _require(form.name, "Name")
        _require(form.email, "Email")
    elif step is Step.EXPERIENCE:
        first = form.work_experience[0] if form.work_experience else ""
        _require(first, "Work experience")
    elif step is Step.SKILLS:
        _require(form.skills, "Skills")


def validate_form(form: OnboardingForm) -> None:
    for step in Step:
        validate_step(step, form)


def save_profile(client: SupabaseClient, context: AuthContext, form: OnboardingForm) -> UserProfileRecord:
    """
    Validate the whole form and upsert it as the profile of `context`.

    Raises
    ------
    ValidationError
        If a required field is missing; nothing is written.
    SupabaseError
        If the write fails; the profile is not saved and no retry happens.
    """
    validate_form(form)
    record = build_profile_record(form, context.user_id)
    return client.upsert_profile(record)


def has_profile(client: SupabaseClient, context: AuthContext) -> bool:
    """True once onboarding has stored a row for this user."""
    return client.fetch_profile(context.user_id) is not None


class OnboardingFlow:
    """
    Step cursor over an OnboardingForm.

    `advance()` validates the current step before moving forward and submits
    the profile from the last step. `back()` never validates.
    """

    def __init__(self, form: Optional[OnboardingForm] = None) -> None:
        self.form = form or OnboardingForm()
        self.step = Step.PERSONAL
        self.saved: Optional[UserProfileRecord] = None

    @property
    def is_last_step(self) -> bool:
        return self.step is Step.SKILLS

    def back(self) -> Step:
        if self.step > Step.PERSONAL:
            self.step = Step(self.step - 1)
        return self.step

    def advance(self, submit: Callable[[OnboardingForm], UserProfileRecord]) -> Step:
        """
        Validate the current step, then move to the next one.

        On the last step `submit` is called with the form instead; its
        result is kept on `saved`. Errors from `submit` propagate and leave
        the flow on the last step.
        """
        validate_step(self.step, self.form)
        if not self.is_last_step:
            self.step = Step(self.step + 1)
            return self.step

        self.saved = submit(self.form)
        logger.info("Onboarding completed")
        return self.step


def apply_changes(form: OnboardingForm, changes: Dict[str, Optional[str]]) -> OnboardingForm:
    """
    Overlay dashboard edits onto a form.

    Keys are the simple text fields of OnboardingForm plus
    `work_experience`, `project1_title`, `project1_description`,
    `project2_title` and `project2_description`. None values are ignored.
    """
    simple = {"name", "email", "education", "hobbies", "skills", "achievements", "additional_data"}
    first, second = form.projects

    for key, value in changes.items():
        if value is None:
            continue
        if key in simple:
            setattr(form, key, value)
        elif key == "work_experience":
            form.work_experience = [value]
        elif key == "project1_title":
            first.title = value
        elif key == "project1_description":
            first.description = value
        elif key == "project2_title":
            second.title = value
        elif key == "project2_description":
            second.description = value
        else:
            raise KeyError(f"Unknown profile field: {key}")

    return form
