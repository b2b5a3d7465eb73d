"""
Admin-only startup creation.

Only the account named by PITCHCRAFT_ADMIN_EMAIL may add listings. The form
is validated in the same order the admin page reports errors:

    1. company name
    2. short description
    3. hashtags (raw input present, then at least one valid tag)

Optional fields that are blank are stored as NULL.
"""

from dataclasses import dataclass
from typing import Optional

from pitchcraft.auth import AuthContext
from pitchcraft.errors import AccessDenied, ValidationError
from pitchcraft.listing.hashtags import normalize_hashtags
from pitchcraft.profile.mapper import text_field, unwrap
from pitchcraft.supabase_client import SupabaseClient
from pitchcraft.types import StartupDetailRow, StartupInsert

ADD_SUCCESS = "Startup added successfully!"


@dataclass
class StartupForm:
    company: str = ""
    hashtags: str = ""
    short_description: str = ""
    detailed_description: str = ""
    funding_info: str = ""
    founder_linkedin: str = ""
    founder_email: str = ""
    tips: str = ""


def build_startup_record(form: StartupForm) -> StartupInsert:
    """
    Validate the admin form and build the `StartupInfo` insert payload.

    Raises
    ------
    ValidationError
        For a missing company name, short description, or hashtag input.
    HashtagValidationError
        When the hashtag input contains no valid tag.
    """
    if not form.company.strip():
        raise ValidationError("Company Name is required.")
    if not form.short_description.strip():
        raise ValidationError("Short Description is required.")
    if not form.hashtags.strip():
        raise ValidationError("At least one hashtag is required.")

    return StartupInsert(
        name=form.company.strip(),
        description=form.short_description.strip(),
        hashtags=normalize_hashtags(form.hashtags),
        extendedDescription=unwrap(text_field(form.detailed_description)),
        founderLinkedIn=unwrap(text_field(form.founder_linkedin)),
        founderEmail=unwrap(text_field(form.founder_email)),
        funding_info=unwrap(text_field(form.funding_info)),
        tips=unwrap(text_field(form.tips)),
    )


def add_startup(client: SupabaseClient, context: Optional[AuthContext], form: StartupForm) -> StartupDetailRow:
    """
    Insert a new listing on behalf of the admin.

    Raises
    ------
    AccessDenied
        If `context` is missing or not the admin account.
    ValidationError / HashtagValidationError
        If the form is incomplete; nothing is written.
    SupabaseError
        If the insert fails.
    """
    if context is None or not context.is_admin:
        raise AccessDenied("This action is restricted to the admin account.")

    record = build_startup_record(form)
    return client.insert_startup(record)
