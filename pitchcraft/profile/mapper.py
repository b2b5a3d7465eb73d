"""
Mapping between the onboarding form and the `userData` row.

Form fields arrive as free text. At this boundary every optional field is
turned into an explicit Present(value) or ABSENT before it reaches the
record, so an empty or whitespace-only entry is stored as NULL and never as
an empty string.

Project slots are positional: the first form project is always Project1 and
the second always Project2.
"""

from dataclasses import dataclass, field
from typing import Generic, List, Optional, Tuple, TypeVar, Union

from pitchcraft.types import ProjectRecord, UserProfileRecord

T = TypeVar("T")

PARAGRAPH_SEPARATOR = "\n\n"


# ---------------------------------------------------------------------------
# Present / Absent
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Present(Generic[T]):
    value: T


class _Absent:
    _instance: Optional["_Absent"] = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = _Absent()

FieldValue = Union[Present[T], _Absent]


def text_field(raw: Optional[str]) -> "FieldValue[str]":
    """Present(stripped text), or ABSENT for None / blank input."""
    if raw is None:
        return ABSENT
    stripped = raw.strip()
    return Present(stripped) if stripped else ABSENT


def unwrap(value: "FieldValue[T]") -> Optional[T]:
    """Column value for a field: the wrapped value, or None when absent."""
    if isinstance(value, Present):
        return value.value
    return None


# ---------------------------------------------------------------------------
# Form
# ---------------------------------------------------------------------------
@dataclass
class Project:
    title: str = ""
    description: str = ""


def _two_projects() -> Tuple[Project, Project]:
    return (Project(), Project())


@dataclass
class OnboardingForm:
    """Flat state collected by the three onboarding steps."""

    name: str = ""
    email: str = ""
    education: str = ""
    hobbies: str = ""
    work_experience: List[str] = field(default_factory=lambda: [""])
    projects: Tuple[Project, Project] = field(default_factory=_two_projects)
    skills: str = ""
    achievements: str = ""
    additional_data: str = ""


# ---------------------------------------------------------------------------
# Form → record
# ---------------------------------------------------------------------------
def join_work_experience(paragraphs: List[str]) -> "FieldValue[str]":
    """Join non-blank paragraphs with a blank line; ABSENT if none remain."""
    kept = [p.strip() for p in paragraphs if p and p.strip()]
    if not kept:
        return ABSENT
    return Present(PARAGRAPH_SEPARATOR.join(kept))


def project_field(project: Project) -> "FieldValue[ProjectRecord]":
    """A project slot is ABSENT only when both its title and description are blank."""
    title = text_field(project.title)
    description = text_field(project.description)
    if title is ABSENT and description is ABSENT:
        return ABSENT
    return Present(ProjectRecord(title=unwrap(title), description=unwrap(description)))


def build_profile_record(form: OnboardingForm, user_id: str) -> UserProfileRecord:
    """
    Map the onboarding form into the `userData` row for `user_id`.

    The output depends only on its inputs, so upserting the same form twice
    for the same user stores identical content.
    """
    if len(form.projects) != 2:
        raise ValueError("exactly two project slots are required")

    first, second = form.projects
    return UserProfileRecord(
        id=user_id,
        email=unwrap(text_field(form.email)),
        name=unwrap(text_field(form.name)),
        education=unwrap(text_field(form.education)),
        hobbies=unwrap(text_field(form.hobbies)),
        Work_Experience=unwrap(join_work_experience(form.work_experience)),
        Project1=unwrap(project_field(first)),
        Project2=unwrap(project_field(second)),
        skills=unwrap(text_field(form.skills)),
        achievements=unwrap(text_field(form.achievements)),
        additional_data=unwrap(text_field(form.additional_data)),
    )


# ---------------------------------------------------------------------------
# Record → form (dashboard edit)
# ---------------------------------------------------------------------------
def _project_from_row(raw: Optional[ProjectRecord]) -> Project:
    if not raw:
        return Project()
    return Project(title=raw.get("title") or "", description=raw.get("description") or "")


def profile_to_form(row: Optional[UserProfileRecord], fallback_email: Optional[str] = None) -> OnboardingForm:
    """
    Rebuild an editable form from a stored row.

    With no row, the form is empty except for the account email.
    """
    if row is None:
        return OnboardingForm(email=fallback_email or "")

    work = row.get("Work_Experience") or ""
    paragraphs = [p for p in work.split(PARAGRAPH_SEPARATOR) if p.strip()] or [""]

    return OnboardingForm(
        name=row.get("name") or "",
        email=row.get("email") or fallback_email or "",
        education=row.get("education") or "",
        hobbies=row.get("hobbies") or "",
        work_experience=paragraphs,
        projects=(_project_from_row(row.get("Project1")), _project_from_row(row.get("Project2"))),
        skills=row.get("skills") or "",
        achievements=row.get("achievements") or "",
        additional_data=row.get("additional_data") or "",
    )
