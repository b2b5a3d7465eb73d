"""
Unit tests for the onboarding form → userData record mapping.
"""

import pytest

from pitchcraft.profile.mapper import (
    ABSENT,
    OnboardingForm,
    Present,
    Project,
    build_profile_record,
    join_work_experience,
    profile_to_form,
    project_field,
    text_field,
    unwrap,
)


def _full_form() -> OnboardingForm:
    return OnboardingForm(
        name=" Ada Lovelace ",
        email="ada@example.com",
        education="University of London",
        hobbies="Chess",
        work_experience=["Analyst at Babbage & Co.", "  ", "Researcher"],
        projects=(Project("Engine notes", "Annotated translation"), Project("", "")),
        skills="Mathematics, Python",
        achievements="First published algorithm",
        additional_data="Open to remote roles",
    )


# =====================================================================
# Present / Absent
# =====================================================================


@pytest.mark.parametrize("raw", [None, "", "   ", "\n\t"])
def test_blank_text_is_absent(raw) -> None:
    assert text_field(raw) is ABSENT
    assert unwrap(text_field(raw)) is None


def test_text_is_stripped_when_present() -> None:
    assert text_field("  Chess ") == Present("Chess")


def test_absent_is_falsy_singleton() -> None:
    assert not ABSENT
    assert type(ABSENT)() is ABSENT


# =====================================================================
# Field mapping
# =====================================================================


def test_work_experience_joins_non_blank_paragraphs() -> None:
    assert unwrap(join_work_experience(["First", "", "Second"])) == "First\n\nSecond"
    assert join_work_experience(["", "   "]) is ABSENT


def test_project_absent_only_when_both_fields_blank() -> None:
    assert project_field(Project("", " ")) is ABSENT
    assert unwrap(project_field(Project("Title only", ""))) == {"title": "Title only", "description": None}
    assert unwrap(project_field(Project("", "Desc only"))) == {"title": None, "description": "Desc only"}


def test_full_form_maps_to_schema_columns() -> None:
    record = build_profile_record(_full_form(), "user-1")

    assert record == {
        "id": "user-1",
        "email": "ada@example.com",
        "name": "Ada Lovelace",
        "education": "University of London",
        "hobbies": "Chess",
        "Work_Experience": "Analyst at Babbage & Co.\n\nResearcher",
        "Project1": {"title": "Engine notes", "description": "Annotated translation"},
        "Project2": None,
        "skills": "Mathematics, Python",
        "achievements": "First published algorithm",
        "additional_data": "Open to remote roles",
    }


def test_blank_optionals_become_null_not_empty_string() -> None:
    form = OnboardingForm(name="Ada", email="ada@example.com", work_experience=["Analyst"], skills="Math")
    form.hobbies = "   "

    record = build_profile_record(form, "user-1")

    for column in ("education", "hobbies", "achievements", "additional_data", "Project1", "Project2"):
        assert record[column] is None
    assert "" not in record.values()


def test_projects_are_positional() -> None:
    form = _full_form()
    form.projects = (Project("", ""), Project("Second slot", ""))

    record = build_profile_record(form, "user-1")

    assert record["Project1"] is None
    assert record["Project2"] == {"title": "Second slot", "description": None}


def test_mapping_is_deterministic() -> None:
    assert build_profile_record(_full_form(), "u") == build_profile_record(_full_form(), "u")


def test_exactly_two_project_slots_required() -> None:
    form = _full_form()
    form.projects = (Project("only one", ""),)  # type: ignore[assignment]

    with pytest.raises(ValueError):
        build_profile_record(form, "user-1")


# =====================================================================
# Record → form
# =====================================================================


def test_profile_to_form_inverts_the_mapping() -> None:
    record = build_profile_record(_full_form(), "user-1")

    form = profile_to_form(record)

    assert form.name == "Ada Lovelace"
    assert form.work_experience == ["Analyst at Babbage & Co.", "Researcher"]
    assert form.projects[0] == Project("Engine notes", "Annotated translation")
    assert form.projects[1] == Project()
    assert build_profile_record(form, "user-1") == record


def test_profile_to_form_without_row_uses_account_email() -> None:
    form = profile_to_form(None, fallback_email="new@example.com")

    assert form.email == "new@example.com"
    assert form.name == ""
    assert form.work_experience == [""]
