"""
Plain-text rendering for CLI output.

Every function returns a string (or list of lines) so commands stay thin
and tests can assert on exact output.
"""

from typing import Any, List, Optional

from pitchcraft.listing.detail import card_description, card_tags, detail_tags, display_linkedin
from pitchcraft.listing.pagination import PageWindow
from pitchcraft.types import ProjectRecord, StartupDetailRow, UserProfileRecord

ELLIPSIS = "…"


def format_pagination(window: PageWindow) -> str:
    """
    Render the page window on one line, marking the current page.

    Example: "« 1 … 3 4 [5] 6 7 … 10 »"
    """
    parts: List[str] = ["«" if window.has_previous else " "]
    for item in window.items():
        if item is None:
            parts.append(ELLIPSIS)
        elif item == window.current_page:
            parts.append(f"[{item}]")
        else:
            parts.append(str(item))
    parts.append("»" if window.has_next else " ")
    return " ".join(parts).strip()


def format_card(row: Any, expanded: bool = False) -> List[str]:
    lines = [f"#{row['id']}  {row['name']}", f"    {card_description(row.get('description') or '', expanded)}"]
    tags = card_tags(row)
    if tags:
        lines.append("    " + " ".join(tags))
    return lines


def format_detail(row: StartupDetailRow) -> List[str]:
    lines = [row["name"], row.get("description") or ""]

    tags = detail_tags(row)
    if tags:
        lines.append(" ".join(tags))

    sections = [
        ("About", row.get("extendedDescription")),
        ("Funding", row.get("funding_info")),
        ("Founder email", row.get("founderEmail")),
        ("Founder LinkedIn", display_linkedin(row.get("founderLinkedIn"))),
        ("Cold email tips", row.get("tips")),
    ]
    for label, value in sections:
        if value:
            lines.append("")
            lines.append(f"{label}:")
            lines.append(f"  {value}")
    return lines


def _project_line(label: str, project: Optional[ProjectRecord]) -> str:
    if not project:
        return f"{label}: -"
    title = project.get("title") or "(untitled)"
    description = project.get("description") or ""
    return f"{label}: {title}" + (f" — {description}" if description else "")


def format_profile(row: UserProfileRecord) -> List[str]:
    def show(value: Optional[str]) -> str:
        return value if value else "-"

    return [
        f"Name: {show(row.get('name'))}",
        f"Email: {show(row.get('email'))}",
        f"Education: {show(row.get('education'))}",
        f"Hobbies: {show(row.get('hobbies'))}",
        "Work experience:",
        *[f"  {line}" for line in (row.get("Work_Experience") or "-").splitlines()],
        _project_line("Project 1", row.get("Project1")),
        _project_line("Project 2", row.get("Project2")),
        f"Skills: {show(row.get('skills'))}",
        f"Achievements: {show(row.get('achievements'))}",
        f"Additional notes: {show(row.get('additional_data'))}",
    ]
