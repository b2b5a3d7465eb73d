"""
pitchcraft/types.py

Centralized type definitions for PitchCraft.

This module defines the row TypedDicts and the Protocol used by the Supabase
client wrapper, the listing and profile modules, and the test doubles. Keeping
them in one place gives:

    • a single source of truth for the hosted table schemas
    • clear contracts between the CLI, the HTTP app, and the Supabase layer
    • easy mocking and dependency injection in tests

When a column changes in Supabase, this file should be updated first.
"""

from typing import Any, List, Optional, Protocol, TypedDict


# ---------------------------------------------------------------------------
# StartupListingRow
# ---------------------------------------------------------------------------
# One row of the `StartupInfo` table as shown on the listing page.
#
# Hashtags carry no leading "#" and keep the case they were entered with.
# ---------------------------------------------------------------------------
class StartupListingRow(TypedDict):
    id: int
    name: str
    description: str
    hashtags: List[str]


# ---------------------------------------------------------------------------
# StartupDetailRow
# ---------------------------------------------------------------------------
# The full `StartupInfo` row fetched by the detail page.
#
# Column names follow the hosted schema verbatim, including the mixed
# camelCase / snake_case naming.
# ---------------------------------------------------------------------------
class StartupDetailRow(StartupListingRow, total=False):
    extendedDescription: Optional[str]
    founderLinkedIn: Optional[str]
    founderEmail: Optional[str]
    funding_info: Optional[str]
    tips: Optional[str]


# ---------------------------------------------------------------------------
# StartupInsert
# ---------------------------------------------------------------------------
# Payload for a new `StartupInfo` row. `id` is assigned by the server.
# ---------------------------------------------------------------------------
class StartupInsert(TypedDict):
    name: str
    description: str
    hashtags: List[str]
    extendedDescription: Optional[str]
    founderLinkedIn: Optional[str]
    founderEmail: Optional[str]
    funding_info: Optional[str]
    tips: Optional[str]


# ---------------------------------------------------------------------------
# ProjectRecord / UserProfileRecord
# ---------------------------------------------------------------------------
# One row of the `userData` table, keyed by the auth user id.
#
# Work_Experience, Project1 and Project2 are quoted, case-sensitive columns
# in the hosted schema; the keys below must match them exactly.
# ---------------------------------------------------------------------------
class ProjectRecord(TypedDict):
    title: Optional[str]
    description: Optional[str]


class UserProfileRecord(TypedDict):
    id: str
    email: Optional[str]
    name: Optional[str]
    education: Optional[str]
    hobbies: Optional[str]
    Work_Experience: Optional[str]
    Project1: Optional[ProjectRecord]
    Project2: Optional[ProjectRecord]
    skills: Optional[str]
    achievements: Optional[str]
    additional_data: Optional[str]


# ---------------------------------------------------------------------------
# SupabaseExecuteResponse
# ---------------------------------------------------------------------------
# Normalized shape of a Supabase `.execute()` result.
#
# The real SDK returns an object exposing `.data` and `.count`; test doubles
# return dictionaries with the same fields. total=False allows error-only
# responses.
# ---------------------------------------------------------------------------
class SupabaseExecuteResponse(TypedDict, total=False):
    status: int
    data: Any
    count: Optional[int]
    error: Optional[Any]


# ---------------------------------------------------------------------------
# SupabaseClientInterface
# ---------------------------------------------------------------------------
# Structural Protocol for the subset of the Supabase Python client that
# SupabaseClient (pitchcraft/supabase_client.py) relies on:
#
#     client.table("StartupInfo").select(...).order(...).range(...).execute()
#     client.auth.sign_in_with_password({...})
#
# Any object with compatible attributes is accepted: the real SDK client and
# every fake in tests/.
# ---------------------------------------------------------------------------
class SupabaseClientInterface(Protocol):
    auth: Any

    def table(self, name: str) -> Any:
        """
        Return a query builder for the given table.
        The builder must support the filter chain and `.execute()`.
        """
        ...
