"""
pitchcraft/errors.py

Exception hierarchy shared by the library, the CLI, and the HTTP surface.

Errors fall into four groups:

    • validation errors   — bad form input, fully recoverable by the user
    • remote errors       — Supabase query, write, or auth failures
    • access errors       — no session, or a non-admin on an admin operation
    • not-found outcomes  — a lookup that succeeded but returned no row

Every error is scoped to the interaction that triggered it; nothing here is
fatal to the process.
"""


class PitchCraftError(Exception):
    """Base class for all PitchCraft errors."""


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------
class ValidationError(PitchCraftError, ValueError):
    """A required form field is missing or malformed."""


class HashtagValidationError(ValidationError):
    """Tag input normalized to an empty list."""


# ---------------------------------------------------------------------------
# Remote
# ---------------------------------------------------------------------------
class SupabaseError(PitchCraftError, RuntimeError):
    """A Supabase query or write failed, or no client is configured."""


class AuthFailure(PitchCraftError):
    """Sign-in, sign-up, sign-out, or password reset was rejected."""


# ---------------------------------------------------------------------------
# Access
# ---------------------------------------------------------------------------
class AccessDenied(PitchCraftError):
    """The caller has no session, or is not allowed to perform the operation."""


# ---------------------------------------------------------------------------
# Not found
# ---------------------------------------------------------------------------
class StartupNotFound(PitchCraftError, LookupError):
    """No startup row exists for the requested id."""

    def __init__(self, startup_id: int) -> None:
        super().__init__(f"Startup {startup_id} not found")
        self.startup_id = startup_id
