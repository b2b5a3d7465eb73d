# pitchcraft/config.py

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_SESSION_PATH = Path.home() / ".pitchcraft" / "session.json"


@dataclass(frozen=True)
class Settings:
    """
    Runtime configuration loaded from the environment (and a `.env` file).

    Required:
        • SUPABASE_URL — the Supabase project URL
        • SUPABASE_KEY — the project's public (anon) key

    Optional:
        • PITCHCRAFT_ADMIN_EMAIL   — the single admin account
        • PITCHCRAFT_SESSION_PATH  — where CLI session tokens are stored
    """

    supabase_url: Optional[str]
    supabase_key: Optional[str]
    admin_email: Optional[str] = None
    session_path: Path = DEFAULT_SESSION_PATH

    @property
    def is_configured(self) -> bool:
        return bool(self.supabase_url and self.supabase_key)

    def is_admin(self, email: Optional[str]) -> bool:
        """Return True when `email` matches the configured admin account."""
        if not email or not self.admin_email:
            return False
        return email.strip().lower() == self.admin_email.strip().lower()


def load_settings(env_file: Optional[str] = None) -> Settings:
    """
    Build Settings from the process environment.

    Missing Supabase credentials do not raise. A warning is logged and the
    returned Settings reports `is_configured == False`; the data layer then
    refuses calls with a SupabaseError instead of crashing at start-up.
    """
    # Load environment variables from the .env file into the system environment
    load_dotenv(env_file)

    url = os.getenv("SUPABASE_URL") or None
    key = os.getenv("SUPABASE_KEY") or None
    admin = os.getenv("PITCHCRAFT_ADMIN_EMAIL") or None
    session_path = os.getenv("PITCHCRAFT_SESSION_PATH")

    if not url or not key:
        logger.warning(
            "Missing SUPABASE_URL or SUPABASE_KEY. Ensure .env contains both "
            "settings; the data layer stays unavailable until they are set."
        )

    return Settings(
        supabase_url=url,
        supabase_key=key,
        admin_email=admin,
        session_path=Path(session_path).expanduser() if session_path else DEFAULT_SESSION_PATH,
    )
