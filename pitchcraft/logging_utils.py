"""
logging_utils.py

Logging helpers used across PitchCraft.

Library modules log through the standard `logging` module with a
module-level `logging.getLogger(__name__)`. The CLI adds two user-facing
helpers on top:

    • log_verbose — short progress messages behind --verbose
    • log_debug   — full payloads and responses behind --debug

Both echo through Typer so output stays consistent with the rest of the CLI.
"""

import json
import logging
from typing import Any

import typer

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool = False, debug: bool = False) -> None:
    """
    Configure root logging for a CLI invocation.

    Warnings are always shown; --verbose raises the level to INFO and
    --debug to DEBUG.
    """
    level = logging.WARNING
    if verbose:
        level = logging.INFO
    if debug:
        level = logging.DEBUG
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # basicConfig is a no-op once handlers exist; the level still applies.
    logging.getLogger().setLevel(level)


def log_verbose(message: str, verbose: bool) -> None:
    """
    Print a high‑level progress message when verbose mode is enabled.

    Parameters
    ----------
    message : str
        Short, plain‑English description of what the command is doing
        (e.g., "Fetching page 2...", "Saving profile...").

    verbose : bool
        Whether verbose mode is active. When False, this function does
        nothing.
    """
    if verbose:
        typer.echo(message)


def log_debug(label: str, payload: Any, debug: bool) -> None:
    """
    Print a labelled, JSON-formatted payload when debug mode is enabled.

    Values that are not JSON-serializable fall back to `str()`.
    """
    if debug:
        typer.echo(f"{label}:")
        typer.echo(json.dumps(payload, indent=2, default=str))
