"""
PitchCraft — a startup directory for job seekers, backed by Supabase.

Subpackages:
    • pitchcraft.listing  — tag normalization, listing queries, pagination
    • pitchcraft.profile  — onboarding form mapping and profile upserts
    • pitchcraft.cli      — Typer command-line interface
"""

__version__ = "0.1.0"
