"""Typer command-line interface for PitchCraft. The root app lives in main.py."""
