"""
Public profile API surface.

    • OnboardingForm / build_profile_record — form ↔ `userData` mapping
    • OnboardingFlow / save_profile         — multi-step onboarding and upsert
"""

from .mapper import ABSENT, OnboardingForm, Present, Project, build_profile_record, profile_to_form
from .onboarding import OnboardingFlow, Step, apply_changes, has_profile, save_profile, validate_step

__all__ = [
    "ABSENT",
    "OnboardingForm",
    "Present",
    "Project",
    "build_profile_record",
    "profile_to_form",
    "OnboardingFlow",
    "Step",
    "apply_changes",
    "has_profile",
    "save_profile",
    "validate_step",
]
