"""Profiles module - YAML described records with optional fields."""

from degenerate.profiles.base import FieldConfig, RecordProfile
from degenerate.profiles.loader import ProfileLoader, example_profile, load_profile

__all__ = [
    "FieldConfig",
    "RecordProfile",
    "ProfileLoader",
    "example_profile",
    "load_profile",
]
