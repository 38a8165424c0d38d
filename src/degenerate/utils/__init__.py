"""Utility functions for degenerate."""

from degenerate.utils.helpers import generate_seed

__all__ = [
    "generate_seed",
]
