"""Utility functions package."""

from evograph.utils.formatting import capitalize_words, humanize_name

__all__ = [
    "capitalize_words",
    "humanize_name",
]
