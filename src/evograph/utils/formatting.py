"""Formatting utilities for display."""

import re

_WORD_START = re.compile(r"\b\w")


def capitalize_words(text: str) -> str:
    """Upper-case the first character of every word.

    Word boundaries follow regex semantics, so hyphenated names keep their
    hyphens: ``"mr-mime"`` becomes ``"Mr-Mime"``.
    """
    return _WORD_START.sub(lambda match: match.group().upper(), text)


def humanize_name(name: str) -> str:
    """Format a hyphenated resource name for display.

    Args:
        name: Resource name such as ``"thunder-stone"``

    Returns:
        Title-cased name with spaces, e.g. ``"Thunder Stone"``
    """
    return capitalize_words(name.replace("-", " "))
