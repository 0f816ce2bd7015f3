"""
Placeholder substitution.

Handles replacing {KEY} placeholders in template paths and contents.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping


def placeholder(key: str) -> str:
    """Wrap a placeholder key in braces: ``PKGNAME`` -> ``{PKGNAME}``."""
    return f"{{{key}}}"


def replacement_pairs(table: Mapping[str, str]) -> list[tuple[str, str]]:
    """Build the ordered (needle, value) pairs for a placeholder table."""
    return [(placeholder(key), value) for key, value in table.items()]


def substitute(text: str, pairs: Iterable[tuple[str, str]]) -> str:
    """
    Replace every needle in ``text``, one pair after another.

    Each pass operates on the output of the previous one, so a value
    containing a needle of a later pair is substituted again.

    Args:
        text: Template text with {KEY} placeholders
        pairs: Ordered (needle, value) pairs

    Returns:
        Text with placeholders substituted

    Examples:
        substitute("{COLOR} {DISH}", [("{COLOR}", "green"), ("{DISH}", "curry")])
        # -> "green curry"
    """
    for needle, value in pairs:
        text = text.replace(needle, value)
    return text
