"""Small helpers over optionals and strings."""

from __future__ import annotations


def zip_optional[A, B](left: A | None, right: B | None) -> tuple[A, B] | None:
    """Pair two optional values, or ``None`` if either is missing.

    Examples:
        >>> zip_optional(11, "a")
        (11, 'a')
        >>> zip_optional(11, None) is None
        True
    """
    if left is None or right is None:
        return None
    return (left, right)


def equals_ignore_case(left: str, right: str) -> bool:
    """Compare two strings ignoring case (Unicode casefold)."""
    return left.casefold() == right.casefold()


def is_sherlock(text: str) -> bool:
    """Check whether *text* starts with ``"Sherlock"`` (case-sensitive).

    Examples:
        >>> is_sherlock("Sherlock Holmes")
        True
        >>> is_sherlock("John Watson")
        False
    """
    return text.startswith("Sherlock")
