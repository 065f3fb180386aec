"""String helpers shared across the package.

Case-insensitive operations use casefold() for Unicode-safe matching.
"""

from __future__ import annotations


def compare_strings_ci(a: str, b: str) -> bool:
    """Compare strings case-insensitively.

    Example:
        >>> compare_strings_ci("AC3", "ac3")
        True
    """
    return a.casefold() == b.casefold()


def contains_ci(haystack: str, needle: str) -> bool:
    """Check if string contains substring (case-insensitive).

    Example:
        >>> contains_ci("Copyright the Libav developers", "libav developers")
        True
    """
    return needle.casefold() in haystack.casefold()
