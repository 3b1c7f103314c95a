"""Boolean text checks. The pipeline renders their results as "true"/"false"."""

import re

_NON_LETTER = re.compile(r"[^a-z]")
_NON_ALNUM = re.compile(r"[^a-z0-9]")


def _anagram_key(text: str) -> str:
    return "".join(sorted(_NON_LETTER.sub("", text.lower())))


def is_anagram(text: str, comparison: str) -> bool:
    """Compare the sorted ASCII letters of both strings, ignoring case."""
    return _anagram_key(text) == _anagram_key(comparison)


def is_palindrome(text: str) -> bool:
    normalized = _NON_ALNUM.sub("", text.lower())
    return normalized == normalized[::-1]
