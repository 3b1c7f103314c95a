"""Character-level cleanup and regex escaping."""

import re
import unicodedata

_COMBINING_MARKS = re.compile("[\u0300-\u036f]")
_EMOJI = re.compile(
    "["
    "\U0001F600-\U0001F64F"  # emoticons
    "\U0001F300-\U0001F5FF"  # symbols & pictographs
    "\U0001F680-\U0001F6FF"  # transport & map
    "\U0001F1E0-\U0001F1FF"  # flags
    "]"
)
_REGEX_META = re.compile(r"[.*+?^${}()|\[\]\\]")
_ESCAPED_CHAR = re.compile(r"\\(.)")


def remove_diacritics(text: str) -> str:
    """Decompose to NFD and drop combining marks: "café" -> "cafe"."""
    return _COMBINING_MARKS.sub("", unicodedata.normalize("NFD", text))


def remove_emojis(text: str) -> str:
    return _EMOJI.sub("", text)


def escape_regex(text: str) -> str:
    """Backslash-escape . * + ? ^ $ { } ( ) | [ ] and backslash itself.

    Narrower than re.escape, which also escapes whitespace and other
    punctuation.
    """
    return _REGEX_META.sub(lambda m: "\\" + m.group(0), text)


def unescape_regex(text: str) -> str:
    """Drop a backslash before any following character, metacharacter or not."""
    return _ESCAPED_CHAR.sub(lambda m: m.group(1), text)
