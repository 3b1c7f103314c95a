"""Pure text operations used by the formatter pipeline."""

from src.formatter.ops.checks import is_anagram, is_palindrome
from src.formatter.ops.ciphers import caesar, decrypt, encrypt, vigenere, xor
from src.formatter.ops.compression import compress, decompress
from src.formatter.ops.encodings import (
    from_ascii,
    from_morse_code,
    to_ascii,
    to_morse_code,
)
from src.formatter.ops.language import (
    analyze_sentiment,
    spell_check,
    summarize,
    translate,
)
from src.formatter.ops.locale_format import (
    format_currency,
    format_date,
    format_number,
)
from src.formatter.ops.text import (
    escape_regex,
    remove_diacritics,
    remove_emojis,
    unescape_regex,
)

__all__ = [
    "analyze_sentiment",
    "caesar",
    "compress",
    "decompress",
    "decrypt",
    "encrypt",
    "escape_regex",
    "format_currency",
    "format_date",
    "format_number",
    "from_ascii",
    "from_morse_code",
    "is_anagram",
    "is_palindrome",
    "remove_diacritics",
    "remove_emojis",
    "spell_check",
    "summarize",
    "to_ascii",
    "to_morse_code",
    "translate",
    "unescape_regex",
    "vigenere",
    "xor",
]
