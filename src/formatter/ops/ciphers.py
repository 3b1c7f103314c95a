"""Toy ciphers: Caesar, Vigenere and XOR.

Only ASCII letters are shifted by Caesar/Vigenere; everything else passes
through. The Vigenere key index follows the character's position in the
whole string, so punctuation and spaces still consume key letters.
"""

import re
from typing import Union

from src.formatter.schemas import CipherMethod

_LETTER = re.compile(r"[a-zA-Z]")


def _base(char: str) -> int:
    return 65 if ord(char) < 91 else 97


def caesar(text: str, key: int) -> str:
    """Shift each ASCII letter by key positions, preserving case."""
    shift = int(key)

    def _shift(match: re.Match) -> str:
        char = match.group(0)
        base = _base(char)
        return chr((ord(char) - base + shift) % 26 + base)

    return _LETTER.sub(_shift, text)


def vigenere(text: str, key: str, decrypt: bool = False) -> str:
    """Shift letters by the repeating key, indexed by absolute position."""
    key = str(key)
    sign = -1 if decrypt else 1

    def _shift(match: re.Match) -> str:
        char = match.group(0)
        key_code = ord(key[match.start() % len(key)].upper()) - 65
        base = _base(char)
        return chr((ord(char) - base + sign * key_code) % 26 + base)

    return _LETTER.sub(_shift, text)


def xor(text: str, key: str) -> str:
    """XOR each code point with the repeating key. Self-inverse."""
    key = str(key)
    return "".join(
        chr(ord(char) ^ ord(key[i % len(key)])) for i, char in enumerate(text)
    )


def encrypt(text: str, method: Union[CipherMethod, str], key) -> str:
    method = CipherMethod(method)
    if key is None:
        raise ValueError(f"{method.value} cipher requires a key")
    if method is CipherMethod.CAESAR:
        return caesar(text, key)
    if method is CipherMethod.VIGENERE:
        return vigenere(text, key)
    return xor(text, key)


def decrypt(text: str, method: Union[CipherMethod, str], key) -> str:
    method = CipherMethod(method)
    if key is None:
        raise ValueError(f"{method.value} cipher requires a key")
    if method is CipherMethod.CAESAR:
        return caesar(text, 26 - int(key))
    if method is CipherMethod.VIGENERE:
        return vigenere(text, key, decrypt=True)
    return xor(text, key)
