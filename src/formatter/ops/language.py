"""Language-level operations: sentiment, translation stub, spell-check, summary.

Spell-check uses pyspellchecker's English word-frequency dictionary, loaded
lazily on first use.
"""

import logging
import re
from typing import Optional

from spellchecker import SpellChecker

logger = logging.getLogger(__name__)

POSITIVE_WORDS = frozenset(
    {"good", "great", "excellent", "amazing", "wonderful", "fantastic"}
)
NEGATIVE_WORDS = frozenset(
    {"bad", "terrible", "awful", "horrible", "poor", "disappointing"}
)

_WORD = re.compile(r"\b\w+\b", re.ASCII)
# Spell-check words keep inner apostrophes so contractions are looked up whole
_SPELL_WORD = re.compile(r"\b[A-Za-z]+(?:'[A-Za-z]+)*\b")
_SENTENCE = re.compile(r"[^.!?]+[.!?]+")

_spell_checker: Optional[SpellChecker] = None


def analyze_sentiment(text: str) -> str:
    """Label text Positive, Negative or Neutral by keyword counts."""
    words = _WORD.findall(text.lower())
    positive = sum(1 for w in words if w in POSITIVE_WORDS)
    negative = sum(1 for w in words if w in NEGATIVE_WORDS)
    if positive > negative:
        return "Positive"
    if negative > positive:
        return "Negative"
    return "Neutral"


def translate(text: str, to: str) -> str:
    """Placeholder: tags the text with the target language, no translation."""
    return f"[Translated to {to}]: {text}"


def _get_spell_checker() -> SpellChecker:
    global _spell_checker
    if _spell_checker is None:
        _spell_checker = SpellChecker(language="en")
        logger.info("Loaded English spell-check dictionary")
    return _spell_checker


def spell_check(text: str) -> str:
    """Wrap every alphabetic word missing from the dictionary as [word]?.

    Contractions are checked as one word. Words containing digits or
    underscores are never flagged.
    """
    candidates = {w.lower() for w in _SPELL_WORD.findall(text)}
    if not candidates:
        return text
    unknown = _get_spell_checker().unknown(candidates)
    if not unknown:
        return text
    logger.debug(f"Spell-check flagged {len(unknown)} word(s)")

    def _flag(match: re.Match) -> str:
        word = match.group(0)
        if word.lower() in unknown:
            return f"[{word}]?"
        return word

    return _SPELL_WORD.sub(_flag, text)


def summarize(text: str, sentences: int) -> str:
    """Keep the first N punctuation-terminated sentences.

    Trailing text without a terminator is not a sentence and is dropped.
    """
    found = _SENTENCE.findall(text)
    # Stripped so leading whitespace between sentences is not doubled by the join
    return " ".join(s.strip() for s in found[:sentences])
