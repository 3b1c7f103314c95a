"""String formatter executor — runs the fixed transformation pipeline.

Steps run in a hardcoded order; each runs only when its option is active:

    encrypt, decrypt, compress, decompress, sentiment, translate,
    spell_check, summarize, format_number, format_date, format_currency,
    remove_diacritics, remove_emojis, escape_regex, unescape_regex,
    is_anagram, is_palindrome, to_ascii, from_ascii, to_morse_code,
    from_morse_code

Any failure aborts the whole run. The caller gets the original input back
and the failure is logged; there is no partial result.
"""

import logging
import time
from typing import Any, Callable, NamedTuple, Optional, Union

from pydantic import ValidationError

from src.formatter.errors import PipelineFailure
from src.formatter.ops import (
    checks,
    ciphers,
    compression,
    encodings,
    language,
    locale_format,
    text,
)
from src.formatter.schemas import FormatResult, FormatterOptions

logger = logging.getLogger(__name__)

OptionsInput = Union[FormatterOptions, dict[str, Any], None]


class PipelineStep(NamedTuple):
    """One named pipeline operation and its activation predicate."""

    name: str
    is_active: Callable[[FormatterOptions], bool]
    apply: Callable[[str, FormatterOptions], str]


def _bool_text(value: bool) -> str:
    return "true" if value else "false"


PIPELINE: tuple[PipelineStep, ...] = (
    PipelineStep(
        "encrypt",
        lambda o: o.encrypt.method is not None,
        lambda s, o: ciphers.encrypt(s, o.encrypt.method, o.encrypt.key),
    ),
    PipelineStep(
        "decrypt",
        lambda o: o.decrypt.method is not None,
        lambda s, o: ciphers.decrypt(s, o.decrypt.method, o.decrypt.key),
    ),
    PipelineStep("compress", lambda o: o.compress, lambda s, o: compression.compress(s)),
    PipelineStep(
        "decompress", lambda o: o.decompress, lambda s, o: compression.decompress(s)
    ),
    PipelineStep(
        "sentiment", lambda o: o.sentiment, lambda s, o: language.analyze_sentiment(s)
    ),
    PipelineStep(
        "translate",
        lambda o: bool(o.translate.to),
        lambda s, o: language.translate(s, o.translate.to),
    ),
    PipelineStep(
        "spell_check", lambda o: o.spell_check, lambda s, o: language.spell_check(s)
    ),
    PipelineStep(
        "summarize",
        lambda o: o.summarize.sentences > 0,
        lambda s, o: language.summarize(s, o.summarize.sentences),
    ),
    PipelineStep(
        "format_number",
        lambda o: bool(o.format_number.style),
        lambda s, o: locale_format.format_number(
            s, o.format_number.locale, o.format_number.style
        ),
    ),
    PipelineStep(
        "format_date",
        lambda o: o.format_date.options is not None,
        lambda s, o: locale_format.format_date(
            s, o.format_date.locale, o.format_date.options
        ),
    ),
    PipelineStep(
        "format_currency",
        lambda o: bool(o.format_currency.currency),
        lambda s, o: locale_format.format_currency(
            s, o.format_currency.locale, o.format_currency.currency
        ),
    ),
    PipelineStep(
        "remove_diacritics",
        lambda o: o.remove_diacritics,
        lambda s, o: text.remove_diacritics(s),
    ),
    PipelineStep(
        "remove_emojis", lambda o: o.remove_emojis, lambda s, o: text.remove_emojis(s)
    ),
    PipelineStep(
        "escape_regex", lambda o: o.escape_regex, lambda s, o: text.escape_regex(s)
    ),
    PipelineStep(
        "unescape_regex",
        lambda o: o.unescape_regex,
        lambda s, o: text.unescape_regex(s),
    ),
    PipelineStep(
        "is_anagram",
        lambda o: bool(o.is_anagram),
        lambda s, o: _bool_text(checks.is_anagram(s, o.is_anagram)),
    ),
    PipelineStep(
        "is_palindrome",
        lambda o: o.is_palindrome,
        lambda s, o: _bool_text(checks.is_palindrome(s)),
    ),
    PipelineStep("to_ascii", lambda o: o.to_ascii, lambda s, o: encodings.to_ascii(s)),
    PipelineStep(
        "from_ascii", lambda o: o.from_ascii, lambda s, o: encodings.from_ascii(s)
    ),
    PipelineStep(
        "to_morse_code",
        lambda o: o.to_morse_code,
        lambda s, o: encodings.to_morse_code(s),
    ),
    PipelineStep(
        "from_morse_code",
        lambda o: o.from_morse_code,
        lambda s, o: encodings.from_morse_code(s),
    ),
)


def coerce_text(value: Any) -> str:
    """Text form of an input value.

    Booleans render lowercase and integral floats drop the ".0", so 1.0
    formats as "1" and True as "true".
    """
    if isinstance(value, bool):
        return _bool_text(value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class StringFormatter:
    """Applies the configured chain of string operations to one input.

    Holds only its default options; every call is independent.
    """

    def __init__(self, default_options: OptionsInput = None):
        if isinstance(default_options, FormatterOptions):
            self.default_options = default_options
        else:
            self.default_options = FormatterOptions.model_validate(
                default_options or {}
            )

    @classmethod
    def from_preset(cls, preset_key: str) -> "StringFormatter":
        """Build a formatter whose defaults come from a named preset.

        Raises:
            KeyError: If no preset has that key.
        """
        from src.formatter.presets import get_preset_registry

        registry = get_preset_registry()
        preset = registry.get(preset_key)
        if preset is None:
            raise KeyError(
                f"Formatter preset '{preset_key}' not found. "
                f"Available: {registry.list_keys()}"
            )
        return cls(preset.options)

    def merge_options(self, options: OptionsInput = None) -> FormatterOptions:
        """Shallow-merge per-call options over the defaults.

        A top-level key in options replaces the default entry wholesale.

        Raises:
            pydantic.ValidationError: If the merged options are invalid.
        """
        if options is None:
            return self.default_options
        if isinstance(options, FormatterOptions):
            overrides = options.model_dump(exclude_unset=True)
        else:
            overrides = dict(options)
        merged = {**self.default_options.model_dump(), **overrides}
        return FormatterOptions.model_validate(merged)

    def format(self, value: Any, options: OptionsInput = None) -> Any:
        """Run the pipeline and return the text, or the original value on failure."""
        return self.format_detailed(value, options).data

    def format_detailed(self, value: Any, options: OptionsInput = None) -> FormatResult:
        """Run the pipeline and report what happened.

        Args:
            value: Any non-None value; coerced to text before the first step.
            options: Partial options merged over this formatter's defaults.

        Returns:
            FormatResult. On success data is the final text, or value itself
            when no step was active. On failure data is value unchanged.
        """
        start_time = time.time()
        steps_applied: list[str] = []

        try:
            result_text = self._run(value, options, steps_applied)
        except PipelineFailure as e:
            elapsed = int((time.time() - start_time) * 1000)
            logger.error(f"String formatting failed ({e.step}): {e}")
            return FormatResult(
                success=False,
                data=value,
                error=str(e),
                failed_step=e.step,
                steps_applied=steps_applied,
                execution_time_ms=elapsed,
            )

        elapsed = int((time.time() - start_time) * 1000)
        return FormatResult(
            success=True,
            data=result_text if steps_applied else value,
            steps_applied=steps_applied,
            execution_time_ms=elapsed,
        )

    def _run(self, value: Any, options: OptionsInput, steps_applied: list[str]) -> str:
        if value is None:
            raise PipelineFailure("input", "Input cannot be None")

        try:
            opts = self.merge_options(options)
        except (ValidationError, TypeError, ValueError) as e:
            raise PipelineFailure("options", f"Invalid options: {e}") from e

        try:
            result = coerce_text(value)
        except Exception as e:
            raise PipelineFailure("input", f"Cannot convert input to text: {e}") from e

        for step in PIPELINE:
            if not step.is_active(opts):
                continue
            try:
                result = step.apply(result, opts)
            except Exception as e:
                raise PipelineFailure(step.name, f"{type(e).__name__}: {e}") from e
            steps_applied.append(step.name)
            logger.debug(f"Applied {step.name}")

        return result


# Global formatter instance
_formatter: Optional[StringFormatter] = None


def get_string_formatter() -> StringFormatter:
    """Get the global formatter instance with all operations off by default."""
    global _formatter
    if _formatter is None:
        _formatter = StringFormatter()
    return _formatter
