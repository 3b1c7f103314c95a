"""
tests/test_executor.py — StringFormatter pipeline: ordering, option
merging, input coercion and the return-original-on-failure policy.
"""

from __future__ import annotations

import logging

import pytest

from src.formatter.executor import (
    PIPELINE,
    StringFormatter,
    coerce_text,
    get_string_formatter,
)
from src.formatter.schemas import CipherConfig, FormatterOptions

_EXECUTOR_LOGGER = "src.formatter.executor"


@pytest.fixture()
def formatter() -> StringFormatter:
    """Formatter with every operation off by default."""
    return StringFormatter()


class TestPipelineOrder:

    def test_fixed_step_order(self) -> None:
        assert [step.name for step in PIPELINE] == [
            "encrypt",
            "decrypt",
            "compress",
            "decompress",
            "sentiment",
            "translate",
            "spell_check",
            "summarize",
            "format_number",
            "format_date",
            "format_currency",
            "remove_diacritics",
            "remove_emojis",
            "escape_regex",
            "unescape_regex",
            "is_anagram",
            "is_palindrome",
            "to_ascii",
            "from_ascii",
            "to_morse_code",
            "from_morse_code",
        ]

    def test_encrypt_runs_before_decrypt(self, formatter: StringFormatter) -> None:
        cipher = {"method": "caesar", "key": 3}
        result = formatter.format("Hello, World!", {"encrypt": cipher, "decrypt": cipher})
        assert result == "Hello, World!"

    def test_compress_then_decompress(self, formatter: StringFormatter) -> None:
        assert formatter.format("aaabbb", {"compress": True, "decompress": True}) == "aaabbb"

    def test_contradictory_pair_composes(self, formatter: StringFormatter) -> None:
        assert formatter.format("Hi", {"to_ascii": True, "from_ascii": True}) == "Hi"

    def test_boolean_check_feeds_next_step(self, formatter: StringFormatter) -> None:
        result = formatter.format("aba", {"is_palindrome": True, "to_ascii": True})
        assert result == "116 114 117 101"

    def test_sentiment_then_translate(self, formatter: StringFormatter) -> None:
        result = formatter.format("a great day", {"sentiment": True, "translate": {"to": "fr"}})
        assert result == "[Translated to fr]: Positive"

    def test_steps_applied_reported_in_order(self, formatter: StringFormatter) -> None:
        result = formatter.format_detailed(
            "café 😀", {"remove_emojis": True, "remove_diacritics": True}
        )
        assert result.success
        assert result.data == "cafe "
        assert result.steps_applied == ["remove_diacritics", "remove_emojis"]


class TestOperationsThroughPipeline:

    def test_anagram(self, formatter: StringFormatter) -> None:
        assert formatter.format("listen", {"is_anagram": "silent"}) == "true"
        assert formatter.format("hello", {"is_anagram": "world"}) == "false"

    def test_palindrome(self, formatter: StringFormatter) -> None:
        text = "A man, a plan, a canal: Panama"
        assert formatter.format(text, {"is_palindrome": True}) == "true"

    def test_empty_anagram_comparison_is_inactive(self, formatter: StringFormatter) -> None:
        assert formatter.format("listen", {"is_anagram": ""}) == "listen"

    def test_summarize_zero_is_inactive(self, formatter: StringFormatter) -> None:
        assert formatter.format("One. Two.", {"summarize": {"sentences": 0}}) == "One. Two."

    def test_currency(self, formatter: StringFormatter) -> None:
        result = formatter.format(1234.5, {"format_currency": {"currency": "USD"}})
        assert result == "$1,234.50"

    def test_date_with_empty_options_uses_defaults(self, formatter: StringFormatter) -> None:
        assert formatter.format("2024-01-15", {"format_date": {"options": {}}}) == "1/15/24"

    def test_morse(self, formatter: StringFormatter) -> None:
        assert formatter.format("SOS", {"to_morse_code": True}) == "... --- ..."


class TestNoOp:

    def test_returns_original_object(self, formatter: StringFormatter) -> None:
        value = 42
        assert formatter.format(value) is value

    def test_empty_options(self, formatter: StringFormatter) -> None:
        assert formatter.format("unchanged", {}) == "unchanged"

    def test_global_instance_is_shared(self) -> None:
        assert get_string_formatter() is get_string_formatter()


class TestOptionMerging:

    def test_defaults_apply(self) -> None:
        formatter = StringFormatter({"to_morse_code": True})
        assert formatter.format("SOS") == "... --- ..."

    def test_override_wins(self) -> None:
        formatter = StringFormatter({"to_morse_code": True})
        assert formatter.format("SOS", {"to_morse_code": False}) == "SOS"

    def test_merge_is_shallow(self) -> None:
        formatter = StringFormatter(
            {"format_number": {"locale": "de-DE", "style": "decimal"}}
        )
        assert formatter.format("1234.5") == "1.234,5"
        # The override replaces the whole entry, so locale falls back to en-US.
        assert formatter.format("1234.5", {"format_number": {"style": "decimal"}}) == "1,234.5"

    def test_options_model_as_override(self, formatter: StringFormatter) -> None:
        options = FormatterOptions(encrypt=CipherConfig(method="caesar", key=1))
        assert formatter.format("abc", options) == "bcd"

    def test_model_override_keeps_unset_defaults(self) -> None:
        formatter = StringFormatter({"to_ascii": True})
        assert formatter.format("A", FormatterOptions(is_palindrome=True)) == "116 114 117 101"

    def test_invalid_defaults_raise_at_construction(self) -> None:
        with pytest.raises(ValueError):
            StringFormatter({"unknown_operation": True})


class TestCoercion:

    @pytest.mark.parametrize(
        "value, expected",
        [
            (True, "true"),
            (False, "false"),
            (1.0, "1"),
            (1.5, "1.5"),
            (12, "12"),
            ("text", "text"),
        ],
    )
    def test_coerce_text(self, value: object, expected: str) -> None:
        assert coerce_text(value) == expected

    def test_non_string_input_is_transformed(self, formatter: StringFormatter) -> None:
        assert formatter.format(12, {"to_ascii": True}) == "49 50"


class TestFailurePolicy:

    def test_none_input_returns_none(
        self, formatter: StringFormatter, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.ERROR, logger=_EXECUTOR_LOGGER):
            assert formatter.format(None, {}) is None
        assert "Input cannot be None" in caplog.text

    def test_failing_step_returns_original(
        self, formatter: StringFormatter, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.ERROR, logger=_EXECUTOR_LOGGER):
            result = formatter.format_detailed("abc", {"from_ascii": True})
        assert not result.success
        assert result.data == "abc"
        assert result.failed_step == "from_ascii"
        assert "from_ascii" in caplog.text

    def test_partial_progress_discarded(self, formatter: StringFormatter) -> None:
        result = formatter.format_detailed(
            "café", {"remove_diacritics": True, "from_ascii": True}
        )
        assert result.data == "café"
        assert result.failed_step == "from_ascii"
        assert result.steps_applied == ["remove_diacritics"]

    def test_original_object_returned_on_failure(self, formatter: StringFormatter) -> None:
        value = 123
        assert formatter.format(value, {"encrypt": {"method": "vigenere"}}) is value

    @pytest.mark.parametrize(
        "options",
        [
            {"encrypt": {"method": "rot47", "key": 1}},
            {"bogus": True},
            {"summarize": {"sentences": "many"}},
        ],
    )
    def test_invalid_options_return_original(
        self, formatter: StringFormatter, options: dict
    ) -> None:
        result = formatter.format_detailed("text", options)
        assert not result.success
        assert result.failed_step == "options"
        assert result.data == "text"

    def test_unknown_locale_returns_original(self, formatter: StringFormatter) -> None:
        options = {"format_number": {"locale": "xx-XX", "style": "decimal"}}
        assert formatter.format("12", options) == "12"

    def test_never_raises(self, formatter: StringFormatter) -> None:
        class Unprintable:
            def __str__(self) -> str:
                raise RuntimeError("no text form")

        value = Unprintable()
        assert formatter.format(value, {"to_ascii": True}) is value
