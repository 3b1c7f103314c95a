"""Configurable string formatting pipeline.

A StringFormatter applies a fixed-order chain of independently toggled
text operations (toy ciphers, run-length compression, sentiment, locale
formatting, Morse code, ...) and falls back to the original input on any
failure.
"""

from src.formatter.errors import PipelineFailure
from src.formatter.executor import (
    PIPELINE,
    PipelineStep,
    StringFormatter,
    get_string_formatter,
)
from src.formatter.presets import PresetRegistry, get_preset_registry
from src.formatter.schemas import (
    CipherConfig,
    CipherMethod,
    CurrencyFormatConfig,
    DateFormatConfig,
    FormatResult,
    FormatterOptions,
    FormatterPreset,
    NumberFormatConfig,
    NumberStyle,
    SummarizeConfig,
    TranslateConfig,
)

__all__ = [
    "CipherConfig",
    "CipherMethod",
    "CurrencyFormatConfig",
    "DateFormatConfig",
    "FormatResult",
    "FormatterOptions",
    "FormatterPreset",
    "NumberFormatConfig",
    "NumberStyle",
    "PIPELINE",
    "PipelineFailure",
    "PipelineStep",
    "PresetRegistry",
    "StringFormatter",
    "SummarizeConfig",
    "TranslateConfig",
    "get_preset_registry",
    "get_string_formatter",
]
