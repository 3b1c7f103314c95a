"""String formatter configuration and result schemas.

FormatterOptions holds one field per pipeline operation. Parameterised
operations carry a small sub-model; the rest are plain boolean flags.
"""

from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_LOCALE = "en-US"


class CipherMethod(str, Enum):
    """Supported toy ciphers."""

    CAESAR = "caesar"
    VIGENERE = "vigenere"
    XOR = "xor"


class NumberStyle(str, Enum):
    """Number rendering styles for format_number."""

    DECIMAL = "decimal"
    PERCENT = "percent"


class CipherConfig(BaseModel):
    """Cipher selection for encrypt/decrypt steps."""

    model_config = ConfigDict(extra="forbid")

    method: Optional[CipherMethod] = Field(
        default=None, description="Cipher to apply; None disables the step"
    )
    key: Optional[Union[int, str]] = Field(
        default=None,
        description="Shift for caesar, key string for vigenere/xor",
    )


class TranslateConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    to: Optional[str] = Field(default=None, description="Target language")


class SummarizeConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    sentences: int = Field(
        default=0, description="Sentences to keep; 0 disables the step"
    )


class NumberFormatConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    locale: str = Field(default=DEFAULT_LOCALE, description="BCP-47 locale")
    style: Optional[NumberStyle] = Field(
        default=None, description="decimal or percent; None disables the step"
    )


class DateFormatConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    locale: str = Field(default=DEFAULT_LOCALE, description="BCP-47 locale")
    options: Optional[dict[str, Any]] = Field(
        default=None,
        description="Recognizes dateStyle and timeStyle "
        "(full/long/medium/short); None disables the step",
    )


class CurrencyFormatConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    locale: str = Field(default=DEFAULT_LOCALE, description="BCP-47 locale")
    currency: Optional[str] = Field(
        default=None, description="ISO 4217 code; None disables the step"
    )


class FormatterOptions(BaseModel):
    """Full pipeline configuration.

    Every operation defaults to inactive. Merging is shallow: a key present
    in the per-call override replaces the default entry for that key.
    """

    model_config = ConfigDict(extra="forbid")

    encrypt: CipherConfig = Field(default_factory=CipherConfig)
    decrypt: CipherConfig = Field(default_factory=CipherConfig)
    compress: bool = False
    decompress: bool = False
    sentiment: bool = False
    translate: TranslateConfig = Field(default_factory=TranslateConfig)
    spell_check: bool = False
    summarize: SummarizeConfig = Field(default_factory=SummarizeConfig)
    format_number: NumberFormatConfig = Field(default_factory=NumberFormatConfig)
    format_date: DateFormatConfig = Field(default_factory=DateFormatConfig)
    format_currency: CurrencyFormatConfig = Field(
        default_factory=CurrencyFormatConfig
    )
    remove_diacritics: bool = False
    remove_emojis: bool = False
    escape_regex: bool = False
    unescape_regex: bool = False
    is_anagram: Optional[str] = Field(
        default=None, description="Comparison string for the anagram check"
    )
    is_palindrome: bool = False
    to_ascii: bool = False
    from_ascii: bool = False
    to_morse_code: bool = False
    from_morse_code: bool = False


class FormatResult(BaseModel):
    """Outcome of one pipeline run."""

    success: bool
    data: Any = None
    error: Optional[str] = None
    failed_step: Optional[str] = None
    steps_applied: list[str] = Field(default_factory=list)
    execution_time_ms: int = 0


class FormatterPreset(BaseModel):
    """A named, stored pipeline configuration."""

    key: str = Field(..., description="Unique snake_case identifier")
    name: str = Field(..., description="Human-readable display name")
    description: str = Field(default="")
    options: dict[str, Any] = Field(
        default_factory=dict,
        description="Partial FormatterOptions used as formatter defaults",
    )
    tags: list[str] = Field(default_factory=list)
