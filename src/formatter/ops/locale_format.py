"""Locale-aware number, currency and date rendering via Babel.

Locales are BCP-47 tags ("en-US", "de-DE"). Input that does not parse as
a number (or date) is returned unchanged; an unknown locale raises.
"""

import re
from datetime import datetime
from typing import Any, Optional, Union

from babel import Locale
from babel.dates import format_date as babel_format_date
from babel.dates import format_time as babel_format_time
from babel.dates import get_datetime_format
from babel.numbers import format_currency as babel_format_currency
from babel.numbers import format_decimal, format_percent

from src.formatter.schemas import NumberStyle

DATE_STYLES = ("full", "long", "medium", "short")

# Leading float, same acceptance rules as JavaScript's parseFloat
_LEADING_FLOAT = re.compile(
    r"^\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))"
)


def parse_leading_float(text: str) -> Optional[float]:
    """Return the numeric prefix of text, or None if there is none."""
    match = _LEADING_FLOAT.match(text)
    if not match:
        return None
    return float(match.group(1).replace("Infinity", "inf"))


def parse_date(text: str) -> Optional[datetime]:
    """Parse an ISO-8601 date or datetime; None when it does not parse."""
    try:
        return datetime.fromisoformat(text.strip())
    except ValueError:
        return None


def _locale(tag: str) -> Locale:
    return Locale.parse(tag, sep="-")


def format_number(text: str, locale: str, style: Union[NumberStyle, str]) -> str:
    value = parse_leading_float(text)
    if value is None:
        return text
    loc = _locale(locale)
    if NumberStyle(style) is NumberStyle.PERCENT:
        return format_percent(value, locale=loc)
    return format_decimal(value, locale=loc)


def format_currency(text: str, locale: str, currency: str) -> str:
    value = parse_leading_float(text)
    if value is None:
        return text
    return babel_format_currency(value, currency.upper(), locale=_locale(locale))


def _style(options: dict[str, Any], name: str, default: Optional[str]) -> Optional[str]:
    style = options.get(name, default)
    if style is not None and style not in DATE_STYLES:
        raise ValueError(f"Unsupported {name} '{style}', expected one of {DATE_STYLES}")
    return style


def format_date(text: str, locale: str, options: dict[str, Any]) -> str:
    """Render an ISO date using dateStyle (default short) and optional timeStyle."""
    value = parse_date(text)
    if value is None:
        return text
    loc = _locale(locale)
    date_style = _style(options, "dateStyle", "short")
    time_style = _style(options, "timeStyle", None)

    date_text = babel_format_date(value.date(), format=date_style, locale=loc)
    if time_style is None:
        return date_text

    time_text = babel_format_time(value, format=time_style, locale=loc)
    pattern = get_datetime_format(date_style, locale=loc)
    return (
        str(pattern)
        .replace("'", "")
        .replace("{0}", time_text)
        .replace("{1}", date_text)
    )
