from __future__ import annotations

import logging
import re
from decimal import Decimal
from typing import Any

from scinotation.config.constants import INFINITY_WORDS, NAN_WORDS
from scinotation.domain.exceptions import InvalidInputError, MalformedNumberError
from scinotation.domain.models import NumberLocale
from scinotation.domain.services.locale_resolver import resolve_locale

_SPACED_SIGN = re.compile(r"^([+-])\s+")
_SPACED_GROUPS = re.compile(r"(?<![0-9])[0-9]{1,3}(?:\s[0-9]{3})+(?![0-9])")
_DECIMAL_LITERAL = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")


def parse_number(text: Any, locale: Any = None) -> float | Decimal:
    """Parse numeric text using the locale's separators.

    The strict float grammar is tried first; a lenient decimal literal
    is the fallback.

    Raises:
        InvalidInputError: If the text is None, blank or not a string
        MalformedNumberError: If neither grammar accepts the text
    """
    if text is None:
        raise InvalidInputError("Input string cannot be None")
    if not isinstance(text, str):
        raise InvalidInputError(f"Expected a string, got {type(text).__name__}")
    if not text.strip():
        raise InvalidInputError("Input string cannot be blank")

    number_locale = resolve_locale(locale)

    value = _parse_float(text, number_locale)
    if value is not None:
        return value

    dec = _parse_decimal(text, number_locale)
    if dec is not None:
        logging.debug("Parsed %r as decimal literal locale=%s", text, number_locale.name)
        return dec

    raise MalformedNumberError(text)


def _float_pattern(locale: NumberLocale) -> re.Pattern[str]:
    decimal = re.escape(locale.decimal_separator)
    groups = f"(?:{re.escape(locale.group_separator)}[0-9]+)*" if locale.group_separator else ""
    return re.compile(
        rf"(?P<sign>[+-])?"
        rf"(?:(?P<int>[0-9]+{groups})(?:{decimal}(?P<frac>[0-9]*))?"
        rf"|{decimal}(?P<bare_frac>[0-9]+))"
        rf"(?:[eE](?P<exp>[+-]?[0-9]+))?"
    )


def _parse_float(text: str, locale: NumberLocale) -> float | None:
    stripped = text.strip()

    sign = ""
    word = stripped.lower()
    if word[:1] in "+-":
        sign, word = word[0], word[1:]
    if word in NAN_WORDS:
        return float("nan")
    if word in INFINITY_WORDS:
        return float(f"{sign}inf")

    match = _float_pattern(locale).fullmatch(stripped)
    if match is None:
        return None

    integer = match.group("int") or "0"
    if locale.group_separator:
        integer = integer.replace(locale.group_separator, "")
    fraction = match.group("frac") or match.group("bare_frac") or ""
    exponent = match.group("exp") or "0"
    return float(f"{match.group('sign') or ''}{integer}.{fraction}e{exponent}")


def _parse_decimal(text: str, locale: NumberLocale) -> Decimal | None:
    cleaned = _SPACED_SIGN.sub(r"\1", text.strip())
    if locale.group_separator:
        cleaned = cleaned.replace(locale.group_separator, "")
        # Any whitespace may stand in for a whitespace group separator
        if locale.group_separator.isspace():
            cleaned = _SPACED_GROUPS.sub(lambda match: "".join(match.group().split()), cleaned)
    cleaned = cleaned.replace(locale.decimal_separator, ".")

    if _DECIMAL_LITERAL.fullmatch(cleaned) is None:
        return None
    return Decimal(cleaned)
