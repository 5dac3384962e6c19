"""Locale resolution.

Turns the loosely-typed locale argument accepted by the public API into
a NumberLocale. Separator data comes from the CLDR tables shipped with
Babel.
"""

from __future__ import annotations

from typing import Any

from babel import Locale, UnknownLocaleError
from babel.numbers import get_decimal_symbol, get_group_symbol

from scinotation.config.constants import INVARIANT_LOCALE_NAME
from scinotation.domain.exceptions import InvalidInputError
from scinotation.domain.models import NumberLocale


def resolve_locale(locale: Any = None) -> NumberLocale:
    """Normalize a locale argument.

    Args:
        locale: None, a NumberLocale, a babel Locale, or an identifier
            such as "de_DE" / "fr-FR" / "invariant"

    Returns:
        The matching NumberLocale

    Raises:
        InvalidInputError: If the identifier is unknown or the argument
            has an unsupported type
    """
    if locale is None:
        return NumberLocale.invariant()
    if isinstance(locale, NumberLocale):
        return locale
    if isinstance(locale, Locale):
        return _from_babel(locale)
    if isinstance(locale, str):
        identifier = locale.strip()
        if not identifier or identifier.lower() == INVARIANT_LOCALE_NAME:
            return NumberLocale.invariant()
        return _from_babel(_parse_identifier(identifier))
    raise InvalidInputError(f"Locale of type {type(locale).__name__} is not supported")


def _parse_identifier(identifier: str) -> Locale:
    sep = "-" if "-" in identifier else "_"
    try:
        return Locale.parse(identifier, sep=sep)
    except (UnknownLocaleError, ValueError) as exc:
        raise InvalidInputError(f"Unknown locale '{identifier}': {exc}") from exc


def _from_babel(locale: Locale) -> NumberLocale:
    return NumberLocale(
        decimal_separator=get_decimal_symbol(locale),
        group_separator=get_group_symbol(locale),
        name=str(locale),
    )
