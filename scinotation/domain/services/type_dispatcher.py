"""Type dispatch onto the scientific formatter.

Each supported input kind is normalized to a double before formatting.
Kinds with their own special values (numpy floats, Decimal) are checked
in their native representation first.
"""

from __future__ import annotations

from decimal import Decimal
from numbers import Real
from typing import Any

import numpy as np

from scinotation.config.constants import (
    DEFAULT_DECIMALS,
    NAN_TEXT,
    NEGATIVE_INFINITY_TEXT,
    POSITIVE_INFINITY_TEXT,
    ZERO_TEXT,
)
from scinotation.domain.exceptions import InvalidInputError
from scinotation.domain.models import ExponentStyle, FormatOptions
from scinotation.domain.services.locale_resolver import resolve_locale
from scinotation.domain.services.number_parser import parse_number
from scinotation.domain.services.scientific_formatter import ScientificFormatter

_formatter = ScientificFormatter()


def build_options(
    decimals: int = DEFAULT_DECIMALS,
    locale: Any = None,
    style: ExponentStyle | str = ExponentStyle.CARET,
) -> FormatOptions:
    """Validate loose public arguments into a FormatOptions."""
    return FormatOptions(
        decimals=decimals,
        locale=resolve_locale(locale),
        style=ExponentStyle.parse(style),
    )


# ============================================================================
# Typed entry points
# ============================================================================


def format_double(
    value: float,
    decimals: int = DEFAULT_DECIMALS,
    locale: Any = None,
    style: ExponentStyle | str = ExponentStyle.CARET,
) -> str:
    """Format a double-precision value."""
    return _format_double(value, build_options(decimals, locale, style))


def format_single(
    value: float | np.floating,
    decimals: int = DEFAULT_DECIMALS,
    locale: Any = None,
    style: ExponentStyle | str = ExponentStyle.CARET,
) -> str:
    """Format a single-precision value.

    Plain Python floats are first narrowed to float32; numpy floating
    scalars keep their own dtype.
    """
    return _format_single(value, build_options(decimals, locale, style))


def format_decimal(
    value: Decimal,
    decimals: int = DEFAULT_DECIMALS,
    locale: Any = None,
    style: ExponentStyle | str = ExponentStyle.CARET,
) -> str:
    """Format a Decimal; digits beyond double precision are not kept."""
    return _format_decimal(value, build_options(decimals, locale, style))


def format_integer(
    value: int | np.integer,
    decimals: int = DEFAULT_DECIMALS,
    locale: Any = None,
    style: ExponentStyle | str = ExponentStyle.CARET,
) -> str:
    """Format a Python or numpy integer; magnitudes above 2**53 lose precision."""
    return _format_integer(value, build_options(decimals, locale, style))


def format_string(
    value: str,
    decimals: int = DEFAULT_DECIMALS,
    locale: Any = None,
    style: ExponentStyle | str = ExponentStyle.CARET,
) -> str:
    """Parse numeric text with the locale's separators, then format it.

    Raises:
        InvalidInputError: If the text is blank
        MalformedNumberError: If the text is not a number
    """
    return _format_string(value, build_options(decimals, locale, style))


def format_any(
    value: Any,
    decimals: int = DEFAULT_DECIMALS,
    locale: Any = None,
    style: ExponentStyle | str = ExponentStyle.CARET,
) -> str:
    """Route ``value`` to the formatter matching its runtime type.

    Args:
        value: str, float, numpy floating, Decimal, int or numpy integer
        decimals: Fractional digits kept in the mantissa
        locale: None (invariant), identifier such as "de_DE",
            babel Locale or NumberLocale
        style: ExponentStyle member or its name

    Returns:
        The formatted string

    Raises:
        InvalidInputError: For None, blank strings and unsupported types
        MalformedNumberError: For strings that are not numbers
    """
    if value is None:
        raise InvalidInputError("Value cannot be None")

    options = build_options(decimals, locale, style)

    if isinstance(value, str):
        return _format_string(value, options)
    if isinstance(value, bool):
        raise InvalidInputError("Type bool is not supported")
    if isinstance(value, float):
        return _format_double(value, options)
    if isinstance(value, np.floating):
        return _format_single(value, options)
    if isinstance(value, Decimal):
        return _format_decimal(value, options)
    if isinstance(value, (int, np.integer)):
        return _format_integer(value, options)

    raise InvalidInputError(f"Type {type(value).__name__} is not supported")


# ============================================================================
# Internal paths
# ============================================================================


def _format_double(value: float, options: FormatOptions) -> str:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidInputError(f"Expected a real number, got {type(value).__name__}")
    return _formatter.format(float(value), options)


def _format_single(value: float | np.floating, options: FormatOptions) -> str:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidInputError(f"Expected a real number, got {type(value).__name__}")
    if isinstance(value, np.floating):
        single = value
    else:
        # Out-of-range doubles narrow to infinity
        with np.errstate(over="ignore"):
            single = np.float32(value)
    if np.isnan(single):
        return NAN_TEXT
    if np.isinf(single):
        return POSITIVE_INFINITY_TEXT if single > 0 else NEGATIVE_INFINITY_TEXT
    if single == 0:
        return ZERO_TEXT
    return _formatter.format(float(single), options)


def _format_decimal(value: Decimal, options: FormatOptions) -> str:
    if not isinstance(value, Decimal):
        raise InvalidInputError(f"Expected a Decimal, got {type(value).__name__}")
    if value.is_nan():
        return NAN_TEXT
    if value.is_zero():
        return ZERO_TEXT
    return _formatter.format(float(value), options)


def _format_integer(value: int | np.integer, options: FormatOptions) -> str:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidInputError(f"Expected an integer, got {type(value).__name__}")
    try:
        as_double = float(int(value))
    except OverflowError:
        bits = int(value).bit_length()
        raise InvalidInputError(f"Integer of {bits} bits is out of double-precision range") from None
    return _formatter.format(as_double, options)


def _format_string(value: str, options: FormatOptions) -> str:
    parsed = parse_number(value, options.locale)
    if isinstance(parsed, Decimal):
        return _format_decimal(parsed, options)
    return _format_double(parsed, options)
