"""Render numbers as human-readable scientific notation: "1.2346 × 10^4"."""

from scinotation.config.constants import PACKAGE_VERSION
from scinotation.domain.exceptions import (
    InvalidInputError,
    MalformedNumberError,
    ScientificNotationError,
)
from scinotation.domain.models import ExponentStyle, FormatOptions, NumberLocale
from scinotation.domain.services.locale_resolver import resolve_locale
from scinotation.domain.services.number_parser import parse_number
from scinotation.domain.services.type_dispatcher import (
    format_any,
    format_decimal,
    format_double,
    format_integer,
    format_single,
    format_string,
)

__version__ = PACKAGE_VERSION

__all__ = [
    "ExponentStyle",
    "FormatOptions",
    "InvalidInputError",
    "MalformedNumberError",
    "NumberLocale",
    "ScientificNotationError",
    "format_any",
    "format_decimal",
    "format_double",
    "format_integer",
    "format_single",
    "format_string",
    "parse_number",
    "resolve_locale",
]
