"""Domain models.

Value objects describing how a number is rendered. They are immutable
and carry no behavior beyond validation.
"""

from dataclasses import dataclass, field
from enum import Enum

from scinotation.config.constants import (
    DEFAULT_DECIMALS,
    INVARIANT_DECIMAL_SEPARATOR,
    INVARIANT_GROUP_SEPARATOR,
    INVARIANT_LOCALE_NAME,
)
from scinotation.domain.exceptions import InvalidInputError


class ExponentStyle(Enum):
    """How the power of ten is written after the mantissa."""

    CARET = "caret"
    SUPERSCRIPT = "superscript"

    @classmethod
    def parse(cls, value: "ExponentStyle | str") -> "ExponentStyle":
        """Accept either a member or its (case-insensitive) value."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(member.value for member in cls)
            raise InvalidInputError(
                f"Unknown exponent style '{value}' (expected one of: {choices})"
            ) from None


@dataclass(frozen=True)
class NumberLocale:
    """Separator conventions used when rendering and parsing numbers.

    Only affects text, never arithmetic.
    """

    decimal_separator: str = INVARIANT_DECIMAL_SEPARATOR
    group_separator: str = INVARIANT_GROUP_SEPARATOR
    name: str = INVARIANT_LOCALE_NAME

    def __post_init__(self) -> None:
        """Validate separators."""
        if not self.decimal_separator:
            raise InvalidInputError("Decimal separator cannot be empty")
        if self.decimal_separator == self.group_separator:
            raise InvalidInputError(
                f"Decimal and group separators must differ: '{self.decimal_separator}'"
            )

    @classmethod
    def invariant(cls) -> "NumberLocale":
        """Culture-neutral locale: '.' decimal separator, ',' groups."""
        return cls()

    @property
    def is_invariant(self) -> bool:
        return self.name == INVARIANT_LOCALE_NAME


@dataclass(frozen=True)
class FormatOptions:
    """Per-call formatting options.

    Immutable value object; build a new one instead of mutating.
    """

    decimals: int = DEFAULT_DECIMALS
    locale: NumberLocale = field(default_factory=NumberLocale.invariant)
    style: ExponentStyle = ExponentStyle.CARET

    def __post_init__(self) -> None:
        """Validate options."""
        if isinstance(self.decimals, bool) or not isinstance(self.decimals, int):
            raise InvalidInputError(
                f"Decimals must be an integer, got {type(self.decimals).__name__}"
            )
        if self.decimals < 0:
            raise InvalidInputError(f"Decimals cannot be negative: {self.decimals}")
        if not isinstance(self.locale, NumberLocale):
            raise InvalidInputError(
                f"Locale must be a NumberLocale, got {type(self.locale).__name__}"
            )
        if not isinstance(self.style, ExponentStyle):
            raise InvalidInputError(
                f"Style must be an ExponentStyle, got {type(self.style).__name__}"
            )
