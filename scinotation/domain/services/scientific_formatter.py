"""Scientific notation formatter.

Renders a double-precision value as "mantissa × 10^exponent".
Pure logic with no I/O; every float has a rendering.
"""

import logging
import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Optional, Tuple

from scinotation.config.constants import (
    CARET,
    NAN_TEXT,
    NEGATIVE_INFINITY_TEXT,
    POSITIVE_INFINITY_TEXT,
    SUPERSCRIPT_DIGITS,
    SUPERSCRIPT_MINUS,
    TIMES_TEN,
    ZERO_TEXT,
)
from scinotation.domain.models import ExponentStyle, FormatOptions, NumberLocale

# Read-only after import
_SUPERSCRIPT_TABLE = str.maketrans("0123456789-", SUPERSCRIPT_DIGITS + SUPERSCRIPT_MINUS)


class ScientificFormatter:
    """Format doubles into human-readable scientific notation."""

    def format(self, value: float, options: Optional[FormatOptions] = None) -> str:
        """Format a double as "mantissa × 10^exponent".

        Args:
            value: The number to format
            options: Decimals, locale and exponent style (defaults apply
                when omitted)

        Returns:
            The rendered string, or one of "NaN", "∞", "-∞", "0"

        Note:
            The mantissa is rounded half away from zero and is not
            renormalized afterwards, so 9.999 with one decimal renders
            as "10 × 10^0".
        """
        options = options or FormatOptions()
        value = float(value)

        special = special_value_text(value)
        if special is not None:
            return special

        exponent = math.floor(math.log10(abs(value)))
        divisor = 10.0 ** exponent
        # 10**exponent underflows to zero next to the denormal boundary
        mantissa_raw = value / divisor if divisor else math.inf

        if math.isinf(mantissa_raw) or math.isnan(mantissa_raw):
            logging.debug("Scientific fallback for value=%r exponent=%s", value, exponent)
            mantissa_text, exponent = _fallback_scientific(value, options.decimals, options.locale)
            return mantissa_text + render_power_of_ten(exponent, options.style)

        rounded = round_half_away(mantissa_raw, options.decimals)
        mantissa_text = render_mantissa(rounded, options.decimals, options.locale)
        return mantissa_text + render_power_of_ten(exponent, options.style)


def special_value_text(value: float) -> Optional[str]:
    """Return the fixed rendering for NaN, infinities and zero."""
    if math.isnan(value):
        return NAN_TEXT
    if math.isinf(value):
        return POSITIVE_INFINITY_TEXT if value > 0 else NEGATIVE_INFINITY_TEXT
    if value == 0:
        return ZERO_TEXT
    return None


def round_half_away(mantissa: float, decimals: int) -> Decimal:
    """Round the shortest decimal form of ``mantissa`` to ``decimals`` places."""
    context = Context(prec=decimals + 3)
    quantum = Decimal(1).scaleb(-decimals)
    return Decimal(str(mantissa)).quantize(quantum, rounding=ROUND_HALF_UP, context=context)


def render_mantissa(rounded: Decimal, decimals: int, locale: NumberLocale) -> str:
    """Render without grouping; integral values drop the fractional part."""
    if rounded == rounded.to_integral_value():
        return f"{rounded:.0f}"
    return f"{rounded:.{decimals}f}".replace(".", locale.decimal_separator)


def render_power_of_ten(exponent: int, style: ExponentStyle) -> str:
    """Render the " × 10^n" suffix (or " × 10ⁿ" in superscript style)."""
    text = str(exponent)
    if style is ExponentStyle.SUPERSCRIPT:
        return TIMES_TEN + text.translate(_SUPERSCRIPT_TABLE)
    return f"{TIMES_TEN}{CARET}{text}"


def _fallback_scientific(value: float, decimals: int, locale: NumberLocale) -> Tuple[str, int]:
    """Derive mantissa text and exponent from the standard 'e' format.

    Only reached when direct division by a power of ten is unusable.
    """
    mantissa_text, _, exponent_text = f"{value:.{decimals}e}".partition("e")
    if "." in mantissa_text:
        mantissa_text = mantissa_text.rstrip("0").rstrip(".")
    return mantissa_text.replace(".", locale.decimal_separator), int(exponent_text)
