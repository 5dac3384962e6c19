"""Library constants.

Centralized location for the glyphs, defaults and environment variable
names used across the formatter.
"""

# ============================================================================
# Formatting Defaults
# ============================================================================

DEFAULT_DECIMALS = 6
DEFAULT_LOCALE = "invariant"
DEFAULT_EXPONENT_STYLE = "caret"

# ============================================================================
# Special Value Renderings
# ============================================================================

NAN_TEXT = "NaN"
POSITIVE_INFINITY_TEXT = "∞"
NEGATIVE_INFINITY_TEXT = "-∞"
ZERO_TEXT = "0"

# ============================================================================
# Notation Glyphs
# ============================================================================

# Placed between the mantissa and the power of ten
TIMES_TEN = " × 10"
CARET = "^"

SUPERSCRIPT_DIGITS = "⁰¹²³⁴⁵⁶⁷⁸⁹"
SUPERSCRIPT_MINUS = "⁻"

# ============================================================================
# Invariant Locale
# ============================================================================

INVARIANT_LOCALE_NAME = "invariant"
INVARIANT_DECIMAL_SEPARATOR = "."
INVARIANT_GROUP_SEPARATOR = ","

# ============================================================================
# String Parsing
# ============================================================================

# Words accepted (case-insensitive, optionally signed) for special values
NAN_WORDS = {"nan"}
INFINITY_WORDS = {"infinity", "inf", "∞"}

# ============================================================================
# Environment Variables
# ============================================================================

ENV_DECIMALS = "SCINOTATION_DECIMALS"
ENV_LOCALE = "SCINOTATION_LOCALE"
ENV_EXPONENT_STYLE = "SCINOTATION_EXPONENT_STYLE"

# ============================================================================
# Package Metadata
# ============================================================================

PACKAGE_NAME = "scinotation"
PACKAGE_VERSION = "0.1.0"
