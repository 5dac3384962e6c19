"""Tests for type dispatch onto the formatter."""

import sys
import warnings
from datetime import datetime
from decimal import Decimal

import numpy as np
import pytest
from babel import Locale

from scinotation.domain.exceptions import InvalidInputError, MalformedNumberError
from scinotation.domain.services.type_dispatcher import (
    format_any,
    format_decimal,
    format_double,
    format_integer,
    format_single,
    format_string,
)


class TestFormatString:
    """Test numeric string input."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("0", "0"),
            ("5", "5 × 10^0"),
            ("0.000000005", "5 × 10^-9"),
            ("-12345", "-1.234500 × 10^4"),
            ("123.456", "1.234560 × 10^2"),
            ("1e10", "1 × 10^10"),
        ],
    )
    def test_formats_numeric_text(self, text: str, expected: str) -> None:
        assert format_string(text, decimals=6) == expected

    def test_small_value_with_two_decimals(self) -> None:
        assert format_string("0.00000123", 2) == "1.23 × 10^-6"

    def test_respects_locale(self) -> None:
        assert format_string("1234,56", locale="de_DE") == "1,234560 × 10^3"

    def test_special_words(self) -> None:
        assert format_string("NaN") == "NaN"
        assert format_string("-Infinity") == "-∞"

    def test_decimal_fallback_is_formatted(self) -> None:
        assert format_string("- 5") == "-5 × 10^0"

    @pytest.mark.parametrize("text", ["1 2 3", "1_000", "١٢٣", "1 2.3 4"])
    def test_non_literal_text_is_malformed(self, text: str) -> None:
        with pytest.raises(MalformedNumberError):
            format_string(text)

    def test_errors(self) -> None:
        with pytest.raises(MalformedNumberError):
            format_string("not a number")
        with pytest.raises(InvalidInputError):
            format_string("")


class TestFormatDouble:
    """Test double-precision input."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (0.0, "0"),
            (5.0, "5 × 10^0"),
            (-12345.0, "-1.234500 × 10^4"),
            (5e-324, "4.940656 × 10^-324"),
            (sys.float_info.max, "1.797693 × 10^308"),
            (float("nan"), "NaN"),
            (float("inf"), "∞"),
            (float("-inf"), "-∞"),
        ],
    )
    def test_formats_doubles(self, value: float, expected: str) -> None:
        assert format_double(value) == expected

    def test_accepts_style_name(self) -> None:
        assert format_double(123.456, style="superscript") == "1.234560 × 10²"

    def test_rejects_non_numbers(self) -> None:
        with pytest.raises(InvalidInputError, match="str"):
            format_double("1.5")  # type: ignore[arg-type]


class TestFormatDecimal:
    """Test high-precision decimal input."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (Decimal("0"), "0"),
            (Decimal("-0.000"), "0"),
            (Decimal("5.0"), "5 × 10^0"),
            (Decimal("0.000000005"), "5 × 10^-9"),
            (Decimal("-12345.0"), "-1.234500 × 10^4"),
            (Decimal("123.456"), "1.234560 × 10^2"),
            (Decimal("NaN"), "NaN"),
            (Decimal("Infinity"), "∞"),
        ],
    )
    def test_formats_decimals(self, value: Decimal, expected: str) -> None:
        assert format_decimal(value) == expected

    def test_large_value_narrows_to_double(self) -> None:
        value = Decimal("79228162514264337593543950335")
        assert format_decimal(value, decimals=2) == "7.92 × 10^28"

    def test_rejects_other_types(self) -> None:
        with pytest.raises(InvalidInputError, match="Decimal"):
            format_decimal(1.5)  # type: ignore[arg-type]


class TestFormatInteger:
    """Test integer input of every width."""

    @pytest.mark.parametrize(
        "value,decimals,expected",
        [
            (0, 6, "0"),
            (5, 6, "5 × 10^0"),
            (-42, 6, "-4.200000 × 10^1"),
            (2147483647, 6, "2.147484 × 10^9"),
            (np.int64(1000), 6, "1 × 10^3"),
            (np.int64(-999999999), 6, "-10 × 10^8"),
            (np.int16(100), 1, "1 × 10^2"),
            (np.int16(-32000), 1, "-3.2 × 10^4"),
            (np.uint8(100), 2, "1 × 10^2"),
            (np.uint8(255), 2, "2.55 × 10^2"),
            (np.uint32(123), 2, "1.23 × 10^2"),
            (np.uint32(4294967295), 2, "4.29 × 10^9"),
            (np.uint64(1000), 6, "1 × 10^3"),
            (np.uint64(18446744073709551615), 6, "1.844674 × 10^19"),
            (np.uint16(100), 4, "1 × 10^2"),
            (np.uint16(65535), 4, "6.5535 × 10^4"),
            (np.int8(0), 6, "0"),
        ],
    )
    def test_formats_integers(self, value: int, decimals: int, expected: str) -> None:
        assert format_integer(value, decimals=decimals) == expected

    def test_out_of_range_integer(self) -> None:
        with pytest.raises(InvalidInputError, match="out of double-precision range"):
            format_integer(10**400)

    def test_rejects_bool(self) -> None:
        with pytest.raises(InvalidInputError, match="bool"):
            format_integer(True)


class TestFormatSingle:
    """Test single-precision input."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (np.float32(3.14), "3.14 × 10^0"),
            (np.float32(1000000), "1 × 10^6"),
            (np.nextafter(np.float32(0), np.float32(1)), "1.40 × 10^-45"),
        ],
    )
    def test_formats_singles(self, value: np.float32, expected: str) -> None:
        assert format_single(value, decimals=2) == expected

    def test_special_values(self) -> None:
        assert format_single(np.float32("nan")) == "NaN"
        assert format_single(np.float32("inf")) == "∞"
        assert format_single(np.float32("-inf")) == "-∞"
        assert format_single(np.float32(-0.0)) == "0"

    def test_python_float_is_narrowed(self) -> None:
        assert format_single(3.14) == "3.140000 × 10^0"
        # Underflows in single precision only
        assert format_single(1e-50) == "0"
        assert format_double(1e-50) == "1 × 10^-50"

    def test_python_float_overflows_to_infinity_without_warning(self) -> None:
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert format_single(1e300) == "∞"
            assert format_single(-1e300) == "-∞"


class TestFormatAny:
    """Test runtime dispatch."""

    def test_routes_supported_kinds(self) -> None:
        assert format_any(5) == "5 × 10^0"
        assert format_any(123.0) == "1.230000 × 10^2"
        assert format_any(np.int64(1000)) == "1 × 10^3"
        assert format_any(np.float32(3.14)) == "3.140000 × 10^0"
        assert format_any(np.float64(2.5)) == "2.500000 × 10^0"
        assert format_any(Decimal("123.456")) == "1.234560 × 10^2"
        assert format_any("1e10") == "1 × 10^10"

    def test_passes_options_through(self) -> None:
        assert format_any(1234.56, decimals=2, locale="de_DE") == "1,23 × 10^3"
        assert format_any(1234.56, locale=Locale("de", "DE")) == "1,234560 × 10^3"
        assert format_any(12, style="SUPERSCRIPT") == "1.200000 × 10¹"

    @pytest.mark.parametrize(
        "value,type_name",
        [
            (datetime(2024, 1, 1), "datetime"),
            (True, "bool"),
            (np.bool_(True), "bool"),
            (1 + 2j, "complex"),
            (b"12", "bytes"),
            ([1], "list"),
            (object(), "object"),
        ],
    )
    def test_unsupported_types(self, value: object, type_name: str) -> None:
        with pytest.raises(InvalidInputError, match=type_name):
            format_any(value)

    def test_none(self) -> None:
        with pytest.raises(InvalidInputError, match="None"):
            format_any(None)

    def test_string_errors_keep_their_kind(self) -> None:
        with pytest.raises(MalformedNumberError):
            format_any("not a number")
        with pytest.raises(InvalidInputError):
            format_any("   ")

    def test_invalid_options(self) -> None:
        with pytest.raises(InvalidInputError, match="negative"):
            format_any(1.5, decimals=-1)
        with pytest.raises(InvalidInputError, match="integer"):
            format_any(1.5, decimals=2.0)  # type: ignore[arg-type]
        with pytest.raises(InvalidInputError, match="exponent style"):
            format_any(1.5, style="bogus")
        with pytest.raises(InvalidInputError, match="Unknown locale"):
            format_any(1.5, locale="xx_XX")
