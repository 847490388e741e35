"""Tests for NMEA field micro-parsers."""

import pytest

from nmeaparser import InvalidFormatError
from nmeaparser.fields import (
    apply_hemisphere,
    convert_to_decimal_degrees,
    convert_to_seconds,
    get_field,
    parse_char_or_default,
    parse_float_or_default,
    parse_int_or_default,
    split_date,
)


class TestDefaultingParsers:
    """Tests for the parse_*_or_default helpers."""

    def test_int(self):
        assert parse_int_or_default("08") == 8

    def test_int_empty_defaults_to_zero(self):
        assert parse_int_or_default("") == 0

    def test_int_non_numeric_defaults_to_zero(self):
        assert parse_int_or_default("abc") == 0
        assert parse_int_or_default("1.5") == 0

    def test_int_custom_default(self):
        assert parse_int_or_default("", default=-1) == -1

    def test_float(self):
        assert parse_float_or_default("545.4") == pytest.approx(545.4)
        assert parse_float_or_default("-30.0") == pytest.approx(-30.0)

    def test_float_empty_defaults_to_zero(self):
        assert parse_float_or_default("") == 0.0

    def test_float_non_numeric_defaults_to_zero(self):
        assert parse_float_or_default("M") == 0.0

    def test_char(self):
        assert parse_char_or_default("A", "N") == "A"
        assert parse_char_or_default("Dxx", "N") == "D"

    def test_char_blank_uses_fallback(self):
        assert parse_char_or_default("", "N") == "N"
        assert parse_char_or_default("  ", "V") == "V"


class TestGetField:
    """Tests for get_field function."""

    def test_in_range(self):
        assert get_field(["GPGLL", "4916.45"], 1) == "4916.45"

    def test_out_of_range_is_empty(self):
        assert get_field(["GPGLL", "4916.45"], 7) == ""

    def test_negative_index_is_empty(self):
        assert get_field(["GPGLL"], -1) == ""


class TestConvertToDecimalDegrees:
    """Tests for convert_to_decimal_degrees function."""

    def test_north(self):
        assert convert_to_decimal_degrees("4807.038", "N") == pytest.approx(48.1173)

    def test_leading_zero_longitude(self):
        result = convert_to_decimal_degrees("01131.000", "E")
        assert result == pytest.approx(11.5166667, rel=1e-6)

    def test_south_and_west_are_negative(self):
        assert convert_to_decimal_degrees("3356.123", "S") == pytest.approx(
            -33.93538333, rel=1e-6
        )
        assert convert_to_decimal_degrees("15112.456", "W") == pytest.approx(
            -151.20760, rel=1e-6
        )

    def test_high_precision(self):
        result = convert_to_decimal_degrees("4807.03812345", "N")
        assert result == pytest.approx(48.11730208, rel=1e-8)

    def test_empty_value_raises(self):
        with pytest.raises(InvalidFormatError):
            convert_to_decimal_degrees("", "N")

    def test_empty_hemisphere_raises(self):
        with pytest.raises(InvalidFormatError):
            convert_to_decimal_degrees("4807.038", "")

    def test_unknown_hemisphere_raises(self):
        with pytest.raises(InvalidFormatError, match="hemisphere"):
            convert_to_decimal_degrees("4807.038", "X")

    def test_missing_decimal_point_raises(self):
        with pytest.raises(InvalidFormatError):
            convert_to_decimal_degrees("4807038", "N")

    def test_fewer_than_two_digits_before_point_raises(self):
        with pytest.raises(InvalidFormatError):
            convert_to_decimal_degrees("7.038", "N")

    def test_non_numeric_raises(self):
        with pytest.raises(InvalidFormatError):
            convert_to_decimal_degrees("48AB.038", "N")

    @pytest.mark.parametrize("value", ["\u00b207.038", "4\u00b207.038", "48\u00b27.038"])
    def test_non_ascii_digits_raise(self, value):
        with pytest.raises(InvalidFormatError):
            convert_to_decimal_degrees(value, "N")


class TestConvertToSeconds:
    """Tests for convert_to_seconds function."""

    def test_whole_seconds(self):
        assert convert_to_seconds("123519") == 45319.0

    def test_fractional_seconds(self):
        assert convert_to_seconds("154922.720") == pytest.approx(56962.72)

    def test_midnight(self):
        assert convert_to_seconds("000000.00") == 0.0

    def test_too_short_raises(self):
        with pytest.raises(InvalidFormatError):
            convert_to_seconds("00")

    def test_empty_raises(self):
        with pytest.raises(InvalidFormatError):
            convert_to_seconds("")

    def test_non_numeric_raises(self):
        with pytest.raises(InvalidFormatError):
            convert_to_seconds("12:35:19")


class TestSplitDate:
    """Tests for split_date function."""

    def test_ddmmyy(self):
        assert split_date("040123") == ("04", "01", "23")

    def test_wrong_length_raises(self):
        with pytest.raises(InvalidFormatError):
            split_date("0401")
        with pytest.raises(InvalidFormatError):
            split_date("")


class TestApplyHemisphere:
    """Tests for apply_hemisphere function."""

    def test_positive_hemispheres(self):
        assert apply_hemisphere(1.5, "N") == 1.5
        assert apply_hemisphere(1.5, "E") == 1.5
        assert apply_hemisphere(1.5, "") == 1.5

    def test_negative_hemispheres(self):
        assert apply_hemisphere(1.5, "S") == -1.5
        assert apply_hemisphere(1.5, "W") == -1.5
