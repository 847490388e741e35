"""Tests for proprietary unit conversion."""

import pytest

from nmeaparser import (
    UnsupportedUnitError,
    convert_orientation,
    convert_position,
    convert_velocity,
)


class TestConvertPosition:
    """Tests for convert_position function."""

    def test_feet(self):
        assert convert_position("F", 10.0) == pytest.approx(3.048)

    def test_nautical_miles(self):
        assert convert_position("N", 2.0) == pytest.approx(3704.0)

    def test_kilometers(self):
        assert convert_position("K", 5.0) == pytest.approx(5000.0)

    def test_meters_identity(self):
        assert convert_position("M", 12.5) == 12.5

    def test_unknown_flag_raises(self):
        with pytest.raises(UnsupportedUnitError, match="Position unit 'X'"):
            convert_position("X", 1.0)

    def test_empty_flag_raises(self):
        with pytest.raises(UnsupportedUnitError):
            convert_position("", 1.0)


class TestConvertVelocity:
    """Tests for convert_velocity function."""

    def test_knots(self):
        assert convert_velocity("N", 19.4384449244) == pytest.approx(10.0)

    def test_kilometers_per_hour(self):
        assert convert_velocity("K", 36.0) == pytest.approx(10.0)

    def test_meters_per_second_identity(self):
        assert convert_velocity("M", 2.5) == 2.5

    def test_position_only_flag_raises(self):
        with pytest.raises(UnsupportedUnitError, match="Velocity"):
            convert_velocity("F", 1.0)


class TestConvertOrientation:
    """Tests for convert_orientation function."""

    def test_reference_frame_identity(self):
        assert convert_orientation("R", 45.5) == 45.5

    def test_unknown_frame_raises(self):
        with pytest.raises(UnsupportedUnitError, match="Orientation"):
            convert_orientation("D", 45.5)

    def test_unit_error_is_value_error(self):
        with pytest.raises(ValueError):
            convert_orientation("", 0.0)
