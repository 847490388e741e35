"""Unit conversion for proprietary sensor readings.

Proprietary TW sentences pair every numeric value with a single-character
unit flag. The converters below normalise those values to SI units:

    Position     F = feet, N = nautical miles, K = kilometers, M = meters
    Velocity     N = knots, K = kilometers per hour, M = meters per second
    Orientation  R = receiver reference frame (values pass through unchanged)

Any other flag, including an empty one, raises ``UnsupportedUnitError``.
"""

from nmeaparser.errors import UnsupportedUnitError

_METERS_PER_FOOT = 0.3048
_METERS_PER_NAUTICAL_MILE = 1852.0
_METERS_PER_KILOMETER = 1000.0

_KNOTS_PER_METER_PER_SECOND = 1.94384449244
_KILOMETERS_PER_HOUR_PER_METER_PER_SECOND = 3.6

_POSITION_FACTORS: dict[str, float] = {
    "F": _METERS_PER_FOOT,
    "N": _METERS_PER_NAUTICAL_MILE,
    "K": _METERS_PER_KILOMETER,
    "M": 1.0,
}

_VELOCITY_FACTORS: dict[str, float] = {
    "N": 1.0 / _KNOTS_PER_METER_PER_SECOND,
    "K": 1.0 / _KILOMETERS_PER_HOUR_PER_METER_PER_SECOND,
    "M": 1.0,
}

_ORIENTATION_FACTORS: dict[str, float] = {
    "R": 1.0,
}


def _convert(factors: dict[str, float], kind: str, flag: str, value: float) -> float:
    try:
        return value * factors[flag]
    except KeyError as err:
        raise UnsupportedUnitError(f"{kind} unit {flag!r} is not supported") from err


def convert_position(flag: str, value: float) -> float:
    """Convert a distance to meters.

    Example:
        >>> convert_position("K", 5.0)
        5000.0
    """
    return _convert(_POSITION_FACTORS, "Position", flag, value)


def convert_velocity(flag: str, value: float) -> float:
    """Convert a speed to meters per second.

    Example:
        >>> convert_velocity("M", 2.5)
        2.5
    """
    return _convert(_VELOCITY_FACTORS, "Velocity", flag, value)


def convert_orientation(flag: str, value: float) -> float:
    """Validate an orientation frame flag and return the angle unchanged."""
    return _convert(_ORIENTATION_FACTORS, "Orientation", flag, value)
