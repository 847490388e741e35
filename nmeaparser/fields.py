"""NMEA field parsing utilities.

This module provides utilities for parsing individual fields from NMEA sentences.
NMEA fields are comma-separated and may be empty (consecutive commas indicate
missing data).

Two families of helpers live here:

    1. Defaulting parsers (``parse_*_or_default``, ``get_field``): optional
       fields never abort a sentence. An empty, missing, or unparseable value
       becomes a neutral default (0, 0.0, "" or a fallback character).

    2. Structural parsers (``convert_to_decimal_degrees``,
       ``convert_to_seconds``, ``split_date``): coordinates, timestamps and
       dates are mandatory. Malformed input raises ``InvalidFormatError``
       and the whole sentence is rejected.
"""

from nmeaparser.errors import InvalidFormatError

_HEMISPHERES = ("N", "S", "E", "W")
_NEGATIVE_HEMISPHERES = ("S", "W")

# HHMMSS is the shortest accepted timestamp; fractional seconds may follow
_MINIMUM_TIME_LENGTH = 6
_DATE_LENGTH = 6


def get_field(fields: list[str], index: int) -> str:
    """Return ``fields[index]``, or an empty string when out of range.

    Receivers routinely omit trailing fields, so an absent field is
    treated exactly like an empty one.

    Example:
        >>> get_field(["GPGLL", "4916.45"], 1)
        '4916.45'
        >>> get_field(["GPGLL", "4916.45"], 7)
        ''
    """
    if 0 <= index < len(fields):
        return fields[index]
    return ""


def parse_int_or_default(value: str, default: int = 0) -> int:
    """Parse a string field to int, returning ``default`` if empty or invalid.

    Args:
        value: String value from an NMEA field
        default: Value returned when the field cannot be parsed

    Returns:
        Parsed integer value, or ``default``

    Example:
        >>> parse_int_or_default("08")
        8
        >>> parse_int_or_default("")
        0
    """
    try:
        return int(value)
    except ValueError:
        return default


def parse_float_or_default(value: str, default: float = 0.0) -> float:
    """Parse a string field to float, returning ``default`` if empty or invalid.

    Example:
        >>> parse_float_or_default("545.4")
        545.4
        >>> parse_float_or_default("")  # empty field
        0.0
    """
    try:
        return float(value)
    except ValueError:
        return default


def parse_char_or_default(value: str, default: str) -> str:
    """Return the first character of a field, or ``default`` if it is blank.

    Used for single-character indicators such as FAA mode or GSA selection
    mode, where only the leading character is meaningful.
    """
    value = value.strip()
    if not value:
        return default
    return value[0]


def apply_hemisphere(value: float, direction: str) -> float:
    """Negate ``value`` for southern or western hemisphere indicators."""
    if direction in _NEGATIVE_HEMISPHERES:
        return -value
    return value


def _is_ascii_digits(text: str) -> bool:
    """True only for a non-empty run of ASCII 0-9."""
    return text.isascii() and text.isdecimal()


def _parse_coordinate_parts(value: str) -> tuple[float, float]:
    """Parse NMEA coordinate into degrees and minutes components.

    NMEA coordinates use [D]DDMM.MMMM format where the 2 digits immediately
    before the decimal point start the minutes; everything earlier is
    degrees. A leading zero (longitudes are zero-padded to three degree
    digits) is irrelevant to the split.

    Raises:
        InvalidFormatError: If there is no decimal point, fewer than two
            digits precede it, or either part is not numeric.

    Example:
        >>> _parse_coordinate_parts("4807.038")  # 48° 07.038'
        (48.0, 7.038)
        >>> _parse_coordinate_parts("01131.000")  # 11° 31.000'
        (11.0, 31.0)
    """
    dot_position = value.find(".")
    if dot_position < 2:
        raise InvalidFormatError(f"Malformed coordinate: {value!r}")

    degrees_text = value[: dot_position - 2]
    minutes_text = value[dot_position - 2 :]
    if not _is_ascii_digits(minutes_text[:2]) or not (
        degrees_text == "" or _is_ascii_digits(degrees_text)
    ):
        raise InvalidFormatError(f"Malformed coordinate: {value!r}")

    try:
        degrees = float(degrees_text or 0)
        minutes = float(minutes_text)
    except ValueError as err:
        raise InvalidFormatError(f"Malformed coordinate: {value!r}") from err

    return degrees, minutes


def convert_to_decimal_degrees(value: str, direction: str) -> float:
    """Convert NMEA coordinate (DDDMM.MMMM) to decimal degrees.

    NMEA uses degrees-minutes format with a hemisphere indicator.
    This function converts to decimal degrees with sign convention:
    - North/East = positive
    - South/West = negative

    The conversion formula is:
        decimal_degrees = degrees + (minutes / 60)

    Args:
        value: Coordinate in DDDMM.MMMM format (e.g., "4807.038")
        direction: Hemisphere indicator ("N", "S", "E", or "W")

    Returns:
        Decimal degrees (positive for N/E, negative for S/W)

    Raises:
        InvalidFormatError: If either field is empty, the hemisphere is not
            one of N/S/E/W, or the coordinate is malformed.

    Example:
        >>> convert_to_decimal_degrees("4807.038", "N")
        48.1173  # 48° + 7.038'/60
        >>> convert_to_decimal_degrees("01131.000", "W")
        -11.5166667  # negative for West
    """
    if not value or not direction:
        raise InvalidFormatError(
            f"Missing coordinate or hemisphere: {value!r}, {direction!r}"
        )
    if direction not in _HEMISPHERES:
        raise InvalidFormatError(f"Unknown hemisphere indicator: {direction!r}")

    degrees, minutes = _parse_coordinate_parts(value)
    return apply_hemisphere(degrees + minutes / 60.0, direction)


def convert_to_seconds(value: str) -> float:
    """Convert an NMEA timestamp (HHMMSS[.ss]) to seconds since midnight.

    Args:
        value: UTC time field (e.g., "123519" or "123519.00")

    Returns:
        hours * 3600 + minutes * 60 + seconds, fractional seconds kept

    Raises:
        InvalidFormatError: If shorter than 6 characters or not numeric.

    Example:
        >>> convert_to_seconds("123519")
        45319.0
    """
    if len(value) < _MINIMUM_TIME_LENGTH:
        raise InvalidFormatError(f"Malformed time: {value!r}")

    try:
        hours = float(value[0:2])
        minutes = float(value[2:4])
        seconds = float(value[4:])
    except ValueError as err:
        raise InvalidFormatError(f"Malformed time: {value!r}") from err

    return hours * 3600 + minutes * 60 + seconds


def split_date(value: str) -> tuple[str, str, str]:
    """Slice a DDMMYY date field into its day, month and year substrings.

    Raises:
        InvalidFormatError: If the field is not exactly 6 characters.

    Example:
        >>> split_date("040123")
        ('04', '01', '23')
    """
    if len(value) != _DATE_LENGTH:
        raise InvalidFormatError(f"Malformed date: {value!r}")
    return value[0:2], value[2:4], value[4:6]
