"""GGA sentence constructor.

GGA (Global Positioning System Fix Data) is one of the most important NMEA
sentences, providing position fix information including coordinates, altitude,
fix quality, and satellite/accuracy metrics.

GGA Sentence Format:
    $GPGGA,134740.000,5540.3248,N,01231.2992,E,1,09,0.9,20.2,M,41.5,M,,0000*61
           |          |         | |          | | |  |   |    | |    | | |
           |          |         | |          | | |  |   |    | |    | | +-- DGPS station ID
           |          |         | |          | | |  |   |    | |    | +-- Age of DGPS data (s)
           |          |         | |          | | |  |   |    | +----+-- Geoidal separation (M=meters)
           |          |         | |          | | |  |   +----+-- Altitude above MSL
           |          |         | |          | | |  +-- HDOP (horizontal dilution)
           |          |         | |          | | +-- Number of satellites
           |          |         | |          | +-- Fix quality (0-8)
           |          |         | +----------+-- Longitude + E/W
           |          +---------+-- Latitude + N/S
           +-- UTC time (HHMMSS.sss)
"""

from nmeaparser.fields import (
    convert_to_decimal_degrees,
    convert_to_seconds,
    get_field,
    parse_float_or_default,
    parse_int_or_default,
)
from nmeaparser.talkers import TalkerSystem
from nmeaparser.types import GGAData

_FIX_QUALITIES = (
    "INVALID",
    "GPS (SPS)",
    "DGPS",
    "PPS",
    "REAL TIME KINEMATIC",
    "FLOAT RTK",
    "DEAD RECKONING",
    "MANUAL INPUT",
    "SIMULATION",
)
_UNKNOWN_FIX_QUALITY = "UNKNOWN"


def describe_fix_quality(flag: str) -> str:
    """Map the GGA fix quality indicator to its description.

    Example:
        >>> describe_fix_quality("4")
        'REAL TIME KINEMATIC'
        >>> describe_fix_quality("")
        'UNKNOWN'
    """
    index = parse_int_or_default(flag, default=-1)
    if 0 <= index < len(_FIX_QUALITIES):
        return _FIX_QUALITIES[index]
    return _UNKNOWN_FIX_QUALITY


def build_gga(fields: list[str], system: TalkerSystem, valid: bool) -> GGAData:
    """Construct a GGAData object from split fields.

    Time and coordinates are mandatory and raise ``InvalidFormatError`` when
    malformed; every other field defaults when empty or absent.
    """
    return GGAData(
        system=system,
        time=convert_to_seconds(get_field(fields, 1)),
        latitude=convert_to_decimal_degrees(get_field(fields, 2), get_field(fields, 3)),
        longitude=convert_to_decimal_degrees(get_field(fields, 4), get_field(fields, 5)),
        fix_quality=describe_fix_quality(get_field(fields, 6)),
        num_sats=parse_int_or_default(get_field(fields, 7)),
        hdop=parse_float_or_default(get_field(fields, 8)),
        altitude=parse_float_or_default(get_field(fields, 9)),
        # fields[10] and fields[12] are the unit letters (always M)
        geoidal_separation=parse_float_or_default(get_field(fields, 11)),
        age_of_differential=parse_float_or_default(get_field(fields, 13)),
        diff_reference_id=parse_int_or_default(get_field(fields, 14)),
        valid=valid,
    )
