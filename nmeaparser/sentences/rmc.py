"""RMC sentence constructor.

RMC (Recommended Minimum Specific GNSS Data) combines time, date, position,
speed and course in a single sentence.

RMC Sentence Format:
    $GNRMC,094810.000,A,5547.94084,N,03730.27293,E,0.25,50.34,260420,,,A,V*31
           |          | |          | |           | |    |     |      |||  |
           |          | |          | |           | |    |     |      |||  +-- Navigational status (NMEA 4.1)
           |          | |          | |           | |    |     |      ||+-- FAA mode indicator
           |          | |          | |           | |    |     |      ++-- Magnetic variation + E/W
           |          | |          | |           | |    |     +-- Date (DDMMYY)
           |          | |          | |           | |    +-- Course over ground (deg true)
           |          | |          | |           | +-- Speed over ground (knots)
           |          | |          | +-----------+-- Longitude + E/W
           |          | +----------+-- Latitude + N/S
           |          +-- Status (A=valid, V=warning)
           +-- UTC time (HHMMSS.sss)
"""

from nmeaparser.fields import (
    apply_hemisphere,
    convert_to_decimal_degrees,
    convert_to_seconds,
    get_field,
    parse_char_or_default,
    parse_float_or_default,
    split_date,
)
from nmeaparser.talkers import TalkerSystem
from nmeaparser.types import RMCData

_STATUS_VALID = "A"
_DEFAULT_MODE = "N"
_DEFAULT_NAVIGATIONAL_STATUS = "V"


def build_rmc(fields: list[str], system: TalkerSystem, valid: bool) -> RMCData:
    """Construct an RMCData object from split fields.

    Time, coordinates and the 6-character date are mandatory. Magnetic
    variation is negated for West (or South) indicators.
    """
    day, month, year = split_date(get_field(fields, 9))
    magvar = parse_float_or_default(get_field(fields, 10))

    return RMCData(
        system=system,
        time=convert_to_seconds(get_field(fields, 1)),
        status=get_field(fields, 2) == _STATUS_VALID,
        latitude=convert_to_decimal_degrees(get_field(fields, 3), get_field(fields, 4)),
        longitude=convert_to_decimal_degrees(get_field(fields, 5), get_field(fields, 6)),
        sog=parse_float_or_default(get_field(fields, 7)),
        cog=parse_float_or_default(get_field(fields, 8)),
        day=day,
        month=month,
        year=year,
        magvar=apply_hemisphere(magvar, get_field(fields, 11)),
        mode=parse_char_or_default(get_field(fields, 12), _DEFAULT_MODE),
        navstatus=parse_char_or_default(
            get_field(fields, 13), _DEFAULT_NAVIGATIONAL_STATUS
        ),
        valid=valid,
    )
