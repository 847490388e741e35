"""GLL sentence constructor.

GLL (Geographic Position - Latitude/Longitude) is a compact position report.

GLL Sentence Format:
    $GNGLL,5547.94084,N,03730.27293,E,094810.000,A,A*4B
           |          | |           | |          | |
           |          | |           | |          | +-- FAA mode indicator (NMEA 2.3+)
           |          | |           | |          +-- Status (A=valid, V=invalid)
           |          | |           | +-- UTC time (HHMMSS.sss)
           |          | +-----------+-- Longitude + E/W
           +----------+-- Latitude + N/S
"""

from nmeaparser.fields import (
    convert_to_decimal_degrees,
    convert_to_seconds,
    get_field,
    parse_char_or_default,
)
from nmeaparser.talkers import TalkerSystem
from nmeaparser.types import GLLData

_STATUS_VALID = "A"
_DEFAULT_MODE = "N"


def build_gll(fields: list[str], system: TalkerSystem, valid: bool) -> GLLData:
    """Construct a GLLData object from split fields.

    Older receivers omit the mode indicator; it then defaults to 'N'.
    """
    return GLLData(
        system=system,
        latitude=convert_to_decimal_degrees(get_field(fields, 1), get_field(fields, 2)),
        longitude=convert_to_decimal_degrees(get_field(fields, 3), get_field(fields, 4)),
        time=convert_to_seconds(get_field(fields, 5)),
        status=get_field(fields, 6) == _STATUS_VALID,
        mode=parse_char_or_default(get_field(fields, 7), _DEFAULT_MODE),
        valid=valid,
    )
