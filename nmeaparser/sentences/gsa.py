"""GSA sentence constructor.

GSA (GNSS DOP and Active Satellites) lists the satellites used in the
navigation solution and the resulting dilution of precision.

GSA Sentence Format:
    $GPGSA,A,3,01,02,03,04,05,06,07,08,09,10,11,12,1.0,1.0,1.0*30
           | | |                                   |   |   |
           | | |                                   |   |   +-- VDOP
           | | |                                   |   +-- HDOP
           | | |                                   +-- PDOP
           | | +-- Satellite IDs (up to 12, unused slots empty)
           | +-- Fix type (1=none, 2=2D, 3=3D)
           +-- Selection mode (M=manual, A=automatic)

The satellite list is located by fixed offsets: it starts at index 3 and
ends just before the three trailing DOP fields. Receivers that append
extra trailing fields (e.g. the NMEA 4.1 system ID) shift those offsets.
"""

from nmeaparser.fields import (
    get_field,
    parse_char_or_default,
    parse_float_or_default,
    parse_int_or_default,
)
from nmeaparser.talkers import TalkerSystem
from nmeaparser.types import GSAData

_FIRST_SATELLITE_INDEX = 3
_TRAILING_DOP_FIELDS = 3
_DEFAULT_MODE = "N"


def _extract_satellite_ids(fields: list[str]) -> tuple[int, ...]:
    """Collect satellite IDs up to the first empty slot."""
    sat_ids = []
    for index in range(_FIRST_SATELLITE_INDEX, len(fields) - _TRAILING_DOP_FIELDS):
        value = fields[index].strip()
        if not value:
            break
        sat_ids.append(parse_int_or_default(value))
    return tuple(sat_ids)


def build_gsa(fields: list[str], system: TalkerSystem, valid: bool) -> GSAData:
    """Construct a GSAData object from split fields."""
    return GSAData(
        system=system,
        mode=parse_char_or_default(get_field(fields, 1), _DEFAULT_MODE),
        current_mode=parse_int_or_default(get_field(fields, 2)),
        sat_ids=_extract_satellite_ids(fields),
        pdop=parse_float_or_default(get_field(fields, len(fields) - 3)),
        hdop=parse_float_or_default(get_field(fields, len(fields) - 2)),
        vdop=parse_float_or_default(get_field(fields, len(fields) - 1)),
        valid=valid,
    )
