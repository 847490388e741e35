"""GSV sentence constructor.

GSV (GNSS Satellites in View) describes the satellites a receiver can see.
Each sentence carries up to four satellite blocks; a complete sky view is
split across ``msg_total`` sentences.

GSV Sentence Format:
    $GPGSV,3,1,11,03,03,111,00,04,15,270,00,06,01,010,00,13,06,292,00,1
           | | |  |           |               |               |         |
           | | |  +-----------+---------------+---------------+-- Satellite blocks:
           | | |                  PRN, elevation, azimuth, SNR           |
           | | +-- Satellites in view                                  |
           | +-- Message number                  Signal ID (NMEA 4.1) --+
           +-- Total number of messages

Blocks start at index 4 and step by 4 while the block start lies more than
four fields before the end of the array. The last field is treated as
trailing metadata, so a sentence without a signal ID loses its final
block; this mirrors the fixed-offset layout and is a known limitation.
"""

from nmeaparser.fields import get_field, parse_int_or_default
from nmeaparser.talkers import TalkerSystem
from nmeaparser.types import GSVData, SatelliteInfo

_FIRST_BLOCK_INDEX = 4
_BLOCK_SIZE = 4


def _extract_satellites(fields: list[str]) -> tuple[SatelliteInfo, ...]:
    """Build one SatelliteInfo per 4-field block; empty values default to 0."""
    return tuple(
        SatelliteInfo(
            prn=parse_int_or_default(fields[index]),
            elevation=parse_int_or_default(fields[index + 1]),
            azimuth=parse_int_or_default(fields[index + 2]),
            snr=parse_int_or_default(fields[index + 3]),
        )
        for index in range(_FIRST_BLOCK_INDEX, len(fields) - _BLOCK_SIZE, _BLOCK_SIZE)
    )


def build_gsv(fields: list[str], system: TalkerSystem, valid: bool) -> GSVData:
    """Construct a GSVData object from split fields."""
    return GSVData(
        system=system,
        msg_total=parse_int_or_default(get_field(fields, 1)),
        msg_num=parse_int_or_default(get_field(fields, 2)),
        sat_total=parse_int_or_default(get_field(fields, 3)),
        satellites=_extract_satellites(fields),
        valid=valid,
    )
