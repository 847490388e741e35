"""DTM sentence constructor.

DTM (Datum Reference) identifies the local geodetic datum and its offset
from the reference datum.

DTM Sentence Format:
    $GPDTM,W84,,0.0,N,0.0,E,0.0,W84*6F
           |   | |   | |   | |   |
           |   | |   | |   | |   +-- Reference datum
           |   | |   | |   | +-- Altitude offset (m)
           |   | |   | +---+-- Longitude offset + E/W
           |   | +---+-- Latitude offset + N/S
           |   +-- Local datum subdivision code
           +-- Local datum code (W84, W72, S85, P90, 999=user defined)
"""

from nmeaparser.fields import apply_hemisphere, get_field, parse_float_or_default
from nmeaparser.talkers import TalkerSystem
from nmeaparser.types import DTMData


def build_dtm(fields: list[str], system: TalkerSystem, valid: bool) -> DTMData:
    """Construct a DTMData object; offsets are signed by their hemisphere."""
    return DTMData(
        system=system,
        local_datum_code=get_field(fields, 1),
        local_datum_subcode=get_field(fields, 2),
        lat_offset=apply_hemisphere(
            parse_float_or_default(get_field(fields, 3)), get_field(fields, 4)
        ),
        long_offset=apply_hemisphere(
            parse_float_or_default(get_field(fields, 5)), get_field(fields, 6)
        ),
        alt_offset=parse_float_or_default(get_field(fields, 7)),
        ref_datum=get_field(fields, 8),
        valid=valid,
    )
