"""VTG sentence constructor.

VTG (Track Made Good and Ground Speed) provides velocity information from GNSS.

VTG Sentence Format:
    $GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B
           |     | |     | |     | |     | |
           |     | |     | |     | |     | +-- Mode indicator (A/D/E/N)
           |     | |     | |     | +-----+-- Speed in km/h
           |     | |     | +-----+-- Speed in knots
           |     | +-----+-- Track (magnetic north, degrees)
           +-----+-- Track (true north, degrees)

Mode Indicators (FAA mode, NMEA 2.3+):
    A = Autonomous (standard GPS positioning)
    D = Differential (DGPS or RTK)
    E = Estimated (dead reckoning)
    N = Not valid (no fix)

Note: When stationary, the track angle may be empty (no heading when not moving).
Empty values default to 0.0; a missing mode indicator defaults to 'N'.
"""

from nmeaparser.fields import get_field, parse_char_or_default, parse_float_or_default
from nmeaparser.talkers import TalkerSystem
from nmeaparser.types import VTGData

_DEFAULT_MODE = "N"


def build_vtg(fields: list[str], system: TalkerSystem, valid: bool) -> VTGData:
    """Construct a VTGData object from split fields.

    Maps NMEA field indices to VTGData attributes:
        fields[1] -> cog_true
        fields[3] -> cog_mag
        fields[5] -> sog_knots
        fields[7] -> sog_kmhr
        fields[9] -> mode (FAA mode indicator, if present)
    """
    return VTGData(
        system=system,
        cog_true=parse_float_or_default(get_field(fields, 1)),
        cog_mag=parse_float_or_default(get_field(fields, 3)),
        sog_knots=parse_float_or_default(get_field(fields, 5)),
        sog_kmhr=parse_float_or_default(get_field(fields, 7)),
        mode=parse_char_or_default(get_field(fields, 9), _DEFAULT_MODE),
        valid=valid,
    )
