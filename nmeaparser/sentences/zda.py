"""ZDA sentence constructor.

ZDA (Time and Date) reports UTC time, calendar date and the local time zone.

ZDA Sentence Format:
    $GNZDA,094810.000,26,04,2020,00,00*4C
           |          |  |  |    |  |
           |          |  |  |    |  +-- Local zone minutes
           |          |  |  |    +-- Local zone hours
           |          |  |  +-- Year
           |          |  +-- Month
           |          +-- Day
           +-- UTC time (HHMMSS.sss)
"""

from nmeaparser.fields import convert_to_seconds, get_field, parse_int_or_default
from nmeaparser.talkers import TalkerSystem
from nmeaparser.types import ZDAData


def build_zda(fields: list[str], system: TalkerSystem, valid: bool) -> ZDAData:
    """Construct a ZDAData object; only the time field is mandatory."""
    return ZDAData(
        system=system,
        time=convert_to_seconds(get_field(fields, 1)),
        day=parse_int_or_default(get_field(fields, 2)),
        month=parse_int_or_default(get_field(fields, 3)),
        year=parse_int_or_default(get_field(fields, 4)),
        zone_hrs=parse_int_or_default(get_field(fields, 5)),
        zone_mins=parse_int_or_default(get_field(fields, 6)),
        valid=valid,
    )
