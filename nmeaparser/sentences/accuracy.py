"""GBS and GST sentence constructors.

Both sentences report error statistics of the position solution.

GBS (GNSS Satellite Fault Detection):
    $GPGBS,015509.00,-0.031,-0.186,0.219,19,0.000,-0.354,6.972*4D
           |         |      |      |     |  |     |      |
           |         |      |      |     |  |     |      +-- Std deviation of bias
           |         |      |      |     |  |     +-- Bias of failed satellite (m)
           |         |      |      |     |  +-- Probability of missed detection
           |         |      |      |     +-- PRN of most likely failed satellite
           |         +------+------+-- Expected lat/lon/alt error (m)
           +-- UTC time (HHMMSS.ss)

GST (GNSS Pseudorange Error Statistics):
    $GPGST,172814.0,0.006,0.023,0.020,273.6,0.023,0.020,0.031*6A
           |        |     |     |     |     |     |     |
           |        |     |     |     |     +-----+-----+-- Lat/lon/height std dev (m)
           |        |     |     |     +-- Orientation of semi-major axis (deg)
           |        |     +-----+-- Error ellipse semi-major/semi-minor (m)
           |        +-- RMS of pseudorange residuals
           +-- UTC time (HHMMSS.ss)
"""

from nmeaparser.fields import (
    convert_to_seconds,
    get_field,
    parse_float_or_default,
    parse_int_or_default,
)
from nmeaparser.talkers import TalkerSystem
from nmeaparser.types import GBSData, GSTData


def build_gbs(fields: list[str], system: TalkerSystem, valid: bool) -> GBSData:
    """Construct a GBSData object from split fields."""
    return GBSData(
        system=system,
        time=convert_to_seconds(get_field(fields, 1)),
        lat_error=parse_float_or_default(get_field(fields, 2)),
        long_error=parse_float_or_default(get_field(fields, 3)),
        alt_error=parse_float_or_default(get_field(fields, 4)),
        failed_prn=parse_int_or_default(get_field(fields, 5)),
        prob_of_missed=parse_float_or_default(get_field(fields, 6)),
        excluded_meas_err=parse_float_or_default(get_field(fields, 7)),
        standard_deviation=parse_float_or_default(get_field(fields, 8)),
        valid=valid,
    )


def build_gst(fields: list[str], system: TalkerSystem, valid: bool) -> GSTData:
    """Construct a GSTData object from split fields."""
    return GSTData(
        system=system,
        time=convert_to_seconds(get_field(fields, 1)),
        rms=parse_float_or_default(get_field(fields, 2)),
        semi_major_error=parse_float_or_default(get_field(fields, 3)),
        semi_minor_error=parse_float_or_default(get_field(fields, 4)),
        orientation_error=parse_float_or_default(get_field(fields, 5)),
        latitude_error=parse_float_or_default(get_field(fields, 6)),
        longitude_error=parse_float_or_default(get_field(fields, 7)),
        height_error=parse_float_or_default(get_field(fields, 8)),
        valid=valid,
    )
