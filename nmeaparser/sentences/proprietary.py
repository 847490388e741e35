"""Proprietary sentence constructors.

PASHR (inertial attitude, as emitted by Ashtech-style INS receivers):
    $PASHR,085335.000,224.19,T,-01.26,+00.83,+00.00,0.101,0.113,0.267,1,0
           |          |      | |      |      |      |     |     |     | |
           |          |      | |      |      |      |     |     |     | +-- INS status (optional)
           |          |      | |      |      |      |     |     |     +-- GNSS aiding status
           |          |      | |      |      |      +-----+-----+-- Roll/pitch/heading accuracy
           |          |      | |      |      +-- Heave (m)
           |          |      | +------+-- Roll, pitch (deg)
           |          |      +-- T = true heading
           |          +-- Heading (deg)
           +-- UTC time (HHMMSS.sss)

TW sensor readings. Every value is followed by a single-character unit flag
which is validated and converted by ``nmeaparser.units``; an unknown flag
rejects the whole sentence with ``UnsupportedUnitError``:

    $PTWPOS,time,x,u,y,u,z,u,distance,u,velocity,u     position units, velocity unit
    $PTWVCT,time,speed,u,course,u                      velocity unit, orientation unit
    $PTWPLS,time,left_pulses,right_pulses,distance,u   position unit
    $PTWWHE,time,left_speed,u,right_speed,u            velocity units
    $PTWHPR,time,heading,u,pitch,u,roll,u              orientation units
    $PTACC,time,x,y,z,frame                            orientation (frame) unit
    $PTGYR,time,x,y,z,frame                            orientation (frame) unit
"""

from collections.abc import Callable

from nmeaparser.fields import (
    convert_to_seconds,
    get_field,
    parse_float_or_default,
    parse_int_or_default,
)
from nmeaparser.talkers import TalkerSystem
from nmeaparser.types import (
    PASHRData,
    TACCData,
    TGYRData,
    TWHPRData,
    TWPLSData,
    TWPOSData,
    TWVCTData,
    TWWHEData,
)
from nmeaparser.units import convert_orientation, convert_position, convert_velocity

_TRUE_HEADING = "T"


def _reading(
    fields: list[str],
    index: int,
    convert: Callable[[str, float], float],
) -> float:
    """Convert the value at ``index`` using the unit flag that follows it."""
    value = parse_float_or_default(get_field(fields, index))
    return convert(get_field(fields, index + 1), value)


def build_pashr(fields: list[str], system: TalkerSystem, valid: bool) -> PASHRData:
    """Construct a PASHRData object; the trailing INS code is optional."""
    return PASHRData(
        system=system,
        time=convert_to_seconds(get_field(fields, 1)),
        heading=parse_float_or_default(get_field(fields, 2)),
        heading_type=get_field(fields, 3) == _TRUE_HEADING,
        roll=parse_float_or_default(get_field(fields, 4)),
        pitch=parse_float_or_default(get_field(fields, 5)),
        heave=parse_float_or_default(get_field(fields, 6)),
        roll_accuracy=parse_float_or_default(get_field(fields, 7)),
        pitch_accuracy=parse_float_or_default(get_field(fields, 8)),
        heading_accuracy=parse_float_or_default(get_field(fields, 9)),
        aiding_code=parse_int_or_default(get_field(fields, 10)),
        ins_code=parse_int_or_default(get_field(fields, 11)),
        valid=valid,
    )


def build_twpos(fields: list[str], system: TalkerSystem, valid: bool) -> TWPOSData:
    """Construct a TWPOSData object with positions in meters, velocity in m/s."""
    return TWPOSData(
        system=system,
        time=convert_to_seconds(get_field(fields, 1)),
        x=_reading(fields, 2, convert_position),
        y=_reading(fields, 4, convert_position),
        z=_reading(fields, 6, convert_position),
        distance=_reading(fields, 8, convert_position),
        velocity=_reading(fields, 10, convert_velocity),
        valid=valid,
    )


def build_twvct(fields: list[str], system: TalkerSystem, valid: bool) -> TWVCTData:
    return TWVCTData(
        system=system,
        time=convert_to_seconds(get_field(fields, 1)),
        speed=_reading(fields, 2, convert_velocity),
        course=_reading(fields, 4, convert_orientation),
        valid=valid,
    )


def build_twpls(fields: list[str], system: TalkerSystem, valid: bool) -> TWPLSData:
    return TWPLSData(
        system=system,
        time=convert_to_seconds(get_field(fields, 1)),
        left_pulses=parse_int_or_default(get_field(fields, 2)),
        right_pulses=parse_int_or_default(get_field(fields, 3)),
        pulse_distance=_reading(fields, 4, convert_position),
        valid=valid,
    )


def build_twwhe(fields: list[str], system: TalkerSystem, valid: bool) -> TWWHEData:
    return TWWHEData(
        system=system,
        time=convert_to_seconds(get_field(fields, 1)),
        left_speed=_reading(fields, 2, convert_velocity),
        right_speed=_reading(fields, 4, convert_velocity),
        valid=valid,
    )


def build_twhpr(fields: list[str], system: TalkerSystem, valid: bool) -> TWHPRData:
    return TWHPRData(
        system=system,
        time=convert_to_seconds(get_field(fields, 1)),
        heading=_reading(fields, 2, convert_orientation),
        pitch=_reading(fields, 4, convert_orientation),
        roll=_reading(fields, 6, convert_orientation),
        valid=valid,
    )


def _frame_axes(fields: list[str]) -> tuple[float, float, float]:
    """Read the x, y, z triple and validate the frame flag that follows it."""
    frame = get_field(fields, 5)
    return (
        convert_orientation(frame, parse_float_or_default(get_field(fields, 2))),
        convert_orientation(frame, parse_float_or_default(get_field(fields, 3))),
        convert_orientation(frame, parse_float_or_default(get_field(fields, 4))),
    )


def build_tacc(fields: list[str], system: TalkerSystem, valid: bool) -> TACCData:
    x, y, z = _frame_axes(fields)
    return TACCData(
        system=system,
        time=convert_to_seconds(get_field(fields, 1)),
        x=x,
        y=y,
        z=z,
        valid=valid,
    )


def build_tgyr(fields: list[str], system: TalkerSystem, valid: bool) -> TGYRData:
    x, y, z = _frame_axes(fields)
    return TGYRData(
        system=system,
        time=convert_to_seconds(get_field(fields, 1)),
        x=x,
        y=y,
        z=z,
        valid=valid,
    )
