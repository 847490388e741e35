"""NMEA 0183 sentence decoder with a latest-message-per-type store."""

from nmeaparser.checksum import checksum_of, validate_checksum
from nmeaparser.decoder import decode, decode_and_record, nmea_parse
from nmeaparser.errors import (
    EmptyInputError,
    InvalidFormatError,
    MissingValueError,
    NMEAError,
    UnsupportedSentenceTypeError,
    UnsupportedUnitError,
)
from nmeaparser.fields import (
    convert_to_decimal_degrees,
    convert_to_seconds,
    parse_float_or_default,
    parse_int_or_default,
)
from nmeaparser.store import LastMessageStore, take, update
from nmeaparser.talkers import (
    TalkerSystem,
    classify_system,
    is_proprietary,
    is_supported,
    sentence_header,
)
from nmeaparser.types import (
    DTMData,
    GBSData,
    GGAData,
    GLLData,
    GSAData,
    GSTData,
    GSVData,
    NMEAMessage,
    PASHRData,
    RMCData,
    SatelliteInfo,
    TACCData,
    TGYRData,
    TWHPRData,
    TWPLSData,
    TWPOSData,
    TWVCTData,
    TWWHEData,
    VTGData,
    ZDAData,
)
from nmeaparser.units import convert_orientation, convert_position, convert_velocity

__all__ = [
    "DTMData",
    "EmptyInputError",
    "GBSData",
    "GGAData",
    "GLLData",
    "GSAData",
    "GSTData",
    "GSVData",
    "InvalidFormatError",
    "LastMessageStore",
    "MissingValueError",
    "NMEAError",
    "NMEAMessage",
    "PASHRData",
    "RMCData",
    "SatelliteInfo",
    "TACCData",
    "TGYRData",
    "TWHPRData",
    "TWPLSData",
    "TWPOSData",
    "TWVCTData",
    "TWWHEData",
    "TalkerSystem",
    "UnsupportedSentenceTypeError",
    "UnsupportedUnitError",
    "VTGData",
    "ZDAData",
    "checksum_of",
    "classify_system",
    "convert_orientation",
    "convert_position",
    "convert_to_decimal_degrees",
    "convert_to_seconds",
    "convert_velocity",
    "decode",
    "decode_and_record",
    "is_proprietary",
    "is_supported",
    "nmea_parse",
    "parse_float_or_default",
    "parse_int_or_default",
    "sentence_header",
    "take",
    "update",
    "validate_checksum",
]
