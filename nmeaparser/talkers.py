"""Talker system classification and sentence support checks.

Every NMEA sentence header is made of a talker prefix followed by a
sentence type code:

    $GPGGA   -> talker "GP" (GPS),             type "GGA"
    $GNRMC   -> talker "GN" (multi-GNSS),      type "RMC"
    $PASHR   -> "P" + vendor code (proprietary), type "ASHR"

Talker IDs recognised here:
    GP = GPS (USA)
    GL = GLONASS (Russia)
    GA = Galileo (Europe)
    GB / BD = BeiDou (China)
    GN = Multi-GNSS (combined solution)
    P  = Proprietary (vendor specific)
Anything else is classified as UNKNOWN but may still be decoded when its
type code is supported.
"""

import re
from enum import Enum

from nmeaparser.checksum import split_sentence


class TalkerSystem(str, Enum):
    """Satellite system (or proprietary source) that emitted a sentence."""

    GPS = "GPS"
    GLONASS = "GLONASS"
    GALILEO = "GALILEO"
    BEIDOU = "BEIDOU"
    COMBINED = "COMBINED"
    PROPRIETARY = "PROPRIETARY"
    UNKNOWN = "UNKNOWN"


_TALKER_SYSTEMS: dict[str, TalkerSystem] = {
    "GP": TalkerSystem.GPS,
    "GL": TalkerSystem.GLONASS,
    "GA": TalkerSystem.GALILEO,
    "GB": TalkerSystem.BEIDOU,
    "BD": TalkerSystem.BEIDOU,
    "GN": TalkerSystem.COMBINED,
}

# Proprietary headers are "P" followed by an upper-case vendor code
_PROPRIETARY_PATTERN = re.compile(r"^P[A-Z]")

STANDARD_SENTENCE_TYPES = (
    "DTM",
    "GBS",
    "GGA",
    "GLL",
    "GSA",
    "GST",
    "GSV",
    "RMC",
    "VTG",
    "ZDA",
)

# Matched against the whole header (after the '$'), so vendor codes are part
# of each entry.
PROPRIETARY_SENTENCE_TYPES = (
    "PASHR",
    "PTWPOS",
    "PTWVCT",
    "PTWPLS",
    "PTWWHE",
    "PTWHPR",
    "PTACC",
    "PTGYR",
)


def sentence_header(line: str) -> str:
    """Return the header of a sentence or header string, without the '$'.

    Example:
        >>> sentence_header("$GPGGA,134740.000,5540.3248,N*61")
        'GPGGA'
        >>> sentence_header("$PASHR")
        'PASHR'
    """
    payload, _ = split_sentence(line.strip())
    return payload.split(",", 1)[0]


def classify_system(header: str) -> TalkerSystem:
    """Determine the talker system from a header's two-character prefix.

    Args:
        header: Header field with or without the leading '$' (e.g. "$GLGSV")

    Returns:
        The matching ``TalkerSystem``; UNKNOWN for unrecognised prefixes

    Example:
        >>> classify_system("$GPGGA")
        <TalkerSystem.GPS: 'GPS'>
        >>> classify_system("$PASHR")
        <TalkerSystem.PROPRIETARY: 'PROPRIETARY'>
    """
    header = header.lstrip("$")
    system = _TALKER_SYSTEMS.get(header[:2])
    if system is not None:
        return system
    if _PROPRIETARY_PATTERN.match(header):
        return TalkerSystem.PROPRIETARY
    return TalkerSystem.UNKNOWN


def is_proprietary(line: str) -> bool:
    """Check whether a sentence (or header) is a supported proprietary type.

    Example:
        >>> is_proprietary("$PASHR,085335.000,224.19,T,...")
        True
        >>> is_proprietary("$GPGGA")
        False
    """
    header = sentence_header(line)
    return header in PROPRIETARY_SENTENCE_TYPES


def is_supported(line: str) -> bool:
    """Check whether a sentence (or header) can be decoded.

    Standard sentences are matched on their 3-letter type suffix regardless
    of talker, proprietary ones on their full header.

    Example:
        >>> is_supported("$GPGGA,134740.000,5540.3248,N,01231.2992,E,...*61")
        True
        >>> is_supported("$GPXYZ,1,2,3")
        False
    """
    header = sentence_header(line)
    if header in PROPRIETARY_SENTENCE_TYPES:
        return True
    return len(header) >= 5 and header[-3:] in STANDARD_SENTENCE_TYPES
