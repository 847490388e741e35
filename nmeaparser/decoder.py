"""NMEA sentence decoder.

Decoding a line runs through these steps:
    1. Whitespace stripping (handles \\r\\n line endings)
    2. Splitting off the checksum at the last '*' and verifying it
    3. Splitting the payload on ',' (empty fields are preserved)
    4. Classifying the talker system from the header
    5. Dispatching on the header to the matching sentence constructor

A checksum mismatch does not abort decoding: the record is built in full
and returned with ``valid=False``. Unsupported headers, malformed mandatory
fields and unknown unit flags raise.
"""

import logging
import re
from collections.abc import Callable

from nmeaparser.checksum import checksum_matches, split_sentence
from nmeaparser.errors import EmptyInputError, UnsupportedSentenceTypeError
from nmeaparser.sentences import (
    build_dtm,
    build_gbs,
    build_gga,
    build_gll,
    build_gsa,
    build_gst,
    build_gsv,
    build_pashr,
    build_rmc,
    build_tacc,
    build_tgyr,
    build_twhpr,
    build_twpls,
    build_twpos,
    build_twvct,
    build_twwhe,
    build_vtg,
    build_zda,
)
from nmeaparser.store import LastMessageStore
from nmeaparser.talkers import TalkerSystem, classify_system, is_supported, sentence_header
from nmeaparser.types import NMEAMessage

__all__ = ["decode", "decode_and_record", "nmea_parse"]

logger = logging.getLogger(__name__)

_FIELD_DELIMITER = ","

SentenceBuilder = Callable[[list[str], TalkerSystem, bool], NMEAMessage]

# Consulted in order, first match wins. Standard types match on the header
# suffix for any talker; proprietary types match the whole header.
_DISPATCH_TABLE: tuple[tuple[re.Pattern[str], SentenceBuilder], ...] = (
    (re.compile(r"DTM$"), build_dtm),
    (re.compile(r"GBS$"), build_gbs),
    (re.compile(r"GGA$"), build_gga),
    (re.compile(r"GLL$"), build_gll),
    (re.compile(r"GSA$"), build_gsa),
    (re.compile(r"GST$"), build_gst),
    (re.compile(r"GSV$"), build_gsv),
    (re.compile(r"RMC$"), build_rmc),
    (re.compile(r"VTG$"), build_vtg),
    (re.compile(r"ZDA$"), build_zda),
    (re.compile(r"^PASHR$"), build_pashr),
    (re.compile(r"^PTWPOS$"), build_twpos),
    (re.compile(r"^PTWVCT$"), build_twvct),
    (re.compile(r"^PTWPLS$"), build_twpls),
    (re.compile(r"^PTWWHE$"), build_twwhe),
    (re.compile(r"^PTWHPR$"), build_twhpr),
    (re.compile(r"^PTACC$"), build_tacc),
    (re.compile(r"^PTGYR$"), build_tgyr),
)


def _find_builder(header: str) -> SentenceBuilder:
    """Return the constructor registered for ``header``.

    Raises:
        UnsupportedSentenceTypeError: If no supported type matches.
    """
    if is_supported(header):
        for pattern, build in _DISPATCH_TABLE:
            if pattern.search(header):
                return build
    raise UnsupportedSentenceTypeError(f"NMEA sentence ({header}) not supported")


def decode(line: str, validate: bool = True) -> NMEAMessage:
    """Decode one NMEA sentence into its typed record.

    Args:
        line: A complete sentence such as
            ``"$GPGGA,134740.000,5540.3248,N,01231.2992,E,1,09,0.9,20.2,M,41.5,M,,0000*61"``.
            Trailing whitespace and line endings are ignored.
        validate: Verify the checksum. When False, or when the sentence has
            no '*' checksum at all, the record is always ``valid=True``.

    Returns:
        The record for the sentence type, e.g. ``GGAData`` for a GGA sentence.

    Raises:
        EmptyInputError: If ``line`` is empty.
        UnsupportedSentenceTypeError: If the header names no supported type.
        InvalidFormatError: If a mandatory field (time, coordinate, date)
            is malformed.
        UnsupportedUnitError: If a proprietary unit flag is unknown.

    Example:
        >>> msg = decode("$GPGSA,A,3,01,02,03,04,05,06,07,08,09,10,11,12,1.0,1.0,1.0*30")
        >>> msg.current_mode
        3
    """
    line = line.strip()
    if not line:
        raise EmptyInputError("Cannot decode an empty NMEA sentence")

    payload, provided = split_sentence(line)
    valid = True
    if validate and provided is not None:
        valid = checksum_matches(payload, provided)

    fields = payload.split(_FIELD_DELIMITER)
    header = fields[0]
    build = _find_builder(header)

    if not valid:
        logger.warning("Checksum mismatch in %s sentence", header)

    message = build(fields, classify_system(header), valid)
    logger.debug("Decoded %s as %s", header, type(message).__name__)
    return message


nmea_parse = decode


def decode_and_record(
    store: LastMessageStore,
    line: str,
    validate: bool = True,
) -> type[NMEAMessage] | None:
    """Decode a sentence and keep it as the latest message of its type.

    Unsupported sentence types are logged and skipped so that a caller can
    feed a raw receiver stream line by line. Every other failure propagates.

    Args:
        store: Store receiving the decoded record.
        line: Raw NMEA sentence.
        validate: Passed through to ``decode``.

    Returns:
        The record class that was stored (e.g. ``RMCData``), or None when the
        sentence type is not supported.

    Example:
        >>> store = LastMessageStore()
        >>> decode_and_record(store, "$GPGSA,A,3,01,02,03,04,05,06,07,08,09,10,11,12,1.0,1.0,1.0*30")
        <class 'nmeaparser.types.GSAData'>
        >>> decode_and_record(store, "$NOTAREALHEADER,A,3*30") is None
        True
    """
    try:
        message = decode(line, validate=validate)
    except UnsupportedSentenceTypeError:
        logger.warning(
            "%s is not a supported NMEA sentence, skipping", sentence_header(line)
        )
        return None

    store.update(message)
    return type(message)
