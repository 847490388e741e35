"""NMEA checksum computation and validation.

NMEA 0183 sentences use a simple XOR checksum for data integrity verification.
The checksum is calculated over all characters between '$' and '*' (exclusive),
then represented as a two-digit hexadecimal number after the '*'.

Example sentence structure:
    $GPRMC,154922.720,A,5209.731,N,00600.238,E,001.9,059.8,040123,000.0,W*7A
     ^                        payload                                  ^ ^^
     start                                                  delimiter  checksum (0x7A)
"""

_START_DELIMITER = "$"
_CHECKSUM_DELIMITER = "*"
_CHECKSUM_LENGTH = 2
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def split_sentence(sentence: str) -> tuple[str, str | None]:
    """Separate an NMEA sentence into its payload and provided checksum.

    The payload starts after the first '$' (or at the beginning of the line
    when there is none) and ends at the last '*'. Everything after the last
    '*' is the provided checksum text.

    Args:
        sentence: Raw NMEA sentence, already stripped of line endings

    Returns:
        A tuple of (payload, checksum_text). ``checksum_text`` is None when
        the sentence carries no '*' delimiter at all.

    Example:
        >>> split_sentence("$GNGGA,123519*7F")
        ('GNGGA,123519', '7F')
        >>> split_sentence("$GNGGA,123519")
        ('GNGGA,123519', None)
    """
    start = sentence.find(_START_DELIMITER) + 1
    end = sentence.rfind(_CHECKSUM_DELIMITER)
    if end < start:
        return sentence[start:], None
    return sentence[start:end], sentence[end + 1 :]


def checksum_of(payload: str) -> int:
    """Calculate the XOR checksum of a sentence payload.

    The NMEA checksum algorithm XORs every UTF-8 encoded byte
    in the payload. The payload excludes both the '$' and '*' delimiters.

    Args:
        payload: The string between '$' and '*' (exclusive)

    Returns:
        Integer checksum value (0-255)

    Example:
        >>> hex(checksum_of("GPRMC,154922.720,A,5209.731,N,00600.238,E,001.9,059.8,040123,000.0,W"))
        '0x7a'
    """
    result = 0
    for byte in payload.encode("utf-8"):
        result ^= byte
    return result


def checksum_matches(payload: str, provided: str) -> bool:
    """Compare a payload's checksum against the provided hex text.

    Anything other than exactly two hexadecimal digits never matches.

    Example:
        >>> checksum_matches("GPGSA,A,3", "0030")
        False
    """
    if len(provided) != _CHECKSUM_LENGTH or not set(provided) <= _HEX_DIGITS:
        return False
    return checksum_of(payload) == int(provided, 16)


def validate_checksum(sentence: str) -> bool:
    """Validate the checksum of a complete NMEA sentence.

    Args:
        sentence: Complete NMEA sentence including '$', '*', and checksum.
                  May include trailing whitespace/newlines (will be stripped).

    Returns:
        True if the checksum is valid, False if:
        - Sentence is missing the '$' or '*' delimiters
        - Checksum is not exactly two hexadecimal digits
        - Calculated checksum doesn't match provided checksum

    Example:
        >>> validate_checksum("$GNGGA,123519.00,...*7F")
        True
        >>> validate_checksum("$GNGGA,123519.00,...*FF")  # wrong checksum
        False
    """
    sentence = sentence.strip()
    if not sentence.startswith(_START_DELIMITER):
        return False

    payload, provided = split_sentence(sentence)
    if provided is None:
        return False

    return checksum_matches(payload, provided)
