"""Exceptions raised while decoding NMEA sentences.

Every failure the decoder can report derives from ``NMEAError`` so that
stream consumers can catch the whole family with a single clause. Checksum
mismatches are not errors; they are reported through the
``valid`` flag of the decoded record instead.
"""


class NMEAError(Exception):
    """Base class for all decoding failures."""


class EmptyInputError(NMEAError, ValueError):
    """The input line was empty (or only whitespace)."""


class UnsupportedSentenceTypeError(NMEAError, ValueError):
    """The sentence header does not name a supported message type."""


class InvalidFormatError(NMEAError, ValueError):
    """A mandatory field is missing or failed its dedicated parser."""


class UnsupportedUnitError(NMEAError, ValueError):
    """A unit flag field holds a value outside its defined set."""


class MissingValueError(NMEAError, LookupError):
    """A store slot was read while empty."""
