"""Tests for talker classification and support checks."""

import pytest

from nmeaparser import (
    TalkerSystem,
    classify_system,
    is_proprietary,
    is_supported,
    sentence_header,
)


class TestClassifySystem:
    """Tests for classify_system function."""

    @pytest.mark.parametrize(
        ("header", "expected"),
        [
            ("$GPGGA", TalkerSystem.GPS),
            ("$GLGSV", TalkerSystem.GLONASS),
            ("$GAGSV", TalkerSystem.GALILEO),
            ("$GBGSA", TalkerSystem.BEIDOU),
            ("$BDGSA", TalkerSystem.BEIDOU),
            ("$GNRMC", TalkerSystem.COMBINED),
            ("$PASHR", TalkerSystem.PROPRIETARY),
            ("$PTWPOS", TalkerSystem.PROPRIETARY),
            ("$XXGGA", TalkerSystem.UNKNOWN),
        ],
    )
    def test_talker_prefixes(self, header, expected):
        assert classify_system(header) == expected

    def test_without_dollar_sign(self):
        assert classify_system("GPGGA") == TalkerSystem.GPS

    def test_lowercase_after_p_is_unknown(self):
        assert classify_system("$Pxyz") == TalkerSystem.UNKNOWN

    def test_system_is_string_valued(self):
        assert TalkerSystem.GPS == "GPS"


class TestSentenceHeader:
    """Tests for sentence_header function."""

    def test_full_sentence(self):
        line = "$GPGGA,134740.000,5540.3248,N,01231.2992,E,1,09,0.9,20.2,M,41.5,M,,0000*61"
        assert sentence_header(line) == "GPGGA"

    def test_header_only(self):
        assert sentence_header("$PASHR") == "PASHR"

    def test_header_with_checksum_and_no_fields(self):
        assert sentence_header("$GPZDA*00") == "GPZDA"


class TestIsSupported:
    """Tests for is_supported function."""

    @pytest.mark.parametrize(
        "line",
        [
            "$GPGGA,134740.000",
            "$GNRMC,094810.000",
            "$GLGSV,3,3,09",
            "$XXVTG,054.7",
            "$GPDTM,W84",
            "$GPGBS,123519",
            "$GPGST,123519",
            "$GNZDA,094810.000",
            "$GNGLL,5547.94084",
            "$BDGSA,A,3",
            "$PASHR,085335.000",
            "$PTWPOS,123519",
            "$PTACC,123519",
            "$PTGYR,123519",
        ],
    )
    def test_supported_headers(self, line):
        assert is_supported(line) is True

    @pytest.mark.parametrize(
        "line",
        [
            "$GPXYZ,1,2,3",
            "$NOTAREALHEADER,A,3*30",
            "$GGA,1,2",
            "$PGRME,15.0,M",
            "",
        ],
    )
    def test_unsupported_headers(self, line):
        assert is_supported(line) is False


class TestIsProprietary:
    """Tests for is_proprietary function."""

    def test_proprietary_sentences(self):
        assert is_proprietary("$PASHR,085335.000,224.19,T") is True
        assert is_proprietary("$PTWHPR,123519,1.0,R") is True

    def test_standard_sentence(self):
        assert is_proprietary("$GPGGA,134740.000") is False

    def test_unknown_proprietary_vendor(self):
        assert is_proprietary("$PGRME,15.0,M") is False
