"""Tests for NMEA checksum computation and validation."""

import pytest

from nmeaparser import checksum_of, validate_checksum
from nmeaparser.checksum import checksum_matches, split_sentence

GGA_VALID = "$GNGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,*7F"
VTG_VALID = "$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B"
RMC_PAYLOAD = "GPRMC,154922.720,A,5209.731,N,00600.238,E,001.9,059.8,040123,000.0,W"


class TestChecksumOf:
    """Tests for checksum_of function."""

    def test_known_rmc_payload(self):
        assert checksum_of(RMC_PAYLOAD) == 0x7A

    def test_known_gga_payload(self):
        payload = GGA_VALID[1 : GGA_VALID.index("*")]
        assert checksum_of(payload) == 0x7F

    def test_empty_payload_is_zero(self):
        assert checksum_of("") == 0

    def test_xor_is_order_independent(self):
        assert checksum_of("s#") == checksum_of("#s")

    def test_non_ascii_characters_use_utf8_bytes(self):
        assert checksum_of("GPTXT,\u00e9") != checksum_of("GPTXT,\u00fc")
        assert checksum_of("GPTXT,\u00e9") == checksum_of("GPTXT,") ^ 0xC3 ^ 0xA9


class TestSplitSentence:
    """Tests for split_sentence function."""

    def test_payload_and_checksum(self):
        assert split_sentence("$GNGGA,123519*7F") == ("GNGGA,123519", "7F")

    def test_no_checksum_delimiter(self):
        assert split_sentence("$GNGGA,123519") == ("GNGGA,123519", None)

    def test_missing_dollar_sign(self):
        assert split_sentence("GNGGA,123519*7F") == ("GNGGA,123519", "7F")

    def test_splits_on_last_asterisk(self):
        assert split_sentence("$PXXX,a*b*1C") == ("PXXX,a*b", "1C")


class TestChecksumMatches:
    """Tests for checksum_matches function."""

    def test_uppercase_and_lowercase_hex(self):
        assert checksum_matches(RMC_PAYLOAD, "7A") is True
        assert checksum_matches(RMC_PAYLOAD, "7a") is True

    def test_non_hex_never_matches(self):
        assert checksum_matches(RMC_PAYLOAD, "ZZ") is False

    def test_empty_never_matches(self):
        assert checksum_matches(RMC_PAYLOAD, "") is False

    @pytest.mark.parametrize("provided", ["007A", "0x7A", " 7A", "7_A", "7A "])
    def test_only_two_hex_digits_match(self, provided):
        assert checksum_matches(RMC_PAYLOAD, provided) is False


class TestValidateChecksum:
    """Tests for validate_checksum function."""

    def test_valid_gga_checksum(self):
        assert validate_checksum(GGA_VALID) is True

    def test_valid_checksum_with_newline(self):
        assert validate_checksum(GGA_VALID + "\r\n") is True

    def test_invalid_checksum(self):
        sentence = GGA_VALID[:-2] + "FF"
        assert validate_checksum(sentence) is False

    def test_missing_dollar_sign(self):
        assert validate_checksum(GGA_VALID[1:]) is False

    def test_missing_asterisk(self):
        sentence = GGA_VALID.replace("*", "")
        assert validate_checksum(sentence) is False

    def test_empty_string(self):
        assert validate_checksum("") is False

    def test_truncated_checksum(self):
        assert validate_checksum(GGA_VALID[:-1]) is False

    def test_padded_checksum(self):
        assert validate_checksum(GGA_VALID[:-2] + "007F") is False
        assert validate_checksum(GGA_VALID[:-2] + "0x7F") is False

    def test_valid_vtg_checksum(self):
        assert validate_checksum(VTG_VALID) is True
