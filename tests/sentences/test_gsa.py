"""Tests for GSA sentence decoding."""

import pytest

from nmeaparser import GSAData, TalkerSystem, checksum_of, decode


def _sentence(body: str) -> str:
    return f"${body}*{checksum_of(body):02X}"


class TestDecodeGSA:
    """Tests for GSA decoding through decode()."""

    def test_full_satellite_list(self):
        result = decode("$GPGSA,A,3,01,02,03,04,05,06,07,08,09,10,11,12,1.0,1.0,1.0*30")
        assert isinstance(result, GSAData)
        assert result.system == TalkerSystem.GPS
        assert result.mode == "A"
        assert result.current_mode == 3
        assert result.sat_ids == tuple(range(1, 13))
        assert result.pdop == pytest.approx(1.0)
        assert result.hdop == pytest.approx(1.0)
        assert result.vdop == pytest.approx(1.0)
        assert result.valid is True

    def test_list_stops_at_first_empty_slot(self):
        result = decode(_sentence("GPGSA,A,3,03,22,06,19,11,14,32,01,28,18,,,1.8,0.8,1.6"))
        assert result.sat_ids == (3, 22, 6, 19, 11, 14, 32, 1, 28, 18)
        assert result.pdop == pytest.approx(1.8)
        assert result.hdop == pytest.approx(0.8)
        assert result.vdop == pytest.approx(1.6)

    def test_manual_mode_and_beidou_talker(self):
        result = decode(_sentence("BDGSA,M,2,05,07,,,,,,,,,,,2.5,2.1,1.3"))
        assert result.system == TalkerSystem.BEIDOU
        assert result.mode == "M"
        assert result.current_mode == 2
        assert result.sat_ids == (5, 7)

    def test_no_fix_defaults(self):
        body = ",".join(["GPGSA", "", "1"] + [""] * 12 + ["", "", ""])
        result = decode(_sentence(body))
        assert result.mode == "N"
        assert result.current_mode == 1
        assert result.sat_ids == ()
        assert (result.pdop, result.hdop, result.vdop) == (0.0, 0.0, 0.0)

    def test_sat_ids_are_immutable_tuple(self):
        result = decode("$GPGSA,A,3,01,02,03,04,05,06,07,08,09,10,11,12,1.0,1.0,1.0*30")
        assert isinstance(result.sat_ids, tuple)
