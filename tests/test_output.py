"""Tests for fix formatting."""

import re

import pytest

from gpsread import PositionUnit, format_fix, parse_gga, parse_unit
from gpsread.output import unit_names

_MUNICH = "GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,"
_SYDNEY = "GPGGA,020304,3356.123,S,15112.456,W,1,08,0.9,10.0,M,20.0,M,,"
_LONDON = "GPGGA,101010,5130.444,N,00007.668,W,1,08,0.9,20.0,M,45.0,M,,"
_EQUATOR = "GPGGA,000000,0000.000,N,06000.000,E,1,08,0.9,0.0,M,0.0,M,,"
_NEAR_ORIGIN = "GPGGA,060000,0030.000,S,00007.668,W,1,08,0.9,0.0,M,0.0,M,,"


@pytest.fixture
def munich():
    return parse_gga(_MUNICH)


@pytest.fixture
def sydney():
    return parse_gga(_SYDNEY)


class TestFormatFix:
    """Tests for format_fix function."""

    def test_time(self, munich):
        assert format_fix(munich, PositionUnit.TIME) == "12:35:19"

    def test_nmea_restores_start_delimiter(self, munich):
        assert format_fix(munich, PositionUnit.NMEA) == "$" + _MUNICH

    def test_lldecimal(self, munich):
        assert format_fix(munich, PositionUnit.LLDECIMAL) == (
            "lat:  +48.11730\nlon:  +11.51667"
        )

    def test_lldecimal_southern_western(self, sydney):
        assert format_fix(sydney, PositionUnit.LLDECIMAL) == (
            "lat:  -33.93538\nlon: -151.20760"
        )

    def test_llmindec(self, munich):
        assert format_fix(munich, PositionUnit.LLMINDEC) == (
            "lat:  48N  7.0380'\nlon:  11E 31.0000'"
        )

    def test_llmindec_southern_western(self, sydney):
        assert format_fix(sydney, PositionUnit.LLMINDEC) == (
            "lat:  33S 56.1230'\nlon: 151W 12.4560'"
        )

    def test_llminsec(self, munich):
        assert format_fix(munich, PositionUnit.LLMINSEC) == (
            "lat:  48N07'02.280\"\nlon:  11E31'00.000\""
        )

    def test_llminsec_southern_western_keeps_sign(self, sydney):
        assert format_fix(sydney, PositionUnit.LLMINSEC) == (
            "lat: -33S56'07.380\"\nlon: -151W12'27.360\""
        )

    def test_llminsec_below_one_degree(self):
        fix = parse_gga(_NEAR_ORIGIN)
        assert format_fix(fix, PositionUnit.LLMINSEC) == (
            "lat:   0S30'00.000\"\nlon:   0W07'40.080\""
        )

    def test_osgb(self):
        text = format_fix(parse_gga(_LONDON), PositionUnit.OSGB)
        match = re.fullmatch(r"\[TQ\]\[(\d{5})\]\[(\d{5})\]", text)
        assert match is not None, text
        assert 29000 <= int(match.group(1)) <= 31000
        assert 79500 <= int(match.group(2)) <= 81500

    def test_osgb_outside_grid(self):
        with pytest.raises(ValueError):
            format_fix(parse_gga(_EQUATOR), PositionUnit.OSGB)

    def test_no_trailing_newline(self, munich):
        for unit in PositionUnit:
            if unit is PositionUnit.OSGB:
                continue
            assert not format_fix(munich, unit).endswith("\n"), unit

    def test_unit_must_be_enum(self, munich):
        with pytest.raises(ValueError, match="Invalid position unit"):
            format_fix(munich, "TIME")


class TestParseUnit:
    """Tests for parse_unit function."""

    def test_every_unit_name(self):
        for name in unit_names():
            assert parse_unit(name) is PositionUnit(name)

    def test_case_insensitive(self):
        assert parse_unit("osgb") is PositionUnit.OSGB
        assert parse_unit(" LlDecimal ") is PositionUnit.LLDECIMAL

    def test_nema_alias(self):
        assert parse_unit("NEMA") is PositionUnit.NMEA
        assert parse_unit("nema") is PositionUnit.NMEA

    def test_invalid(self):
        with pytest.raises(ValueError, match="Invalid position unit: FEET"):
            parse_unit("FEET")

    def test_unit_names_order(self):
        assert unit_names() == ["TIME", "NMEA", "OSGB", "LLMINSEC", "LLMINDEC", "LLDECIMAL"]
