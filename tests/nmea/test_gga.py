"""Tests for GGA sentence parsing."""

import pytest

from gpsread import parse_gga

GGA_EXAMPLE = "GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,"


def _gga(
    utc_time: str = "123519",
    latitude: str = "4807.038",
    latitude_hemisphere: str = "N",
    longitude: str = "01131.000",
    longitude_hemisphere: str = "E",
    fix_quality: str = "1",
    tag: str = "GPGGA",
) -> str:
    """Build a 15-field GGA body, varying only the fields under test."""
    return ",".join(
        [
            tag,
            utc_time,
            latitude,
            latitude_hemisphere,
            longitude,
            longitude_hemisphere,
            fix_quality,
            "08",
            "0.9",
            "545.4",
            "M",
            "46.9",
            "M",
            "",
            "",
        ]
    )


class TestParseGGA:
    """Tests for parse_gga function."""

    def test_helper_matches_reference_example(self):
        assert _gga() == GGA_EXAMPLE

    def test_valid_gga_with_fix(self):
        result = parse_gga(GGA_EXAMPLE)
        assert result is not None
        assert result.utc_time == "12:35:19"
        assert result.latitude_degrees == 48
        assert result.latitude_minutes == pytest.approx(7.038)
        assert result.latitude_hemisphere == "N"
        assert result.longitude_degrees == 11
        assert result.longitude_minutes == pytest.approx(31.0)
        assert result.longitude_hemisphere == "E"
        assert result.fix_quality == 1
        assert result.raw_sentence == GGA_EXAMPLE

    def test_decimal_degrees(self):
        result = parse_gga(GGA_EXAMPLE)
        assert result.latitude == pytest.approx(48.1173, rel=1e-9)
        assert result.longitude == pytest.approx(11.5166667, rel=1e-6)

    def test_gga_with_checksum_suffix(self):
        result = parse_gga(GGA_EXAMPLE + "*47")
        assert result is not None
        assert result.raw_sentence == GGA_EXAMPLE + "*47"

    def test_gga_no_fix(self):
        assert parse_gga(_gga(fix_quality="0")) is None

    def test_gga_no_fix_with_empty_position(self):
        body = "GPGGA,123520,,,,,0,00,,,M,,M,,"
        assert len(body.split(",")) == 15
        assert parse_gga(body) is None

    def test_gga_empty_fix_quality_is_no_fix(self):
        assert parse_gga(_gga(fix_quality="")) is None

    def test_gga_unparseable_fix_quality_is_no_fix(self):
        assert parse_gga(_gga(fix_quality="x")) is None

    def test_gga_dgps_and_rtk_qualities(self):
        for quality in ("2", "4", "5", "6"):
            result = parse_gga(_gga(fix_quality=quality))
            assert result is not None, f"Failed: {quality}"
            assert result.fix_quality == int(quality)

    def test_gga_southern_western_hemisphere(self):
        result = parse_gga(
            _gga(
                latitude="3356.123",
                latitude_hemisphere="S",
                longitude="15112.456",
                longitude_hemisphere="W",
            )
        )
        assert result is not None
        assert result.latitude_degrees == -33
        assert result.latitude_minutes == pytest.approx(56.123)
        assert result.longitude_degrees == -151
        assert result.longitude_minutes == pytest.approx(12.456)
        assert result.latitude == pytest.approx(-33.93538333, rel=1e-6)
        assert result.longitude == pytest.approx(-151.20760, rel=1e-6)

    def test_hemisphere_other_than_north_or_east_is_negative(self):
        result = parse_gga(_gga(latitude_hemisphere="", longitude_hemisphere="x"))
        assert result is not None
        assert result.latitude_hemisphere == "S"
        assert result.longitude_hemisphere == "W"
        assert result.latitude_degrees == -48
        assert result.longitude_degrees == -11

    def test_sign_kept_below_one_degree(self):
        result = parse_gga(
            _gga(
                latitude="0030.000",
                latitude_hemisphere="S",
                longitude="00007.668",
                longitude_hemisphere="W",
            )
        )
        assert result is not None
        assert result.latitude_degrees == 0
        assert result.latitude == pytest.approx(-0.5)
        assert result.longitude == pytest.approx(-0.1278)

    def test_fractional_seconds_in_time_are_dropped(self):
        result = parse_gga(_gga(utc_time="081836.00"))
        assert result.utc_time == "08:18:36"

    def test_short_time_field_rejected(self):
        assert parse_gga(_gga(utc_time="1235")) is None

    def test_non_numeric_time_rejected(self):
        assert parse_gga(_gga(utc_time="12a519")) is None

    def test_non_numeric_latitude_rejected(self):
        assert parse_gga(_gga(latitude="4x07.038")) is None

    def test_non_ascii_digits_rejected(self):
        assert parse_gga(_gga(latitude="4²07.038")) is None
        assert parse_gga(_gga(longitude="01¹31.000")) is None
        assert parse_gga(_gga(utc_time="１２３５１９")) is None

    def test_missing_longitude_minutes_rejected(self):
        assert parse_gga(_gga(longitude="011")) is None

    def test_empty_coordinates_with_fix_rejected(self):
        assert parse_gga(_gga(latitude="", longitude="")) is None

    def test_malformed_too_few_fields(self):
        assert parse_gga("GPGGA,123519,4807.038,N") is None

    def test_fourteen_fields_rejected(self):
        assert parse_gga(GGA_EXAMPLE[:-1]) is None

    def test_extra_fields_tolerated(self):
        assert parse_gga(GGA_EXAMPLE + ",extra") is not None

    def test_wrong_sentence_type(self):
        assert parse_gga(_gga(tag="GPRMC")) is None

    def test_invalid_prefix(self):
        assert parse_gga(_gga(tag="XXGGA")) is None

    def test_multi_constellation_prefixes(self):
        for prefix in ("GP", "GN", "GL", "GA", "GB", "GQ"):
            assert parse_gga(_gga(tag=f"{prefix}GGA")) is not None, f"Failed: {prefix}"

    def test_trailing_whitespace(self):
        result = parse_gga(GGA_EXAMPLE + "\n")
        assert result is not None
        assert result.raw_sentence == GGA_EXAMPLE

    def test_empty_body(self):
        assert parse_gga("") is None
