"""Tests for NMEA field helpers."""

import pytest

from gpsread.nmea.fields import (
    LATITUDE_DEGREE_DIGITS,
    LONGITUDE_DEGREE_DIGITS,
    format_utc_time,
    parse_coordinate,
    parse_float_field,
    parse_int_field,
)


class TestParseFields:
    """Tests for the numeric field parsers."""

    def test_int_field(self):
        assert parse_int_field("08") == 8
        assert parse_int_field("") is None
        assert parse_int_field("0.9") is None

    def test_float_field(self):
        assert parse_float_field("545.4") == pytest.approx(545.4)
        assert parse_float_field("") is None
        assert parse_float_field("M") is None


class TestFormatUtcTime:
    """Tests for format_utc_time function."""

    def test_plain_time(self):
        assert format_utc_time("123519") == "12:35:19"

    def test_fractional_seconds(self):
        assert format_utc_time("000001.50") == "00:00:01"

    def test_too_short(self):
        assert format_utc_time("12351") is None

    def test_not_digits(self):
        assert format_utc_time("12:519") is None

    def test_full_width_digits(self):
        assert format_utc_time("１２３５１９") is None

    def test_superscript_digits(self):
        assert format_utc_time("12351²") is None


class TestParseCoordinate:
    """Tests for parse_coordinate function."""

    def test_latitude(self):
        degrees, minutes = parse_coordinate("4807.038", LATITUDE_DEGREE_DIGITS)
        assert degrees == 48
        assert minutes == pytest.approx(7.038)

    def test_longitude(self):
        degrees, minutes = parse_coordinate("01131.000", LONGITUDE_DEGREE_DIGITS)
        assert degrees == 11
        assert minutes == pytest.approx(31.0)

    @pytest.mark.parametrize(
        "value",
        ["", "48", "4x07.038", "48ab.cd", "4860.000", "48-1.000", "48nan"],
    )
    def test_invalid_latitude(self, value):
        assert parse_coordinate(value, LATITUDE_DEGREE_DIGITS) is None

    @pytest.mark.parametrize("value", ["4²07.038", "４８07.038", "48０7.038"])
    def test_non_ascii_digits_rejected(self, value):
        assert parse_coordinate(value, LATITUDE_DEGREE_DIGITS) is None

    def test_non_ascii_longitude_digits_rejected(self):
        assert parse_coordinate("01¹31.000", LONGITUDE_DEGREE_DIGITS) is None
