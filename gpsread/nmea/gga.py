"""GGA sentence parser.

GGA (Global Positioning System Fix Data) carries the position fix reported
by the receiver. The framer hands over the sentence body, i.e. everything
between the leading '$' and the terminating carriage return.

GGA Sentence Body:
    GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47
    |     |      |        | |         | | |  |   |     | |    | | |
    |     |      |        | |         | | |  |   |     | |    | | +-- station ID / checksum
    |     |      |        | |         | | |  |   |     | |    | +-- DGPS age
    |     |      |        | |         | | |  |   |     | +----+-- Geoid separation
    |     |      |        | |         | | |  |   +-----+-- Altitude above MSL
    |     |      |        | |         | | |  +-- HDOP
    |     |      |        | |         | | +-- Satellites in use
    |     |      |        | |         | +-- Fix quality (0 = no fix)
    |     |      |        | +---------+-- Longitude DDDMM.MMMM + E/W
    |     |      +--------+-- Latitude DDMM.MMMM + N/S
    |     +-- UTC time (HHMMSS)
    +-- Tag: talker ID + "GGA"

Only the UTC time, position and fix quality are extracted. The checksum is
not verified.
"""

import logging

from gpsread.nmea.fields import (
    LATITUDE_DEGREE_DIGITS,
    LONGITUDE_DEGREE_DIGITS,
    VALID_TALKER_IDS,
    format_utc_time,
    parse_coordinate,
    parse_int_field,
)
from gpsread.nmea.types import Fix

logger = logging.getLogger(__name__)

# The tag plus 14 data fields; the last data field may be empty
_MINIMUM_FIELD_COUNT = 15

# Data field indices, counted after the tag
_UTC_TIME = 0
_LATITUDE = 1
_LATITUDE_HEMISPHERE = 2
_LONGITUDE = 3
_LONGITUDE_HEMISPHERE = 4
_FIX_QUALITY = 5


def _extract_fields(body: str) -> list[str] | None:
    """Split a sentence body into its comma-separated fields.

    Args:
        body: Sentence body without '$' (e.g. "GPGGA,123519,...")

    Returns:
        List of field strings including the tag, or None if fewer than 15
        fields are present (a truncated or foreign sentence)
    """
    fields = body.split(",")

    if len(fields) < _MINIMUM_FIELD_COUNT:
        return None

    return fields


def _validate_message_type(tag: str) -> bool:
    """Check that the tag is "GGA" from a supported constellation.

    Example:
        "GPGGA" -> talker="GP", sentence="GGA" -> True
        "XXGGA" -> talker="XX" (unsupported) -> False
        "GPRMC" -> sentence="RMC" (not GGA) -> False
    """
    if len(tag) != 5:
        return False

    return tag[:2] in VALID_TALKER_IDS and tag[2:] == "GGA"


def _build_fix(data: list[str], fix_quality: int, body: str) -> Fix | None:
    """Construct a Fix from the data fields of a GGA sentence.

    Maps data field indices to Fix attributes:
        data[0] -> utc_time (HHMMSS -> HH:MM:SS)
        data[1] -> latitude degrees (2 digits) and minutes
        data[2] -> latitude hemisphere ("N" positive, anything else South)
        data[3] -> longitude degrees (3 digits) and minutes
        data[4] -> longitude hemisphere ("E" positive, anything else West)

    Returns:
        Fix, or None if the time or a coordinate is malformed
    """
    utc_time = format_utc_time(data[_UTC_TIME])
    latitude = parse_coordinate(data[_LATITUDE], LATITUDE_DEGREE_DIGITS)
    longitude = parse_coordinate(data[_LONGITUDE], LONGITUDE_DEGREE_DIGITS)
    if utc_time is None or latitude is None or longitude is None:
        return None

    latitude_hemisphere = "N" if data[_LATITUDE_HEMISPHERE] == "N" else "S"
    longitude_hemisphere = "E" if data[_LONGITUDE_HEMISPHERE] == "E" else "W"
    latitude_degrees, latitude_minutes = latitude
    longitude_degrees, longitude_minutes = longitude

    return Fix(
        utc_time=utc_time,
        latitude_degrees=latitude_degrees if latitude_hemisphere == "N" else -latitude_degrees,
        latitude_minutes=latitude_minutes,
        latitude_hemisphere=latitude_hemisphere,
        longitude_degrees=longitude_degrees if longitude_hemisphere == "E" else -longitude_degrees,
        longitude_minutes=longitude_minutes,
        longitude_hemisphere=longitude_hemisphere,
        fix_quality=fix_quality,
        raw_sentence=body,
    )


def parse_gga(body: str) -> Fix | None:
    """Parse a GGA sentence body into a Fix.

    This is the main entry point for GGA parsing. It performs:
    1. Whitespace stripping (tolerates a stray line feed)
    2. Field extraction and count validation
    3. Message type validation (must be GGA from a supported constellation)
    4. Fix quality check (0, empty or unparseable means no fix)
    5. Time and coordinate parsing

    Args:
        body: Sentence body without the leading '$'

    Returns:
        Fix if the receiver reports a position, or None if:
        - The sentence has too few fields
        - The tag is not GGA from a supported constellation
        - Fix quality is 0, empty or not a number
        - The time or a coordinate field is malformed

    Example:
        >>> fix = parse_gga("GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,")
        >>> fix.latitude_degrees, fix.latitude_minutes
        (48, 7.038)
    """
    body = body.strip()

    fields = _extract_fields(body)
    if fields is None:
        logger.debug("Discarding short sentence: %s", body)
        return None

    if not _validate_message_type(fields[0]):
        logger.debug("Discarding non-GGA sentence: %s", fields[0])
        return None

    data = fields[1:]
    # Empty fix quality is semantically the same as 0: no fix
    fix_quality = parse_int_field(data[_FIX_QUALITY]) or 0
    if fix_quality == 0:
        logger.debug("No fix yet: %s", body)
        return None

    fix = _build_fix(data, fix_quality, body)
    if fix is None:
        logger.debug("Discarding malformed GGA sentence: %s", body)
    return fix
