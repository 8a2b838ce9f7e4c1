"""NMEA field parsing utilities.

GGA fields are comma-separated and positional. Latitude and longitude use a
fixed-width degrees prefix (2 digits for latitude, 3 for longitude) followed
by decimal minutes. Every helper here returns None on malformed input so the
caller can reject the whole sentence instead of guessing a value.
"""


# Supported NMEA talker IDs for multi-constellation GNSS receivers.
# Each 2-character prefix identifies the satellite system:
#   GP = GPS (USA)
#   GN = Multi-GNSS (combined solution)
#   GL = GLONASS (Russia)
#   GA = Galileo (Europe)
#   GB = BeiDou (China)
#   GQ = QZSS (Japan)
VALID_TALKER_IDS = ("GP", "GN", "GL", "GA", "GB", "GQ")

LATITUDE_DEGREE_DIGITS = 2
LONGITUDE_DEGREE_DIGITS = 3


def parse_int_field(value: str) -> int | None:
    """Parse a string field to int, returning None if empty or invalid.

    Args:
        value: String value from an NMEA field

    Returns:
        Parsed integer value, or None if the field is empty or unparseable

    Example:
        >>> parse_int_field("1")
        1
        >>> parse_int_field("")
        None
    """
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def parse_float_field(value: str) -> float | None:
    """Parse a string field to float, returning None if empty or invalid.

    Example:
        >>> parse_float_field("07.038")
        7.038
    """
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def format_utc_time(value: str) -> str | None:
    """Format the HHMMSS prefix of a UTC time field as "HH:MM:SS".

    Fractional seconds after the first six characters are dropped.

    Args:
        value: UTC time field, e.g. "123519" or "123519.00"

    Returns:
        "HH:MM:SS", or None if the field has fewer than six leading ASCII
        digits

    Example:
        >>> format_utc_time("123519.00")
        '12:35:19'
    """
    digits = value[:6]
    if len(digits) != 6 or not (digits.isascii() and digits.isdigit()):
        return None
    return f"{digits[0:2]}:{digits[2:4]}:{digits[4:6]}"


def parse_coordinate(value: str, degree_digits: int) -> tuple[int, float] | None:
    """Split a fixed-width NMEA coordinate into whole degrees and minutes.

    Unlike receivers that vary the degree width, GGA pads degrees with
    leading zeros, so the split position is fixed by the axis:
    DDMM.MMMM for latitude and DDDMM.MMMM for longitude.

    Args:
        value: Coordinate field (e.g. "4807.038" or "01131.000")
        degree_digits: Number of leading degree characters (2 or 3)

    Returns:
        Tuple of (degrees, minutes), or None if either part is not numeric
        or the minutes fall outside 0-60

    Example:
        >>> parse_coordinate("4807.038", 2)
        (48, 7.038)
        >>> parse_coordinate("01131.000", 3)
        (11, 31.0)
    """
    # str.isdigit() and float() also accept "²" and full-width digits
    if not value.isascii():
        return None

    degree_text = value[:degree_digits]
    if len(degree_text) != degree_digits or not degree_text.isdigit():
        return None

    minutes = parse_float_field(value[degree_digits:])
    # Also rejects nan, which fails every comparison
    if minutes is None or not 0.0 <= minutes < 60.0:
        return None

    return int(degree_text), minutes
