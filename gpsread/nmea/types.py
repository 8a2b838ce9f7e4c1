"""NMEA data types for parsed sentences.

Design Decisions:
    1. Degrees and minutes are kept apart: the output units show them
       separately (degrees/minutes/seconds, decimal minutes), so splitting a
       decimal-degree value back into parts would only add rounding noise.

    2. Hemisphere letters are stored alongside the signed integer degrees.
       Within one degree of the equator or the prime meridian the integer
       degrees are 0 and cannot carry a sign; the letter still can.

    3. Only fixes exist as values. A sentence with fix quality 0 never
       becomes a Fix; the parser returns None and the reader keeps framing.
"""

from dataclasses import dataclass


@dataclass
class Fix:
    """A position fix parsed from one GGA sentence.

    Attributes:
        utc_time: UTC time of the fix formatted as "HH:MM:SS".

        latitude_degrees: Whole degrees of latitude, negative for South.
            Range: -90 to +90.

        latitude_minutes: Minutes of latitude, 0.0 to < 60.0.

        latitude_hemisphere: "N" or "S".

        longitude_degrees: Whole degrees of longitude, negative for West.
            Range: -180 to +180.

        longitude_minutes: Minutes of longitude, 0.0 to < 60.0.

        longitude_hemisphere: "E" or "W".

        fix_quality: GPS fix quality indicator, always non-zero:
            1 = GPS fix (SPS)
            2 = DGPS fix
            4 = RTK Fixed
            5 = RTK Float
            6 = Dead reckoning

        raw_sentence: The sentence body as received, without the leading
            '$' and the trailing carriage return.

    Example:
        >>> fix = parse_gga("GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,")
        >>> fix.utc_time
        '12:35:19'
        >>> round(fix.latitude, 4)
        48.1173
    """

    utc_time: str
    latitude_degrees: int
    latitude_minutes: float
    latitude_hemisphere: str
    longitude_degrees: int
    longitude_minutes: float
    longitude_hemisphere: str
    fix_quality: int
    raw_sentence: str

    @property
    def latitude(self) -> float:
        """Latitude in signed decimal degrees, positive=North."""
        value = abs(self.latitude_degrees) + self.latitude_minutes / 60.0
        return -value if self.latitude_hemisphere == "S" else value

    @property
    def longitude(self) -> float:
        """Longitude in signed decimal degrees, positive=East."""
        value = abs(self.longitude_degrees) + self.longitude_minutes / 60.0
        return -value if self.longitude_hemisphere == "W" else value
