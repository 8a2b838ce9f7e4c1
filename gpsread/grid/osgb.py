"""Latitude/longitude to Ordnance Survey National Grid conversion.

Transverse Mercator projection on the Airy 1830 ellipsoid:

    Scale factor on central meridian:  k0 = 0.9996012717
    True origin:                       49°N, 2°W
    False origin:                      400 000 m E, -100 000 m N
    Semi-major axis:                   a = 6 377 563.396 m

The meridional arc uses a fixed 4-term series in latitude and the
easting/northing use the usual 5th/6th order expansions in
A = cos(lat) * (lon - lon0). Results are metre-level for the UK.

Input coordinates are treated as already being on the Airy ellipsoid; no
WGS84 to OSGB36 datum shift is applied, so raw GPS positions land within
roughly 100 m of the true grid position.

Grid letters:
    The grid is lettered twice with a 5x5 alphabet that omits "I". The first
    letter picks a 500 km square, counted from the square that contains
    the false origin ("S"); the second picks a 100 km square inside it.

        V W X Y Z        row 0 (south)
        Q R S T U
        L M N O P
        F G H J K
        A B C D E        row 4 (north)
"""

import math

from gpsread.grid.types import GridReference

__all__ = ["GRID_LETTERS", "to_grid"]

GRID_LETTERS = "VWXYZQRSTULMNOPFGHJKABCDE"

# --- Airy 1830 ellipsoid and National Grid projection ------------------------

_SEMI_MAJOR_AXIS = 6377563.396
_SCALE_FACTOR = 0.9996012717
_ECCENTRICITY_SQUARED = 0.006670539761597
_SECOND_ECCENTRICITY_SQUARED = 0.006715334668516
_ORIGIN_LATITUDE = +0.855211333477221  # 49°N in radians
_ORIGIN_LONGITUDE = -0.034906585039887  # 2°W in radians
_ORIGIN_MERIDIONAL_ARC = 5429228.603180  # M at 49°N

_FALSE_EASTING = 400000.0
_FALSE_NORTHING = -100000.0

_DEGREES_TO_RADIANS = 0.017453292519943

# --- Grid square geometry -----------------------------------------------------

_MAJOR_SQUARE = 500000
_MINOR_SQUARE = 100000
_GRID_WIDTH = 5
# Index of "S", the 500 km square holding the false origin
_HOME_SQUARE = 7


def _meridional_arc(latitude: float) -> float:
    """Distance along the meridian from the equator to *latitude* (radians)."""
    return _SEMI_MAJOR_AXIS * (
        0.998330273507751 * latitude
        - 0.002505636963581 * math.sin(2 * latitude)
        + 0.000002620236941 * math.sin(4 * latitude)
        - 0.000000003381659 * math.sin(6 * latitude)
    )


def _project(latitude: float, longitude: float) -> tuple[float, float]:
    """Project geodetic degrees to full National Grid easting and northing."""
    lat = latitude * _DEGREES_TO_RADIANS
    lon = longitude * _DEGREES_TO_RADIANS

    n = _SEMI_MAJOR_AXIS / math.sqrt(1 - _ECCENTRICITY_SQUARED * math.sin(lat) ** 2)
    t = math.tan(lat) ** 2
    c = _SECOND_ECCENTRICITY_SQUARED * math.cos(lat) ** 2
    a = math.cos(lat) * (lon - _ORIGIN_LONGITUDE)
    m = _meridional_arc(lat)

    easting = _FALSE_EASTING + _SCALE_FACTOR * n * (
        a
        + (1 - t + c) * a**3 / 6
        + (5 - 18 * t + t * t + 72 * c - 58 * _SECOND_ECCENTRICITY_SQUARED) * a**5 / 120
    )
    northing = _FALSE_NORTHING + _SCALE_FACTOR * (
        m
        - _ORIGIN_MERIDIONAL_ARC
        + n
        * math.tan(lat)
        * (
            a * a / 2
            + (5 - t + 9 * c + 4 * c * c) * a**4 / 24
            + (61 - 58 * t + t * t + 600 * c - 330 * _SECOND_ECCENTRICITY_SQUARED) * a**6 / 720
        )
    )
    return easting, northing


def _square_letters(easting: int, northing: int) -> str:
    """Return the two-letter 100 km square code for full grid coordinates.

    Raises:
        ValueError: If the position lies outside the lettered 2500 km grid.
    """
    major_x = easting // _MAJOR_SQUARE
    major_y = northing // _MAJOR_SQUARE
    # The home square sits at column 2, row 1 of the 5x5 lettering
    if not (-2 <= major_x <= 2 and -1 <= major_y <= 3):
        raise ValueError(
            f"Position E{easting} N{northing} is outside the National Grid."
        )
    first = GRID_LETTERS[major_x + major_y * _GRID_WIDTH + _HOME_SQUARE]

    minor_x = easting % _MAJOR_SQUARE // _MINOR_SQUARE
    minor_y = northing % _MAJOR_SQUARE // _MINOR_SQUARE
    second = GRID_LETTERS[minor_x + minor_y * _GRID_WIDTH]

    return first + second


def to_grid(latitude: float, longitude: float) -> GridReference:
    """Convert a position in decimal degrees to a National Grid reference.

    Args:
        latitude: Latitude in decimal degrees, positive=North.
        longitude: Longitude in decimal degrees, positive=East.

    Returns:
        GridReference with the two-letter square and the easting/northing
        within that square, rounded to the nearest metre.

    Raises:
        ValueError: If the position lies outside the lettered grid.

    Example:
        >>> to_grid(55.9486, -3.1999).square  # Edinburgh Castle
        'NT'
    """
    easting, northing = _project(latitude, longitude)
    # Round half up, including for the negative northings south of 49°N
    full_easting = math.floor(easting + 0.5)
    full_northing = math.floor(northing + 0.5)

    return GridReference(
        square=_square_letters(full_easting, full_northing),
        easting=full_easting % _MAJOR_SQUARE % _MINOR_SQUARE,
        northing=full_northing % _MAJOR_SQUARE % _MINOR_SQUARE,
    )
