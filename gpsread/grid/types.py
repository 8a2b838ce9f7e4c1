"""Grid reference types."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GridReference:
    """A British National Grid reference within one 100 km square.

    Attributes:
        square: Two-letter 100 km square code (e.g. "TQ"). The first letter
            names the 500 km square, the second the 100 km square inside it.

        easting: Metres east of the square's south-west corner, 0 to 99999.

        northing: Metres north of the square's south-west corner, 0 to 99999.

    Example:
        >>> ref = to_grid(52.0, -2.0)  # on the central meridian
        >>> ref.square, ref.easting
        ('SP', 0)
    """

    square: str
    easting: int
    northing: int
