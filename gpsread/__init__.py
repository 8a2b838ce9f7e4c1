"""gpsread: read one position fix from a serial GPS and print it."""

__version__ = "0.1.0"

from gpsread.gnss import GPSReader, read_fix  # noqa: E402
from gpsread.grid import GridReference, to_grid  # noqa: E402
from gpsread.nmea import Fix, SentenceFramer, parse_gga  # noqa: E402
from gpsread.output import PositionUnit, format_fix, parse_unit  # noqa: E402

__all__ = [
    "Fix",
    "GPSReader",
    "GridReference",
    "PositionUnit",
    "SentenceFramer",
    "format_fix",
    "parse_gga",
    "parse_unit",
    "read_fix",
    "to_grid",
]
