"""British National Grid conversion."""

from gpsread.grid.osgb import GRID_LETTERS, to_grid
from gpsread.grid.types import GridReference

__all__ = ["GRID_LETTERS", "GridReference", "to_grid"]
