"""Text formatting of a position fix in the supported units."""

import enum
import math
from collections.abc import Callable

from gpsread.grid import to_grid
from gpsread.nmea.types import Fix

__all__ = ["PositionUnit", "format_fix", "parse_unit", "unit_names"]


class PositionUnit(enum.Enum):
    TIME = "TIME"
    NMEA = "NMEA"
    OSGB = "OSGB"
    LLMINSEC = "LLMINSEC"
    LLMINDEC = "LLMINDEC"
    LLDECIMAL = "LLDECIMAL"


# Older configuration files spell NMEA as "NEMA"
_UNIT_ALIASES: dict[str, PositionUnit] = {"NEMA": PositionUnit.NMEA}


def unit_names() -> list[str]:
    """Names of the output units, in display order."""
    return [unit.value for unit in PositionUnit]


def parse_unit(name: str) -> PositionUnit:
    """Map a unit name to a PositionUnit, ignoring case.

    Raises:
        ValueError: If the name is not a known unit.
    """
    key = name.strip().upper()
    if key in _UNIT_ALIASES:
        return _UNIT_ALIASES[key]
    try:
        return PositionUnit(key)
    except ValueError:
        raise ValueError(f"Invalid position unit: {name}") from None


def _format_time(fix: Fix) -> str:
    return fix.utc_time


def _format_nmea(fix: Fix) -> str:
    return f"${fix.raw_sentence}"


def _format_osgb(fix: Fix) -> str:
    ref = to_grid(fix.latitude, fix.longitude)
    return f"[{ref.square}][{ref.easting:05d}][{ref.northing:05d}]"


def _minutes_seconds(minutes: float) -> tuple[int, float]:
    """Split decimal minutes into whole minutes and seconds."""
    fraction, whole = math.modf(minutes)
    return int(whole), fraction * 60.0


def _format_llminsec(fix: Fix) -> str:
    # Signed degrees; the hemisphere letter still marks positions under one degree
    lat_minutes, lat_seconds = _minutes_seconds(fix.latitude_minutes)
    lon_minutes, lon_seconds = _minutes_seconds(fix.longitude_minutes)
    return "\n".join(
        [
            f"lat: {fix.latitude_degrees:3d}{fix.latitude_hemisphere}"
            f"{lat_minutes:02d}'{lat_seconds:06.3f}\"",
            f"lon: {fix.longitude_degrees:3d}{fix.longitude_hemisphere}"
            f"{lon_minutes:02d}'{lon_seconds:06.3f}\"",
        ]
    )


def _format_llmindec(fix: Fix) -> str:
    return "\n".join(
        [
            f"lat: {abs(fix.latitude_degrees):3d}{fix.latitude_hemisphere}"
            f"{fix.latitude_minutes:8.4f}'",
            f"lon: {abs(fix.longitude_degrees):3d}{fix.longitude_hemisphere}"
            f"{fix.longitude_minutes:8.4f}'",
        ]
    )


def _format_lldecimal(fix: Fix) -> str:
    return f"lat: {fix.latitude:+10.5f}\nlon: {fix.longitude:+10.5f}"


_FORMATTERS: dict[PositionUnit, Callable[[Fix], str]] = {
    PositionUnit.TIME: _format_time,
    PositionUnit.NMEA: _format_nmea,
    PositionUnit.OSGB: _format_osgb,
    PositionUnit.LLMINSEC: _format_llminsec,
    PositionUnit.LLMINDEC: _format_llmindec,
    PositionUnit.LLDECIMAL: _format_lldecimal,
}


def format_fix(fix: Fix, unit: PositionUnit) -> str:
    """Render a fix as printable text in the requested unit.

    Multi-line units put latitude first, then longitude. No trailing
    newline is included.

    Example:
        >>> print(format_fix(fix, PositionUnit.LLDECIMAL))
        lat:  +48.11730
        lon:  +11.51667
        >>> print(format_fix(fix, PositionUnit.TIME))
        12:35:19

    Raises:
        ValueError: If *unit* is not a PositionUnit, or for OSGB when the
            position lies outside the National Grid.
    """
    formatter = _FORMATTERS.get(unit)
    if formatter is None:
        raise ValueError(f"Invalid position unit: {unit}")
    return formatter(fix)
