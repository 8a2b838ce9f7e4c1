"""GNSS module for reading a position fix from a serial GPS receiver."""

from gpsread.gnss.reader import GPSReader, gga_tag, read_fix

__all__ = ["GPSReader", "gga_tag", "read_fix"]
