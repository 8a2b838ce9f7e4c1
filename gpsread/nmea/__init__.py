"""NMEA 0183 framing and GGA parsing."""

from gpsread.nmea.framer import MAX_SENTENCE_LENGTH, FramerState, SentenceFramer
from gpsread.nmea.gga import parse_gga
from gpsread.nmea.types import Fix

__all__ = [
    "MAX_SENTENCE_LENGTH",
    "Fix",
    "FramerState",
    "SentenceFramer",
    "parse_gga",
]
