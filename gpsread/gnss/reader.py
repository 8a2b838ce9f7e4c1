"""GPSReader: one-shot GGA fix reader for a serial GPS receiver.

Opens the receiver's tty with pyserial in non-blocking mode and frames the
incoming bytes into NMEA sentences until a GGA sentence with a valid fix
arrives.

Reading strategy:
    The port is opened with ``timeout=0`` so ``read(1)`` returns immediately,
    with ``b""`` when no byte is waiting. Empty reads sleep for a short poll
    interval. The deadline is checked on every iteration, so a silent or
    fix-less receiver can never block the caller beyond its timeout. There
    are no signals or threads involved.
"""

import logging
import time
from types import TracebackType
from typing import Protocol

import serial

from gpsread.nmea.fields import VALID_TALKER_IDS
from gpsread.nmea.framer import MAX_SENTENCE_LENGTH, SentenceFramer
from gpsread.nmea.gga import parse_gga
from gpsread.nmea.types import Fix

__all__ = ["ByteSource", "GPSReader", "gga_tag", "read_fix"]

logger = logging.getLogger(__name__)

# --- serial defaults -----------------------------------------------------------

_DEVICE = "/dev/ttyUSB0"
_BAUDRATE = 4800
_TALKER_ID = "GP"

# Sleep between empty non-blocking reads
_POLL_INTERVAL = 0.00025

_TIMEOUT_MESSAGE = "Timed out trying to read GPS."


class ByteSource(Protocol):
    """Anything with a pyserial-style ``read``, e.g. ``serial.Serial``."""

    def read(self, size: int = 1) -> bytes: ...


def gga_tag(talker_id: str) -> str:
    """Return the GGA tag for a talker ID, e.g. ``"GP"`` -> ``"GPGGA"``."""
    return f"{talker_id}GGA"


def read_fix(
    source: ByteSource,
    sentence_tag: str = gga_tag(_TALKER_ID),
    max_sentence_length: int = MAX_SENTENCE_LENGTH,
    timeout: float | None = None,
    poll_interval: float = _POLL_INTERVAL,
) -> Fix:
    """Consume *source* until a GGA sentence with a valid fix is framed.

    Sentences with another tag, too few fields, malformed values or fix
    quality 0 are discarded and framing resumes at the next '$'.

    Args:
        source: Byte source; ``read(1)`` returns one byte, or ``b""`` when
            nothing is available yet.
        sentence_tag: Sentence tag to accept (compared against the first
            characters of each body).
        max_sentence_length: Framing buffer size.
        timeout: Seconds to wait for a fix; ``None`` waits forever.
        poll_interval: Seconds to sleep after an empty read.

    Returns:
        The first valid Fix.

    Raises:
        TimeoutError: If no fix arrives within *timeout* seconds.
        OSError: If the source fails (e.g. ``serial.SerialException``).
    """
    deadline = None if timeout is None else time.monotonic() + timeout
    framer = SentenceFramer(max_sentence_length)

    while True:
        if deadline is not None and time.monotonic() >= deadline:
            raise TimeoutError(_TIMEOUT_MESSAGE)

        chunk = source.read(1)
        if not chunk:
            time.sleep(poll_interval)
            continue

        body = framer.feed(chunk[0])
        if body is None:
            continue

        if body[: len(sentence_tag)] != sentence_tag:
            logger.debug("Skipping sentence: %s", body[: len(sentence_tag)])
            continue

        fix = parse_gga(body)
        if fix is not None:
            logger.info("Fix acquired at %s (quality %d)", fix.utc_time, fix.fix_quality)
            return fix


class GPSReader:
    """Context manager owning the serial connection to a GPS receiver.

    The port is opened in ``__enter__`` and closed in ``__exit__``, so it is
    released on every exit path including timeouts and read errors::

        with GPSReader("/dev/ttyUSB0", 4800) as gps:
            fix = gps.read(timeout=15)

    Args:
        device: Path of the receiver's tty (default: ``/dev/ttyUSB0``).
        baudrate: Line speed (default: 4800, the NMEA 0183 standard rate).
        talker_id: Talker prefix of the GGA sentences to accept
            (default: ``"GP"``; multi-constellation receivers often use
            ``"GN"``).
    """

    def __init__(
        self,
        device: str = _DEVICE,
        baudrate: int = _BAUDRATE,
        talker_id: str = _TALKER_ID,
    ) -> None:
        """Store connection parameters; the port is opened in ``__enter__``."""
        if talker_id not in VALID_TALKER_IDS:
            raise ValueError(f"Unsupported talker ID: {talker_id}")
        self._device = device
        self._baudrate = baudrate
        self._sentence_tag = gga_tag(talker_id)
        self._serial: serial.Serial | None = None

    def __enter__(self) -> "GPSReader":
        """Open the serial port for raw 8N1 non-blocking reads."""
        logger.debug("Opening %s at %d baud", self._device, self._baudrate)
        self._serial = serial.Serial(
            port=self._device,
            baudrate=self._baudrate,
            bytesize=serial.EIGHTBITS,
            parity=serial.PARITY_NONE,
            stopbits=serial.STOPBITS_ONE,
            timeout=0,
        )
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Close the serial port."""
        if self._serial is not None:
            self._serial.close()
            self._serial = None

    def read(self, timeout: float | None = None) -> Fix:
        """Block until the next valid GGA fix and return it.

        Args:
            timeout: Seconds to wait; ``None`` waits forever.

        Raises:
            RuntimeError: If called outside a ``with`` block.
            TimeoutError: If no fix arrives within *timeout* seconds.
            serial.SerialException: If reading from the device fails.
        """
        if self._serial is None:
            raise RuntimeError("GPSReader must be used as a context manager.")
        return read_fix(self._serial, self._sentence_tag, timeout=timeout)
