"""Byte-level sentence framing for NMEA 0183 streams.

A serial GPS emits a continuous stream of sentences of the form
``$<body>\\r\\n``. The framer locates sentence boundaries one byte at a time:

    WAITING_FOR_START --'$'--> ACCUMULATING --'\\r'--> (body returned)
            ^                        |                        |
            +------ overflow --------+------------------------+

Bytes outside a sentence (including the '\\n' after each '\\r') are ignored.
A body longer than the buffer limit is dropped and framing restarts at the
next '$', so one corrupt sentence never desynchronizes the stream.
"""

import enum
import logging

__all__ = ["MAX_SENTENCE_LENGTH", "FramerState", "SentenceFramer"]

logger = logging.getLogger(__name__)

# Buffer size for one sentence; NMEA caps sentences at 82 characters
MAX_SENTENCE_LENGTH = 256

_START = ord("$")
_END = ord("\r")


class FramerState(enum.Enum):
    """Whether the framer is between sentences or inside one."""

    WAITING_FOR_START = enum.auto()
    ACCUMULATING = enum.auto()


class SentenceFramer:
    """Reassemble ``$...\\r`` delimited sentence bodies from single bytes.

    Example::

        framer = SentenceFramer()
        for byte in b"$GPGGA,...\\r\\n":
            body = framer.feed(byte)
            if body is not None:
                handle(body)

    Args:
        max_sentence_length: Buffer size for one sentence. At most
            ``max_sentence_length - 1`` body characters are kept; a longer
            body is discarded.
    """

    def __init__(self, max_sentence_length: int = MAX_SENTENCE_LENGTH) -> None:
        if max_sentence_length < 2:
            raise ValueError("max_sentence_length must be at least 2.")
        self._capacity = max_sentence_length - 1
        self._buffer = bytearray()
        self._state = FramerState.WAITING_FOR_START

    @property
    def state(self) -> FramerState:
        return self._state

    def reset(self) -> None:
        """Drop any partial sentence and wait for the next '$'."""
        self._buffer.clear()
        self._state = FramerState.WAITING_FOR_START

    def feed(self, byte: int) -> str | None:
        """Advance the state machine by one byte.

        Args:
            byte: Next byte from the stream, as an int (0-255).

        Returns:
            The completed sentence body (without '$' and '\\r') when this
            byte terminates a sentence, otherwise None.
        """
        if self._state is FramerState.WAITING_FOR_START:
            if byte == _START:
                self._buffer.clear()
                self._state = FramerState.ACCUMULATING
            return None

        if byte == _END:
            body = self._buffer.decode("ascii", errors="ignore")
            self.reset()
            return body

        if len(self._buffer) + 1 > self._capacity:
            logger.debug("Sentence exceeded %d bytes, resynchronizing", self._capacity)
            self.reset()
            return None

        self._buffer.append(byte)
        return None
