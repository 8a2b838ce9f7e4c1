"""Command-line entry point: read one fix and print it.

Example::

    $ gpsread -d /dev/ttyUSB0 -b 4800 -u OSGB
    [TQ][29954][80436]

Exit status is 0 after printing the fix, 1 on invalid settings, device
errors, timeouts or an OSGB position outside the National Grid, and 2 for
command-line usage errors.
"""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from gpsread import __version__
from gpsread.config import (
    DEFAULT_BAUDRATE,
    DEFAULT_DEVICE,
    DEFAULT_TIMEOUT,
    DEFAULT_UNIT,
    ConfigError,
    resolve_settings,
)
from gpsread.gnss import GPSReader
from gpsread.output import format_fix, unit_names

__all__ = ["build_parser", "configure_logging", "main"]

logger = logging.getLogger(__name__)

LOG_LEVELS: dict[str, int] = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def configure_logging(
    level_name: str,
    *,
    fmt: str = "%(levelname)s: %(message)s",
) -> None:
    """Configure root logging to write diagnostics to stderr.

    Args:
        level_name: Logging level (debug, info, warning, error, critical)
        fmt: Log message format
    """
    level = LOG_LEVELS.get(level_name.lower())
    if level is None:
        valid = ", ".join(sorted(LOG_LEVELS))
        raise ValueError(f"Invalid log level '{level_name}'. Choose from: {valid}")

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    root.setLevel(level)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(logging.Formatter(fmt=fmt))
    root.addHandler(stream_handler)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser; unset options stay None."""
    parser = argparse.ArgumentParser(
        prog="gpsread",
        description="Read, parse and display a position from a USB serial GPS.",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-t",
        "--timeout",
        type=int,
        default=None,
        help=f"Time to wait for GPS in seconds, default {DEFAULT_TIMEOUT}s",
    )
    parser.add_argument(
        "-b",
        "--baudrate",
        type=int,
        default=None,
        help=f"GPS device baudrate, default {DEFAULT_BAUDRATE}",
    )
    parser.add_argument(
        "-d",
        "--device",
        default=None,
        help=f"GPS tty device, default {DEFAULT_DEVICE}",
    )
    parser.add_argument(
        "-u",
        "--units",
        dest="unit",
        metavar="UNIT",
        default=None,
        help=(
            f"Units to show position in: {', '.join(unit_names())}. "
            f"Default {DEFAULT_UNIT.value}"
        ),
    )
    parser.add_argument(
        "--talker",
        dest="talker_id",
        default=None,
        help="Talker ID of the GGA sentence to read (GP, GN, ...), default GP",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Configuration file read after /etc/gpsread.conf and ~/.gpsreadrc",
    )
    parser.add_argument(
        "--log-level",
        choices=sorted(LOG_LEVELS.keys()),
        default="warning",
        help="Logging verbosity",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the process exit status."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    overrides = {
        "timeout": args.timeout,
        "baudrate": args.baudrate,
        "device": args.device,
        "unit": args.unit,
        "talker_id": args.talker_id,
    }
    try:
        settings = resolve_settings(overrides, extra_config=args.config)
    except ConfigError as e:
        logger.error("%s", e)
        return EXIT_FAILURE

    logger.debug("Settings: %s", settings)

    try:
        with GPSReader(settings.device, settings.baudrate, settings.talker_id) as gps:
            fix = gps.read(timeout=settings.timeout)
    except TimeoutError as e:
        logger.error("%s", e)
        return EXIT_FAILURE
    except OSError as e:
        logger.error("Can't access GPS device: %s", e)
        return EXIT_FAILURE

    try:
        text = format_fix(fix, settings.unit)
    except ValueError as e:
        logger.error("%s", e)
        return EXIT_FAILURE

    print(text)
    return EXIT_SUCCESS
