"""Run settings: defaults, configuration files and validation.

Settings are resolved in layers, each overriding the previous one:

    1. Built-in defaults
    2. /etc/gpsread.conf
    3. ~/.gpsreadrc
    4. An explicit --config file
    5. Command-line options

Configuration files hold one ``key = value`` per line. Blank lines and lines
starting with '#' are ignored, a '#' after an unquoted value starts a
comment, and values may be wrapped in double quotes::

    # ~/.gpsreadrc
    timeout = 30
    gpsbaud = 9600
    gpsterm = "/dev/ttyACM0"
    posunit = OSGB
    talker  = GN

Every value, wherever it comes from, goes through the same validators.
"""

import logging
import sys
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from gpsread.nmea.fields import VALID_TALKER_IDS
from gpsread.output import PositionUnit, parse_unit

__all__ = [
    "VALID_BAUDRATES",
    "ConfigError",
    "Settings",
    "default_config_paths",
    "load_config_file",
    "resolve_settings",
    "validate_baudrate",
    "validate_device",
    "validate_talker_id",
    "validate_timeout",
    "validate_unit",
]

logger = logging.getLogger(__name__)

# POSIX termios line speeds
VALID_BAUDRATES = (
    50, 75, 110, 134, 150, 200, 300, 600, 1200, 1800, 2400, 4800, 9600, 19200, 38400,
)

# Shortest plausible tty path, e.g. "/dev/tty"
_MINIMUM_DEVICE_LENGTH = 8

DEFAULT_TIMEOUT = 15
DEFAULT_BAUDRATE = 4800
DEFAULT_DEVICE = "/dev/tty.usbserial" if sys.platform == "darwin" else "/dev/ttyUSB0"
DEFAULT_UNIT = PositionUnit.LLDECIMAL
DEFAULT_TALKER_ID = "GP"

# Configuration file key -> Settings field
_FILE_KEYS = {
    "timeout": "timeout",
    "gpsbaud": "baudrate",
    "gpsterm": "device",
    "posunit": "unit",
    "talker": "talker_id",
}


class ConfigError(ValueError):
    """A configuration value or file is invalid."""


@dataclass(frozen=True)
class Settings:
    """Resolved settings for one run.

    Attributes:
        timeout: Seconds to wait for a fix before giving up.
        baudrate: Serial line speed, one of ``VALID_BAUDRATES``.
        device: Path of the receiver's tty.
        unit: Output unit for the fix.
        talker_id: Talker prefix of the GGA sentence to read ("GP", "GN", ...).
    """

    timeout: int = DEFAULT_TIMEOUT
    baudrate: int = DEFAULT_BAUDRATE
    device: str = DEFAULT_DEVICE
    unit: PositionUnit = DEFAULT_UNIT
    talker_id: str = DEFAULT_TALKER_ID


# --- validators ---------------------------------------------------------------


def _to_int(value: Any, message: str) -> int:
    if isinstance(value, bool):
        raise ConfigError(message)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigError(message) from None


def validate_timeout(value: Any) -> int:
    """Return *value* as a positive number of seconds."""
    timeout = _to_int(value, f"Invalid timeout: {value}")
    if timeout <= 0:
        raise ConfigError(f"Invalid timeout: {value}")
    return timeout


def validate_baudrate(value: Any) -> int:
    """Return *value* as one of the supported POSIX line speeds."""
    baudrate = _to_int(value, f"Invalid baudrate: {value}")
    if baudrate not in VALID_BAUDRATES:
        raise ConfigError(f"Invalid baudrate: {value}")
    return baudrate


def validate_device(value: Any) -> str:
    """Return *value* if it looks like a tty path ("/dev/tty*" or longer)."""
    if not isinstance(value, str) or len(value) < _MINIMUM_DEVICE_LENGTH:
        raise ConfigError(f"Problem with GPS tty value: {value}")
    return value


def validate_unit(value: Any) -> PositionUnit:
    if isinstance(value, PositionUnit):
        return value
    try:
        return parse_unit(str(value))
    except ValueError as e:
        raise ConfigError(str(e)) from None


def validate_talker_id(value: Any) -> str:
    talker_id = str(value).strip().upper()
    if talker_id not in VALID_TALKER_IDS:
        valid = ", ".join(VALID_TALKER_IDS)
        raise ConfigError(f"Invalid talker ID '{value}'. Choose from: {valid}")
    return talker_id


_VALIDATORS = {
    "timeout": validate_timeout,
    "baudrate": validate_baudrate,
    "device": validate_device,
    "unit": validate_unit,
    "talker_id": validate_talker_id,
}


# --- configuration files ------------------------------------------------------


def default_config_paths() -> list[Path]:
    """System-wide file first, then the per-user file."""
    return [Path("/etc/gpsread.conf"), Path.home() / ".gpsreadrc"]


def _parse_value(raw: str) -> str:
    """Strip quotes or a trailing comment from a raw value."""
    raw = raw.strip()
    if raw.startswith('"'):
        end = raw.find('"', 1)
        if end == -1:
            raise ValueError("unterminated quoted value")
        return raw[1:end]
    if "#" in raw:
        raw = raw.split("#", 1)[0].strip()
    return raw


def _parse_lines(lines: Iterable[str]) -> dict[str, str]:
    values: dict[str, str] = {}
    for line_num, line in enumerate(lines, 1):
        line = line.strip()

        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            raise ValueError(f"line {line_num}: missing '='")

        key, value = line.split("=", 1)
        key = key.strip()
        if key not in _FILE_KEYS:
            raise ValueError(f"line {line_num}: unknown option '{key}'")

        try:
            values[_FILE_KEYS[key]] = _parse_value(value)
        except ValueError as e:
            raise ValueError(f"line {line_num}: {e}") from None
    return values


def load_config_file(path: Path, required: bool = False) -> dict[str, Any]:
    """Read and validate one configuration file.

    Args:
        path: File to read.
        required: If False, a missing file yields no values.

    Returns:
        Mapping of Settings field names to validated values.

    Raises:
        ConfigError: If the file is unreadable, malformed or holds an
            invalid value (or is missing while *required*).
    """
    if not path.exists():
        if required:
            raise ConfigError(f"Problem with config file '{path}': file not found")
        logger.debug("Config file not found at %s, skipping", path)
        return {}

    logger.debug("Loading config from: %s", path)

    try:
        with open(path, encoding="utf-8") as f:
            raw_values = _parse_lines(f)
        values = {key: _VALIDATORS[key](raw) for key, raw in raw_values.items()}
    except (OSError, UnicodeDecodeError, ValueError) as e:
        raise ConfigError(f"Problem with config file '{path}': {e}") from e

    logger.debug("Loaded %d values from %s", len(values), path)
    return values


def resolve_settings(
    overrides: Mapping[str, Any] | None = None,
    config_paths: Iterable[Path] | None = None,
    extra_config: Path | None = None,
) -> Settings:
    """Build Settings from defaults, configuration files and overrides.

    Args:
        overrides: Settings field values from the command line; ``None``
            values mean "not given" and leave the file value in place.
        config_paths: Optional files to read, in order. Defaults to
            ``default_config_paths()``.
        extra_config: A file that must exist, read after *config_paths*.

    Raises:
        ConfigError: If any file or value is invalid.
    """
    if config_paths is None:
        config_paths = default_config_paths()

    values: dict[str, Any] = {}
    for path in config_paths:
        values.update(load_config_file(path))
    if extra_config is not None:
        values.update(load_config_file(extra_config, required=True))

    for key, value in (overrides or {}).items():
        if key not in _VALIDATORS:
            raise ConfigError(f"Unknown setting: {key}")
        if value is not None:
            values[key] = _VALIDATORS[key](value)

    return Settings(**values)
