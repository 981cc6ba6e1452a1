"""Centralized configuration constants.

All configurable values in one place for easy maintenance.
The probe itself is configured through INTERVAL and VIP; logging can be
tuned via LOG_* environment variables.
"""

import os
import re
import threading
from dataclasses import dataclass
from typing import Mapping, Optional

# HTTP server
HTTP_HOST = "0.0.0.0"
HTTP_PORT = 8080
HTTP_TIMEOUT_SECONDS = 10
SHUTDOWN_GRACE_SECONDS = 10

# Probe defaults
DEFAULT_INTERVAL = "2s"
DEFAULT_VIP = ""

# Logging
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
LOG_FILE = os.environ.get("LOG_FILE", "")
LOG_MAX_BYTES = int(os.environ.get("LOG_MAX_BYTES", 10 * 1024 * 1024))  # 10MB default
LOG_BACKUP_COUNT = int(os.environ.get("LOG_BACKUP_COUNT", 5))

# Duration units, in seconds
_UNITS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,  # micro sign
    "μs": 1e-6,  # greek mu
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}
_DURATION_PART = re.compile(r"(\d*\.?\d*)([^\d.]+)")
# Longest duration a 64-bit nanosecond count can hold (about 2562047h)
MAX_DURATION_SECONDS = (2 ** 63 - 1) / 1e9


class ConfigError(Exception):
    """Configuration value is missing or malformed."""
    pass


@dataclass(frozen=True)
class ExporterConfig:
    """Probe settings, fixed for the lifetime of the process."""
    interval: float
    vip: str = DEFAULT_VIP

    @property
    def detection_enabled(self) -> bool:
        return self.vip != ""


def parse_duration(value: str) -> float:
    """Parse a duration string such as "2s", "500ms" or "1h30m".

    A duration is an optionally signed sequence of decimal numbers, each
    with an optional fraction and a mandatory unit suffix. "0" is accepted
    without a unit.

    Args:
        value: Duration string

    Returns:
        Duration in seconds

    Raises:
        ConfigError: If the string is not a valid duration
    """
    text = value
    sign = 1.0
    if text[:1] in ("+", "-"):
        if text[0] == "-":
            sign = -1.0
        text = text[1:]

    if text == "0":
        return 0.0
    if not text:
        raise ConfigError(f"invalid duration {value!r}")

    total = 0.0
    pos = 0
    while pos < len(text):
        match = _DURATION_PART.match(text, pos)
        if match is None:
            raise ConfigError(f"invalid duration {value!r}")
        number, unit = match.groups()
        if number in ("", "."):
            raise ConfigError(f"invalid duration {value!r}")
        if unit not in _UNITS:
            raise ConfigError(f"unknown unit {unit!r} in duration {value!r}")
        total += float(number) * _UNITS[unit]
        pos = match.end()

    if total > MAX_DURATION_SECONDS:
        raise ConfigError(f"duration {value!r} out of range")
    return sign * total


def load_config(environ: Optional[Mapping[str, str]] = None) -> ExporterConfig:
    """Build the probe configuration from environment variables.

    Reads INTERVAL (default "2s") and VIP (default empty). An empty VIP
    disables detection.

    Raises:
        ConfigError: If INTERVAL is malformed, not positive or too long
    """
    if environ is None:
        environ = os.environ

    interval_str = environ.get("INTERVAL", DEFAULT_INTERVAL)
    interval = parse_duration(interval_str)
    if interval <= 0:
        raise ConfigError(f"INTERVAL must be positive, got {interval_str!r}")
    if interval > threading.TIMEOUT_MAX:
        raise ConfigError(f"INTERVAL is too long, got {interval_str!r}")

    return ExporterConfig(interval=interval, vip=environ.get("VIP", DEFAULT_VIP))
