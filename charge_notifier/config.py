"""Central configuration for charge_notifier."""

from __future__ import annotations

import logging
import os

from .models.sample import Urgency
from .models.settings import Config, Settings

logger = logging.getLogger(__name__)

_TRUE = {"1", "true", "yes"}


def _read_bool(name: str) -> bool:
    return os.environ.get(name, "false").strip().lower() in _TRUE


def _read_int(name: str, default: int, low: int, high: int | None = None) -> int:
    """Read an integer environment variable, clamped to a valid range.

    Args:
        name: Environment variable name.
        default: Value used when the variable is unset, invalid or out of range.
        low: Smallest accepted value.
        high: Largest accepted value, or None for no upper bound.

    Returns:
        The parsed value, or ``default``.

    Example:
        >>> os.environ["CHARGE_ABOVE"] = "150"
        >>> _read_int("CHARGE_ABOVE", 85, 0, 100)
        85
    """
    raw = (os.environ.get(name) or "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("%s=%r is not an integer; using %s", name, raw, default)
        return default
    if value < low or (high is not None and value > high):
        logger.warning("%s=%s is out of range; using %s", name, value, default)
        return default
    return value


def _read_float(name: str, default: float) -> float:
    raw = (os.environ.get(name) or "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("%s=%r is not a number; using %s", name, raw, default)
        return default
    if value <= 0:
        logger.warning("%s=%s must be positive; using %s", name, value, default)
        return default
    return value


def _read_settings() -> Settings:
    """Read all configuration from environment variables.

    Returns:
        Settings object with all configuration values.

    Note:
        Invalid numeric values fall back to sensible defaults.
        Boolean values accept: 1/true/yes (case-insensitive) as True.
    """
    return Settings(
        SOUND_PATH=os.environ.get("CHARGE_SOUND_PATH") or None,
        URGENCY=_read_int("CHARGE_URGENCY", int(Urgency.NORMAL), 0, 2),
        ABOVE=_read_int("CHARGE_ABOVE", 85, 0, 100),
        BELOW=_read_int("CHARGE_BELOW", 20, 0, 100),
        NO_ABOVE=_read_bool("CHARGE_NO_ABOVE"),
        NO_BELOW=_read_bool("CHARGE_NO_BELOW"),
        POLL_S=_read_float("CHARGE_POLL_S", 120.0),
        NOTIFY_ATTEMPTS=_read_int("CHARGE_NOTIFY_ATTEMPTS", 15, 1),
        SENSOR_TIMEOUT_S=_read_float("CHARGE_SENSOR_TIMEOUT_S", 10.0),
        SINK_TIMEOUT_S=_read_float("CHARGE_SINK_TIMEOUT_S", 10.0),
    )


settings = _read_settings()


def validate_settings(s: Settings | None = None) -> None:
    """Log warnings for settings that are legal but probably unintended."""
    s = s or settings
    if s.SOUND_PATH is None:
        logger.info("CHARGE_SOUND_PATH is not set; alerts will be silent.")
    elif not os.path.isfile(s.SOUND_PATH):
        logger.warning("CHARGE_SOUND_PATH %s does not exist", s.SOUND_PATH)
    if s.NO_ABOVE and s.NO_BELOW:
        logger.warning("Both thresholds are disabled; no alert will ever fire.")
    if not s.NO_ABOVE and not s.NO_BELOW and s.BELOW >= s.ABOVE:
        logger.warning(
            "CHARGE_BELOW (%s) is not below CHARGE_ABOVE (%s)", s.BELOW, s.ABOVE
        )


def config_from_settings(s: Settings | None = None) -> Config:
    s = s or settings
    return Config(
        high_threshold=float(s.ABOVE),
        low_threshold=float(s.BELOW),
        high_enabled=not s.NO_ABOVE,
        low_enabled=not s.NO_BELOW,
        max_attempts=s.NOTIFY_ATTEMPTS,
        poll_interval_s=s.POLL_S,
        sound_path=s.SOUND_PATH,
        urgency=Urgency(s.URGENCY),
        sensor_timeout_s=s.SENSOR_TIMEOUT_S,
        sink_timeout_s=s.SINK_TIMEOUT_S,
    ).validate()

