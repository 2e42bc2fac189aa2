"""Configuration dataclasses."""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import ConfigError
from .sample import Urgency


@dataclass
class Settings:
    """Raw process settings as read from the environment."""

    SOUND_PATH: str | None
    URGENCY: int
    ABOVE: int
    BELOW: int
    NO_ABOVE: bool
    NO_BELOW: bool
    POLL_S: float
    NOTIFY_ATTEMPTS: int
    SENSOR_TIMEOUT_S: float
    SINK_TIMEOUT_S: float


@dataclass(frozen=True)
class Config:
    """Static configuration consumed by the session engine and the loop."""

    high_threshold: float = 85.0
    low_threshold: float = 20.0
    high_enabled: bool = True
    low_enabled: bool = True
    max_attempts: int = 15
    poll_interval_s: float = 120.0
    sound_path: str | None = None
    urgency: Urgency = Urgency.NORMAL
    app_name: str = "Charge Notifier"
    sensor_timeout_s: float = 10.0
    sink_timeout_s: float = 10.0

    def validate(self) -> "Config":
        for name in ("high_threshold", "low_threshold"):
            value = getattr(self, name)
            if not 0 <= value <= 100:
                raise ConfigError(f"{name} must be within 0..100, got {value}")
        if self.max_attempts < 1:
            raise ConfigError(f"max_attempts must be >= 1, got {self.max_attempts}")
        if self.poll_interval_s <= 0:
            raise ConfigError(
                f"poll_interval_s must be positive, got {self.poll_interval_s}"
            )
        return self
