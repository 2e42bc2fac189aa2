"""Exception hierarchy for charge_notifier.

Sensor errors skip a tick, sink errors are logged by the dispatcher, and
only configuration errors stop the process (at startup).
"""

from __future__ import annotations


class ChargeNotifierError(Exception):
    """Base class for all charge_notifier errors."""


class ConfigError(ChargeNotifierError):
    """Invalid static configuration."""


class SensorError(ChargeNotifierError):
    """The battery could not be sampled this tick."""


class SensorUnavailable(SensorError):
    """No battery hardware or driver is present."""


class SensorReadError(SensorError):
    """Transient failure while reading the battery."""


class SinkError(ChargeNotifierError):
    """An alert could not be delivered."""


class SinkRenderError(SinkError):
    """The notification backend failed to show the alert."""


class SinkAudioError(SinkError):
    """The sound cue could not be played."""


__all__ = [
    "ChargeNotifierError",
    "ConfigError",
    "SensorError",
    "SensorUnavailable",
    "SensorReadError",
    "SinkError",
    "SinkRenderError",
    "SinkAudioError",
]
