"""Monitor loop counters."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class MonitorStats:
    ticks: int = 0
    samples: int = 0
    sensor_errors: int = 0
    alerts: int = 0
    sink_errors: int = 0
    last_error: str | None = None
    last_sample_ts: float | None = None

    def record_sensor_error(self, exc: Exception) -> None:
        self.sensor_errors += 1
        self.last_error = str(exc)

    def record_sink_error(self, exc: Exception) -> None:
        self.sink_errors += 1
        self.last_error = str(exc)

    def summary(self) -> str:
        return (
            f"ticks={self.ticks} samples={self.samples} alerts={self.alerts} "
            f"sensor_errors={self.sensor_errors} sink_errors={self.sink_errors}"
        )
