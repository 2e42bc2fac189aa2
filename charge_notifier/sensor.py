"""Battery sensor backed by psutil."""

from __future__ import annotations

import asyncio
import logging

import psutil

from .errors import SensorReadError, SensorUnavailable
from .models.sample import ChargeState, Sample

logger = logging.getLogger(__name__)


def _charge_state(power_plugged: bool | None) -> ChargeState:
    if power_plugged is None:
        return ChargeState.OTHER
    return ChargeState.CHARGING if power_plugged else ChargeState.DISCHARGING


def read_battery() -> Sample:
    """Read the first battery reported by the OS.

    Raises:
        SensorUnavailable: psutil has no battery support or finds no battery.
        SensorReadError: the OS failed while reading the battery.
    """
    reader = getattr(psutil, "sensors_battery", None)
    if reader is None:
        raise SensorUnavailable("battery sensors are not supported on this platform")
    try:
        battery = reader()
    except (OSError, RuntimeError) as e:
        raise SensorReadError(f"failed to read battery: {e}") from e
    if battery is None:
        raise SensorUnavailable("no battery found")

    try:
        percentage = float(battery.percent)
    except (TypeError, ValueError) as e:
        raise SensorReadError(f"invalid battery percentage {battery.percent!r}") from e
    percentage = max(0.0, min(100.0, percentage))
    return Sample(
        charge_state=_charge_state(battery.power_plugged),
        percentage=percentage,
    )


async def sample_with_timeout(timeout_s: float, reader=read_battery) -> Sample:
    """Run a blocking battery read in a worker thread, bounded by ``timeout_s``."""
    try:
        return await asyncio.wait_for(asyncio.to_thread(reader), timeout=timeout_s)
    except asyncio.TimeoutError as e:
        raise SensorReadError(f"battery read timed out after {timeout_s}s") from e
