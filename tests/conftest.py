"""Shared test fixtures and dummy classes."""

from __future__ import annotations

from charge_notifier.models.metrics import MonitorStats
from charge_notifier.models.sample import AlertIntent, ChargeState, Sample
from charge_notifier.models.settings import Config


def charging(pct: float) -> Sample:
    return Sample(ChargeState.CHARGING, pct)


def discharging(pct: float) -> Sample:
    return Sample(ChargeState.DISCHARGING, pct)


class DummySensor:
    """Returns scripted samples; exception instances are raised instead."""

    def __init__(self, readings: list[object]) -> None:
        self.readings = list(readings)
        self.calls = 0

    async def __call__(self, config: Config) -> Sample:
        self.calls += 1
        item = self.readings.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


class DummySink:
    """Records dispatched intents."""

    def __init__(self, fail: Exception | None = None) -> None:
        self.intents: list[AlertIntent] = []
        self.fail = fail

    async def __call__(
        self, intent: AlertIntent, config: Config, stats: MonitorStats
    ) -> bool:
        self.intents.append(intent)
        if self.fail is not None:
            raise self.fail
        return True


class DummyBattery:
    """Stand-in for psutil's sbattery namedtuple."""

    def __init__(self, percent: object, power_plugged: bool | None) -> None:
        self.percent = percent
        self.power_plugged = power_plugged
        self.secsleft = -1
