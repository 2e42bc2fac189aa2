"""Battery sample and alert dataclasses."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .session import SessionKind


class ChargeState(enum.Enum):
    CHARGING = "charging"
    DISCHARGING = "discharging"
    OTHER = "other"


class Urgency(enum.IntEnum):
    LOW = 0
    NORMAL = 1
    CRITICAL = 2

    @property
    def label(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class Sample:
    charge_state: ChargeState
    percentage: float  # 0..100

    @property
    def is_charging(self) -> bool:
        return self.charge_state is ChargeState.CHARGING

    @property
    def is_discharging(self) -> bool:
        return self.charge_state is ChargeState.DISCHARGING


@dataclass(frozen=True)
class AlertIntent:
    summary: str
    body: str
    kind: SessionKind
