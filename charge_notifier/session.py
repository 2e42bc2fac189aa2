"""Notification session engine.

One call to ``evaluate`` per tick. The engine owns no I/O: it classifies the
sample, moves the session through Idle / ActiveAbove / ActiveBelow and returns
at most one alert for the caller to dispatch.
"""

from __future__ import annotations

import logging

from .models.sample import AlertIntent, Sample
from .models.session import Session, SessionKind
from .models.settings import Config

logger = logging.getLogger(__name__)


def classify(sample: Sample, config: Config) -> tuple[bool, bool]:
    """Return ``(above, below)`` for a sample.

    ``above`` needs the battery charging at or over the high threshold and
    ``below`` needs it discharging at or under the low threshold, so the two
    can never hold at once.
    """
    above = (
        config.high_enabled
        and sample.is_charging
        and sample.percentage >= config.high_threshold
    )
    below = (
        config.low_enabled
        and sample.is_discharging
        and sample.percentage <= config.low_threshold
    )
    return above, below


def build_intent(sample: Sample, kind: SessionKind) -> AlertIntent:
    status = "Charging" if sample.is_charging else "Discharging"
    return AlertIntent(
        summary=f"Battery Status: {status}",
        body=f"Charge: {sample.percentage:.0f}%",
        kind=kind,
    )


def _end(session: Session, reason: str) -> None:
    logger.info(
        "Ending %s session (%s) after %d alert(s)",
        session.kind.value,
        reason,
        session.attempts_made,
    )
    session.end()


def evaluate(sample: Sample, config: Config, session: Session) -> AlertIntent | None:
    above, below = classify(sample, config)

    # Safe zone: close any open session, otherwise lift the debounce.
    if not above and not below:
        if session.is_active():
            _end(session, "safe zone")
        elif session.last_ended_kind is not SessionKind.NONE:
            logger.debug(
                "Safe zone reached; clearing debounce for %s",
                session.last_ended_kind.value,
            )
            session.clear_last_ended()

    if not session.is_active():
        if above and session.can_start(SessionKind.ABOVE_HIGH):
            session.start(SessionKind.ABOVE_HIGH)
        elif below and session.can_start(SessionKind.BELOW_LOW):
            session.start(SessionKind.BELOW_LOW)
        if session.is_active():
            logger.info(
                "Starting %s session at %.1f%%", session.kind.value, sample.percentage
            )

    if not session.is_active() or not session.should_notify(config.max_attempts):
        return None

    holds = above if session.kind is SessionKind.ABOVE_HIGH else below
    if not holds:
        return None

    intent = build_intent(sample, session.kind)
    session.increment_attempt()
    logger.debug(
        "Alert %d/%d for %s session",
        session.attempts_made,
        config.max_attempts,
        session.kind.value,
    )
    if not session.should_notify(config.max_attempts):
        _end(session, "attempts exhausted")
    return intent
