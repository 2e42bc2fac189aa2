"""Polling loop: sense, evaluate, dispatch, sleep."""
from __future__ import annotations

import asyncio
import logging
import time
from typing import Awaitable, Callable

from . import sensor, sink
from .errors import SensorError, SensorUnavailable
from .models.metrics import MonitorStats
from .models.sample import AlertIntent, Sample
from .models.session import Session
from .models.settings import Config
from .session import evaluate

logger = logging.getLogger(__name__)

SensorFn = Callable[[Config], Awaitable[Sample]]
SinkFn = Callable[[AlertIntent, Config, MonitorStats], Awaitable[bool]]

_STATS_EVERY_TICKS = 30


async def default_sensor(config: Config) -> Sample:
    return await sensor.sample_with_timeout(config.sensor_timeout_s)


async def default_sink(intent: AlertIntent, config: Config, stats: MonitorStats) -> bool:
    return await sink.dispatch(intent, config, stats)


async def tick(
    session: Session,
    config: Config,
    stats: MonitorStats,
    read: SensorFn = default_sensor,
    send: SinkFn = default_sink,
) -> AlertIntent | None:
    """Run one sense-evaluate-dispatch pass.

    A sensor failure skips the tick and leaves ``session`` untouched. A sink
    failure still counts as an attempt.
    """
    stats.ticks += 1
    try:
        sample = await read(config)
    except SensorUnavailable as e:
        stats.record_sensor_error(e)
        logger.warning("Battery unavailable: %s", e)
        return None
    except SensorError as e:
        stats.record_sensor_error(e)
        logger.error("Error getting battery status: %s", e)
        return None

    stats.samples += 1
    stats.last_sample_ts = time.time()
    logger.debug(
        "Sample: %s %.1f%%", sample.charge_state.value, sample.percentage
    )

    intent = evaluate(sample, config, session)
    if intent is None:
        return None
    stats.alerts += 1
    try:
        await send(intent, config, stats)
    except Exception as e:
        stats.record_sink_error(e)
        logger.exception("Alert dispatch failed")
    return intent


async def run_forever(
    config: Config,
    read: SensorFn = default_sensor,
    send: SinkFn = default_sink,
    max_ticks: int | None = None,
    stats: MonitorStats | None = None,
) -> MonitorStats:
    session = Session()
    stats = stats or MonitorStats()

    logger.info(
        "Starting battery monitor (above=%s%s, below=%s%s, attempts=%d, interval=%ss)",
        config.high_threshold,
        "" if config.high_enabled else " disabled",
        config.low_threshold,
        "" if config.low_enabled else " disabled",
        config.max_attempts,
        config.poll_interval_s,
    )
    while max_ticks is None or stats.ticks < max_ticks:
        await tick(session, config, stats, read, send)
        if stats.ticks % _STATS_EVERY_TICKS == 0:
            logger.debug("Monitor stats: %s", stats.summary())
        if max_ticks is not None and stats.ticks >= max_ticks:
            break
        await asyncio.sleep(config.poll_interval_s)
    return stats
