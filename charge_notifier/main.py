"""Entrypoint for running the battery monitor from the package.

Environment settings provide defaults; command line flags override them.
"""

from __future__ import annotations

import argparse
import asyncio
import dataclasses
import logging
import sys

from . import config, monitor
from .errors import ConfigError
from .logger import setup_logging
from .models.metrics import MonitorStats
from .models.sample import AlertIntent, Urgency
from .models.settings import Config

logger = logging.getLogger(__name__)


def _percentage(raw: str) -> int:
    value = int(raw)
    if not 0 <= value <= 100:
        raise argparse.ArgumentTypeError(f"{value} is not in 0..100")
    return value


def _at_least_one(raw: str) -> int:
    value = int(raw)
    if value < 1:
        raise argparse.ArgumentTypeError(f"{value} is less than 1")
    return value


def _positive(raw: str) -> float:
    value = float(raw)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"{value} must be positive")
    return value


def build_parser(s=None) -> argparse.ArgumentParser:
    s = s or config.settings
    parser = argparse.ArgumentParser(
        prog="charge-notifier",
        description="Notify when the battery charges above or drains below a threshold",
    )
    parser.add_argument("--sound-path", default=s.SOUND_PATH,
                        help="Path to the sound file to play for notifications")
    parser.add_argument("--urgency", type=int, choices=[0, 1, 2], default=s.URGENCY,
                        help="Notification urgency (0=Low, 1=Normal, 2=Critical, Linux only)")
    parser.add_argument("--above", type=_percentage, default=s.ABOVE,
                        help="Percentage above which you are notified (default: %(default)s)")
    parser.add_argument("--below", type=_percentage, default=s.BELOW,
                        help="Percentage below which you are notified (default: %(default)s)")
    parser.add_argument("--no-above", action="store_true", default=s.NO_ABOVE,
                        help="Disable notifications for high battery")
    parser.add_argument("--no-below", action="store_true", default=s.NO_BELOW,
                        help="Disable notifications for low battery")
    parser.add_argument("--sec", type=_positive, default=s.POLL_S,
                        help="Seconds to wait before checking again (default: %(default)s)")
    parser.add_argument("--notify-attempts", type=_at_least_one, default=s.NOTIFY_ATTEMPTS,
                        help="How many notification attempts per session (minimum 1)")
    parser.add_argument("--once", action="store_true",
                        help="Sample the battery once and exit")
    parser.add_argument("--dry-run", action="store_true",
                        help="Log alerts but don't show notifications or play sounds")
    return parser


def config_from_args(args: argparse.Namespace) -> Config:
    base = config.config_from_settings()
    return dataclasses.replace(
        base,
        high_threshold=float(args.above),
        low_threshold=float(args.below),
        high_enabled=not args.no_above,
        low_enabled=not args.no_below,
        max_attempts=args.notify_attempts,
        poll_interval_s=args.sec,
        sound_path=args.sound_path or None,
        urgency=Urgency(args.urgency),
    ).validate()


async def _log_only(intent: AlertIntent, cfg: Config, stats: MonitorStats) -> bool:
    logger.info("DRY RUN: would notify %s | %s", intent.summary, intent.body)
    return True


def run(argv: list[str] | None = None) -> int:
    setup_logging()
    args = build_parser().parse_args(argv)
    try:
        cfg = config_from_args(args)
    except ConfigError as e:
        logger.error("Invalid configuration: %s", e)
        return 2
    config.validate_settings(
        dataclasses.replace(
            config.settings,
            SOUND_PATH=cfg.sound_path,
            ABOVE=args.above,
            BELOW=args.below,
            NO_ABOVE=args.no_above,
            NO_BELOW=args.no_below,
        )
    )

    send = _log_only if args.dry_run else monitor.default_sink
    logger.info("Starting charge_notifier")
    try:
        asyncio.run(
            monitor.run_forever(cfg, send=send, max_ticks=1 if args.once else None)
        )
    except KeyboardInterrupt:
        logger.info("Interrupted, exiting")
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
