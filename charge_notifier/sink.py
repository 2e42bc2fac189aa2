"""Desktop alert sink: notification popup plus optional sound cue.

Both halves are fire-and-forget from the engine's point of view. ``dispatch``
logs every failure and never raises.
"""

from __future__ import annotations

import logging
import os
import sys

from . import cli
from .errors import SinkAudioError, SinkRenderError
from .models.sample import AlertIntent, Urgency
from .models.settings import Config

logger = logging.getLogger(__name__)

# Tried in order; the first one on PATH plays the cue.
_PLAYERS: dict[str, tuple[str, ...]] = {
    "paplay": (),
    "aplay": ("-q",),
    "ffplay": ("-nodisp", "-autoexit", "-loglevel", "quiet"),
    "afplay": (),
}


def _applescript_quote(text: str) -> str:
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


def notification_cmd(
    summary: str, body: str, urgency: Urgency, app_name: str, platform: str | None = None
) -> list[str]:
    """Build the command that shows a notification on ``platform``.

    Urgency is honoured by notify-send only; macOS has no equivalent.
    """
    platform = platform or sys.platform
    if platform.startswith("linux"):
        return ["notify-send", "-a", app_name, "-u", urgency.label, summary, body]
    if platform == "darwin":
        script = (
            f"display notification {_applescript_quote(body)} "
            f"with title {_applescript_quote(app_name)} "
            f"subtitle {_applescript_quote(summary)}"
        )
        return ["osascript", "-e", script]
    raise SinkRenderError(f"unsupported platform: {platform}")


async def display(
    summary: str,
    body: str,
    urgency: Urgency = Urgency.NORMAL,
    app_name: str = "Charge Notifier",
    timeout_s: float = 10,
) -> None:
    cmd = notification_cmd(summary, body, urgency, app_name)
    rc, _, err = await cli.run_cmd(cmd, timeout=timeout_s)
    if rc != 0:
        raise SinkRenderError(f"{cmd[0]} failed (rc={rc}): {err or 'no output'}")


async def play_cue(path: str, timeout_s: float = 10) -> None:
    if not os.path.isfile(path):
        raise SinkAudioError(f"sound file not found: {path}")
    binary = cli.which_first(_PLAYERS)
    if binary is None:
        raise SinkAudioError(f"no audio player found (tried {', '.join(_PLAYERS)})")
    player = [binary, *_PLAYERS.get(os.path.basename(binary), ())]
    rc, _, err = await cli.run_cmd([*player, path], timeout=timeout_s)
    if rc != 0:
        raise SinkAudioError(
            f"{os.path.basename(player[0])} failed (rc={rc}): {err or 'no output'}"
        )


async def dispatch(intent: AlertIntent, config: Config, stats=None) -> bool:
    """Show ``intent`` and play the configured cue.

    Returns:
        True when the notification was displayed. Audio failures do not
        affect the return value.
    """
    shown = True
    try:
        await display(
            intent.summary,
            intent.body,
            urgency=config.urgency,
            app_name=config.app_name,
            timeout_s=config.sink_timeout_s,
        )
        logger.info("Alert shown: %s | %s", intent.summary, intent.body)
    except SinkRenderError as e:
        shown = False
        logger.error("Failed to show notification: %s", e)
        if stats is not None:
            stats.record_sink_error(e)

    if config.sound_path:
        try:
            await play_cue(config.sound_path, timeout_s=config.sink_timeout_s)
        except SinkAudioError as e:
            logger.error("Failed to play sound: %s", e)
            if stats is not None:
                stats.record_sink_error(e)
    return shown
