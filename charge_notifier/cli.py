"""Helper utilities for running the desktop notification and audio CLIs.

Provides an async `run_cmd` wrapper and `which_first`.
"""

from __future__ import annotations

import asyncio
import logging
import shutil
from typing import Iterable, Optional, Tuple

logger = logging.getLogger(__name__)


async def run_cmd(cmd: list[str], timeout: float = 10) -> Tuple[int, str, str]:
    """Run a command asynchronously and return (returncode, stdout, stderr).

    Args:
        cmd: Command and arguments as a list (e.g., ["notify-send", "hi"])
        timeout: Maximum time in seconds to wait for command completion

    Returns:
        Tuple of (return_code, stdout, stderr) where:
        - return_code: 0 for success, 124 for timeout, 127 for not found, 1 for other errors
        - stdout: Command standard output, decoded and stripped
        - stderr: Command standard error, decoded and stripped
    """
    try:
        process = await asyncio.create_subprocess_exec(
            *cmd,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except FileNotFoundError:
        logger.debug("Command not found: %s", cmd[0] if cmd else "")
        return 127, "", "not found"
    except OSError as e:
        logger.debug("run_cmd failed: %s", e)
        return 1, "", str(e)

    try:
        stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=timeout)
    except asyncio.TimeoutError:
        try:
            process.kill()
        except ProcessLookupError:
            pass
        logger.warning("Command timed out after %ss: %s", timeout, " ".join(cmd))
        return 124, "", "timeout"
    return (
        process.returncode or 0,
        stdout.decode(errors="replace").strip(),
        stderr.decode(errors="replace").strip(),
    )


def which_first(candidates: Iterable[str]) -> Optional[str]:
    """Return the first of ``candidates`` found on PATH, or None."""
    for name in candidates:
        path = shutil.which(name)
        if path:
            return path
    return None
