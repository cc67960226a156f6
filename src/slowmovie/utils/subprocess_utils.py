"""Subprocess runner for the external media tools (ffprobe, ffmpeg, convert)."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from slowmovie.core.errors import ToolError

logger = logging.getLogger(__name__)


def run_command(
    cmd: list[str],
    cwd: Path | None = None,
    timeout: float | None = None,
) -> subprocess.CompletedProcess:
    """Run an external command and return the completed process.

    A missing executable or a non-zero exit status raises ToolError.
    There is no timeout unless one is given.
    """
    cmd_str = " ".join(cmd)
    logger.debug(f"Running: {cmd_str}")

    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except FileNotFoundError as exc:
        raise ToolError(f"{cmd[0]} not found, is it installed and on PATH?") from exc
    except subprocess.TimeoutExpired as exc:
        raise ToolError(f"{cmd[0]} timed out after {timeout}s") from exc

    if result.stdout:
        logger.debug(f"stdout: {result.stdout[-500:]}")
    if result.stderr:
        logger.debug(f"stderr: {result.stderr[-500:]}")

    if result.returncode != 0:
        message = f"{cmd[0]} exited with status {result.returncode}"
        if result.stderr and result.stderr.strip():
            message += f": {result.stderr.strip()[-500:]}"
        raise ToolError(message)
    return result
