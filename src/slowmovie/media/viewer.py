"""Frame viewers: a no-op default and an external image viewer command."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from slowmovie.core.errors import ToolError
from .base import FrameViewer

logger = logging.getLogger(__name__)


class NullViewer(FrameViewer):
    """Shows nothing. The frame file is still written for an outside viewer to pick up."""

    def show(self, image: Path) -> None:
        logger.debug(f"No viewer configured, leaving {image} on disk")


class CommandViewer(FrameViewer):
    """Launches e.g. ``feh -F <image>`` without waiting for it.

    Only one viewer process is kept alive: it is terminated before the
    next frame is shown and when the player closes.
    """

    def __init__(self, argv: list[str]):
        if not argv:
            raise ValueError("viewer command must not be empty")
        self.argv = list(argv)
        self._proc: subprocess.Popen | None = None

    def show(self, image: Path) -> None:
        self.close()
        cmd = [*self.argv, str(image)]
        logger.debug(f"Launching viewer: {' '.join(cmd)}")
        try:
            self._proc = subprocess.Popen(cmd, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
        except FileNotFoundError as exc:
            raise ToolError(f"{self.argv[0]} not found, is it installed and on PATH?") from exc

    def close(self) -> None:
        if self._proc is None:
            return
        if self._proc.poll() is None:
            self._proc.terminate()
            try:
                self._proc.wait(timeout=5)
            except subprocess.TimeoutExpired:
                self._proc.kill()
                self._proc.wait()
        self._proc = None
