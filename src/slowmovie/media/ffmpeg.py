"""ffprobe/ffmpeg collaborators: duration probing and single-frame extraction."""

from __future__ import annotations

import logging
from pathlib import Path

from slowmovie.core.errors import ToolError
from slowmovie.utils.subprocess_utils import run_command
from .base import FrameExtractor, MediaProber

logger = logging.getLogger(__name__)


class FFprobeProber(MediaProber):
    """Reads the duration of the first video stream with ffprobe."""

    def __init__(self, executable: str = "ffprobe"):
        self.executable = executable

    def command(self, movie: Path) -> list[str]:
        return [
            self.executable,
            "-v", "error",
            "-select_streams", "v:0",
            "-show_entries", "stream=duration",
            "-of", "default=noprint_wrappers=1:nokey=1",
            str(movie),
        ]

    def duration(self, movie: Path) -> float:
        result = run_command(self.command(movie))
        output = result.stdout.strip()
        try:
            return float(output.splitlines()[0])
        except (IndexError, ValueError) as exc:
            raise ToolError(f"could not read a duration for '{movie}' from ffprobe output: {output!r}") from exc


class FFmpegExtractor(FrameExtractor):
    """Grabs one frame at a seek position with ffmpeg."""

    def __init__(self, executable: str = "ffmpeg"):
        self.executable = executable

    def command(self, movie: Path, seek_time: str, output: Path) -> list[str]:
        return [
            self.executable,
            "-y",
            "-v", "error",
            "-ss", seek_time,
            "-i", str(movie),
            "-frames:v", "1",
            str(output),
        ]

    def extract(self, movie: Path, seek_time: str, output: Path) -> Path:
        # ffmpeg exits 0 without writing anything when seek_time is at or past the end
        run_command(self.command(movie, seek_time, output))
        return Path(output)
