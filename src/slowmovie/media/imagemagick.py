"""ImageMagick collaborator: stamps the seek time onto an extracted frame."""

from __future__ import annotations

from pathlib import Path

from slowmovie.core.contracts import OverlayStyle
from slowmovie.utils.subprocess_utils import run_command
from .base import FrameAnnotator


class ImageMagickAnnotator(FrameAnnotator):
    def __init__(self, executable: str = "convert", style: OverlayStyle | None = None):
        self.executable = executable
        self.style = style or OverlayStyle()

    def command(self, image: Path, text: str, output: Path) -> list[str]:
        s = self.style
        return [
            self.executable,
            str(image),
            "-fill", s.fill,
            "-pointsize", str(s.pointsize),
            "-gravity", s.gravity,
            "-draw", f"text {s.offset_x},{s.offset_y} '{text}'",
            str(output),
        ]

    def annotate(self, image: Path, text: str, output: Path) -> Path:
        run_command(self.command(image, text, output))
        return Path(output)
