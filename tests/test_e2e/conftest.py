"""Fixtures for CLI and real-tool end-to-end tests."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

import pytest

from slowmovie.utils.subprocess_utils import run_command


def create_synthetic_video(output_dir: Path, seconds: float = 3.4, size: str = "160x120", fps: int = 10) -> Path:
    """
    Render a short testsrc clip with ffmpeg.

    Args:
        output_dir: Directory to save the video
        seconds: Clip length
        size: Frame size as WxH
        fps: Frames per second

    Returns:
        Path to the created video file
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    video_path = output_dir / "synthetic_test_video.mp4"
    run_command([
        "ffmpeg", "-y", "-v", "error",
        "-f", "lavfi", "-i", f"testsrc=duration={seconds}:size={size}:rate={fps}",
        "-pix_fmt", "yuv420p",
        str(video_path),
    ])
    return video_path


@pytest.fixture
def synthetic_video(tmp_path: Path) -> Path:
    """A 3.4 second synthetic clip; skips when ffmpeg/ffprobe are not installed."""
    if not (shutil.which("ffmpeg") and shutil.which("ffprobe")):
        pytest.skip("ffmpeg/ffprobe not installed")
    return create_synthetic_video(tmp_path / "videos")


@pytest.fixture(autouse=True)
def restore_root_logging():
    """The CLI rebinds the root handler to the runner's stdout; put the old ones back."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
