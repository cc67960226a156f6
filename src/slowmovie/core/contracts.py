"""Pydantic models for the player configuration and its run summary."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class OverlayStyle(BaseModel):
    """ImageMagick text settings used to stamp the seek time on a frame."""

    fill: str = "khaki"
    pointsize: int = Field(60, gt=0)
    gravity: str = "center"
    offset_x: int = 0
    offset_y: int = 150


class ToolsConfig(BaseModel):
    """External executables and the intermediate image files they share."""

    ffprobe: str = "ffprobe"
    ffmpeg: str = "ffmpeg"
    convert: str = "convert"
    viewer: list[str] | None = Field(None, description="Viewer argv, e.g. ['feh', '-F']; None = no display")
    work_dir: Path = Path(".")
    frame_name: str = "frame.jpg"
    overlay_name: str = "frame-with-overlay.jpg"
    overlay: OverlayStyle = Field(default_factory=OverlayStyle)

    @property
    def frame_path(self) -> Path:
        return self.work_dir / self.frame_name

    @property
    def overlay_path(self) -> Path:
        return self.work_dir / self.overlay_name


class PlayerSettings(BaseModel):
    """Defaults loaded from the optional YAML settings file."""

    frame_interval: int | str = 1
    time_delay: int | str = 300
    overlay_frame_num: bool = False
    tools: ToolsConfig = Field(default_factory=ToolsConfig)


class PlayerConfig(BaseModel):
    """Resolved, validated configuration for one playback run."""

    model_config = ConfigDict(frozen=True)

    movie_filename: Path
    frame_interval: int = Field(1, gt=0)
    frame_display_delay: int = Field(300, gt=0)
    overlay_frame_num: bool = False
    debug: bool = False
    tools: ToolsConfig = Field(default_factory=ToolsConfig)


class PlaybackSummary(BaseModel):
    """What a finished run did."""

    movie: Path
    runtime: int
    slow_runtime: int
    frames_shown: int = 0
    seek_times: list[str] = Field(default_factory=list)
    elapsed_seconds: float = 0.0
