"""Media collaborators: prober, extractor, annotator, viewer."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from slowmovie.core.contracts import ToolsConfig
from .base import FrameAnnotator, FrameExtractor, FrameViewer, MediaProber
from .ffmpeg import FFmpegExtractor, FFprobeProber
from .imagemagick import ImageMagickAnnotator
from .viewer import CommandViewer, NullViewer


class MediaTools(BaseModel):
    """The four collaborators one playback run uses."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    prober: MediaProber
    extractor: FrameExtractor
    annotator: FrameAnnotator
    viewer: FrameViewer


def build_media_tools(tools: ToolsConfig) -> MediaTools:
    """Wire the default ffmpeg/ImageMagick collaborators from ToolsConfig."""
    return MediaTools(
        prober=FFprobeProber(tools.ffprobe),
        extractor=FFmpegExtractor(tools.ffmpeg),
        annotator=ImageMagickAnnotator(tools.convert, tools.overlay),
        viewer=CommandViewer(tools.viewer) if tools.viewer else NullViewer(),
    )


__all__ = [
    "MediaProber",
    "FrameExtractor",
    "FrameAnnotator",
    "FrameViewer",
    "FFprobeProber",
    "FFmpegExtractor",
    "ImageMagickAnnotator",
    "CommandViewer",
    "NullViewer",
    "MediaTools",
    "build_media_tools",
]
