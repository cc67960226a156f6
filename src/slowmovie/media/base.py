"""Interfaces for the external media collaborators.

The player only talks to these four roles, so tests can swap in fakes
and users can swap in other tools:

    MediaProber     movie -> duration in seconds
    FrameExtractor  movie + HH:MM:SS -> one still image
    FrameAnnotator  image + text -> new image with the text burned in
    FrameViewer     image -> shown to the user
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class MediaProber(ABC):
    @abstractmethod
    def duration(self, movie: Path) -> float:
        """Return the media duration in (possibly fractional) seconds."""
        ...


class FrameExtractor(ABC):
    @abstractmethod
    def extract(self, movie: Path, seek_time: str, output: Path) -> Path:
        """Write the frame at seek_time to output and return output."""
        ...


class FrameAnnotator(ABC):
    @abstractmethod
    def annotate(self, image: Path, text: str, output: Path) -> Path:
        """Write a copy of image with text stamped on it to output."""
        ...


class FrameViewer(ABC):
    @abstractmethod
    def show(self, image: Path) -> None:
        """Display image; must not block for the display delay."""
        ...

    def close(self) -> None:
        """Release anything show() left open."""
