"""Shared pytest fixtures for slowmovie tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from slowmovie.core.contracts import PlayerConfig
from slowmovie.media import MediaTools
from tests.fakes import FakeAnnotator, FakeExtractor, FakeProber, FakeViewer


@pytest.fixture(autouse=True)
def work_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every test in its own directory so frame.jpg never lands in the repo."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def movie_file(tmp_path: Path) -> Path:
    path = tmp_path / "movie.mp4"
    path.write_bytes(b"\x00" * 16)
    return path


@pytest.fixture
def fake_tools() -> MediaTools:
    return MediaTools(
        prober=FakeProber(130.0),
        extractor=FakeExtractor(),
        annotator=FakeAnnotator(),
        viewer=FakeViewer(),
    )


@pytest.fixture
def player_config(movie_file: Path) -> PlayerConfig:
    return PlayerConfig(movie_filename=movie_file, frame_interval=10, frame_display_delay=300)
