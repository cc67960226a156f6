"""Tests for the ffmpeg/ImageMagick collaborators (subprocess calls mocked)."""

from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from slowmovie.core.contracts import OverlayStyle, ToolsConfig
from slowmovie.core.errors import ToolError
from slowmovie.media import (
    CommandViewer,
    FFmpegExtractor,
    FFprobeProber,
    ImageMagickAnnotator,
    NullViewer,
    build_media_tools,
)


def _completed(stdout: str = "") -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(args=[], returncode=0, stdout=stdout, stderr="")


class TestFFprobeProber:
    def test_command(self):
        cmd = FFprobeProber().command(Path("movies/test.mp4"))
        assert cmd == [
            "ffprobe", "-v", "error", "-select_streams", "v:0",
            "-show_entries", "stream=duration",
            "-of", "default=noprint_wrappers=1:nokey=1",
            "movies/test.mp4",
        ]

    def test_duration(self):
        with patch("slowmovie.media.ffmpeg.run_command", return_value=_completed("129.966667\n")) as run:
            assert FFprobeProber("/opt/ffprobe").duration(Path("m.mp4")) == pytest.approx(129.966667)
        assert run.call_args.args[0][0] == "/opt/ffprobe"

    @pytest.mark.parametrize("stdout", ["N/A\n", "", "\n"])
    def test_unusable_output(self, stdout):
        with patch("slowmovie.media.ffmpeg.run_command", return_value=_completed(stdout)):
            with pytest.raises(ToolError, match="could not read a duration"):
                FFprobeProber().duration(Path("m.mp4"))

    def test_tool_failure_propagates(self):
        with patch("slowmovie.media.ffmpeg.run_command", side_effect=ToolError("ffprobe not found")):
            with pytest.raises(ToolError, match="not found"):
                FFprobeProber().duration(Path("m.mp4"))


class TestFFmpegExtractor:
    def test_command(self):
        cmd = FFmpegExtractor().command(Path("m.mp4"), "00:01:05", Path("frame.jpg"))
        assert cmd == ["ffmpeg", "-y", "-v", "error", "-ss", "00:01:05", "-i", "m.mp4", "-frames:v", "1", "frame.jpg"]

    def test_extract(self, tmp_path: Path):
        output = tmp_path / "frame.jpg"

        def fake_run(cmd):
            output.write_bytes(b"jpg")
            return _completed()

        with patch("slowmovie.media.ffmpeg.run_command", side_effect=fake_run):
            assert FFmpegExtractor().extract(Path("m.mp4"), "00:00:01", output) == output

    def test_no_output_is_not_an_error(self, tmp_path: Path):
        with patch("slowmovie.media.ffmpeg.run_command", return_value=_completed()):
            output = FFmpegExtractor().extract(Path("m.mp4"), "10:00:00", tmp_path / "frame.jpg")
        assert not output.exists()


class TestImageMagickAnnotator:
    def test_default_command(self):
        cmd = ImageMagickAnnotator().command(Path("frame.jpg"), "00:02:10", Path("frame-with-overlay.jpg"))
        assert cmd == [
            "convert", "frame.jpg",
            "-fill", "khaki",
            "-pointsize", "60",
            "-gravity", "center",
            "-draw", "text 0,150 '00:02:10'",
            "frame-with-overlay.jpg",
        ]

    def test_custom_style(self):
        style = OverlayStyle(fill="white", pointsize=24, gravity="south", offset_x=5, offset_y=10)
        cmd = ImageMagickAnnotator("magick", style).command(Path("a.jpg"), "00:00:01", Path("b.jpg"))
        assert cmd[0] == "magick"
        assert cmd[cmd.index("-draw") + 1] == "text 5,10 '00:00:01'"
        assert cmd[cmd.index("-fill") + 1] == "white"

    def test_annotate_runs_command(self):
        with patch("slowmovie.media.imagemagick.run_command", return_value=_completed()) as run:
            out = ImageMagickAnnotator().annotate(Path("frame.jpg"), "00:00:01", Path("o.jpg"))
        assert out == Path("o.jpg")
        run.assert_called_once()


class TestViewers:
    def test_null_viewer(self, tmp_path: Path):
        viewer = NullViewer()
        viewer.show(tmp_path / "frame.jpg")
        viewer.close()

    def test_command_viewer_launches_and_replaces(self):
        procs = [Mock(), Mock()]
        for p in procs:
            p.poll.return_value = None
        with patch("slowmovie.media.viewer.subprocess.Popen", side_effect=procs) as popen:
            viewer = CommandViewer(["feh", "-F"])
            viewer.show(Path("frame.jpg"))
            viewer.show(Path("frame.jpg"))
            viewer.close()

        assert popen.call_args_list[0].args[0] == ["feh", "-F", "frame.jpg"]
        procs[0].terminate.assert_called_once()
        procs[1].terminate.assert_called_once()

    def test_command_viewer_exited_process_not_terminated(self):
        proc = Mock()
        proc.poll.return_value = 0
        with patch("slowmovie.media.viewer.subprocess.Popen", return_value=proc):
            viewer = CommandViewer(["feh"])
            viewer.show(Path("frame.jpg"))
            viewer.close()
        proc.terminate.assert_not_called()

    def test_missing_viewer(self):
        viewer = CommandViewer(["definitely-not-a-real-viewer-xyz"])
        with pytest.raises(ToolError, match="not found"):
            viewer.show(Path("frame.jpg"))

    def test_empty_command_rejected(self):
        with pytest.raises(ValueError):
            CommandViewer([])


class TestBuildMediaTools:
    def test_defaults(self):
        tools = build_media_tools(ToolsConfig())
        assert isinstance(tools.prober, FFprobeProber)
        assert isinstance(tools.extractor, FFmpegExtractor)
        assert isinstance(tools.annotator, ImageMagickAnnotator)
        assert isinstance(tools.viewer, NullViewer)

    def test_configured(self):
        cfg = ToolsConfig(ffprobe="/usr/local/bin/ffprobe", convert="magick", viewer=["feh", "-F"])
        tools = build_media_tools(cfg)
        assert tools.prober.executable == "/usr/local/bin/ffprobe"
        assert tools.annotator.executable == "magick"
        assert isinstance(tools.viewer, CommandViewer)
        assert tools.viewer.argv == ["feh", "-F"]
