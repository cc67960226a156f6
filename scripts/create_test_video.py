"""Create a synthetic MP4 with ffmpeg's testsrc pattern for trying the player.

Usage:
    python scripts/create_test_video.py                       # 130 s clip at data/test.mp4
    python scripts/create_test_video.py -o /tmp/clip.mp4 -s 20
"""

from __future__ import annotations

from pathlib import Path

import typer

from slowmovie.utils.subprocess_utils import run_command

app = typer.Typer(add_completion=False)


def build_command(
    output_path: Path,
    seconds: int = 130,
    size: str = "640x360",
    fps: int = 30,
    ffmpeg: str = "ffmpeg",
) -> list[str]:
    """ffmpeg command that renders a numbered test pattern (the clock makes seeks easy to check)."""
    return [
        ffmpeg, "-y",
        "-v", "error",
        "-f", "lavfi",
        "-i", f"testsrc=duration={seconds}:size={size}:rate={fps}",
        "-pix_fmt", "yuv420p",
        str(output_path),
    ]


def create_video(output_path: Path, seconds: int = 130, size: str = "640x360", fps: int = 30) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    run_command(build_command(output_path, seconds, size, fps))
    return output_path


@app.command()
def main(
    output: Path = typer.Option(Path("data/test.mp4"), "-o", "--output", help="Output video path"),
    seconds: int = typer.Option(130, "-s", "--seconds", min=1, help="Clip length in seconds"),
    size: str = typer.Option("640x360", help="Frame size WxH"),
    fps: int = typer.Option(30, help="Frames per second"),
) -> None:
    path = create_video(output, seconds, size, fps)
    typer.echo(f"Created {path}: {seconds}s, {size} @ {fps}fps")


if __name__ == "__main__":
    app()
