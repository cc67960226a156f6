"""CLI entry point for the slow movie player.

Usage:
    slow-movie-player -m movie.mp4                  # one frame per second, 5 minutes each
    slow-movie-player -m movie.mp4 -f 10 -t 60 -o   # every 10s of film, 1 minute each, timestamped
"""

from __future__ import annotations

import importlib
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from typer.core import TyperCommand

from slowmovie.core.config import build_player_config, load_settings
from slowmovie.core.errors import ConfigError, ToolError
from slowmovie.core.logging import setup_logging
from slowmovie.media import build_media_tools
from slowmovie.utils.durations import render_hms

app = typer.Typer(name="slow-movie-player", help="Play a movie one still frame at a time", add_completion=False)
console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


# Newer typer releases bundle their own copy of click as typer._click, so the
# usage errors come from whichever click package TyperCommand is built on.
_click_package = TyperCommand.__bases__[0].__module__.rpartition(".")[0]
_click_exceptions = importlib.import_module(f"{_click_package}.exceptions")


class SlowMovieCommand(TyperCommand):
    """Reports unknown or malformed arguments with exit status 1.

    A help flag given before the offending token still prints help and
    exits 0.
    """

    def parse_args(self, ctx, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except _click_exceptions.UsageError as exc:
            if self._help_requested(ctx, args, getattr(exc, "option_name", None)):
                typer.echo(ctx.get_help(), color=ctx.color)
                ctx.exit()
            exc.exit_code = 1
            raise

    def _help_requested(self, ctx, args: list[str], bad_token: str | None) -> bool:
        takes_value = {
            opt for param in self.get_params(ctx) if not getattr(param, "is_flag", True) for opt in param.opts
        }
        tokens = iter(args)
        for token in tokens:
            if token == bad_token or token == "--":
                return False
            if token in ctx.help_option_names:
                return True
            if token in takes_value:
                next(tokens, None)
        return False



@app.command(cls=SlowMovieCommand, context_settings={"help_option_names": ["-h", "--help"]})
def play(
    movie_filename: str = typer.Option("", "-m", "--movie_filename", help="Name of the movie to play (required)"),
    time_delay: str = typer.Option(
        None, "-t", "--time_delay", help="Delay in seconds between showing frames (default: 300)"
    ),
    frame_interval: str = typer.Option(
        None, "-f", "--frame_interval", help="Frame extraction time in seconds (default: 1 second)"
    ),
    debug: bool = typer.Option(False, "-d", "--debug", help="Show debugging messages"),
    overlay_frame_num: bool = typer.Option(
        False, "-o", "--overlay_frame_num", help="Overlay the frame number on the displayed frames"
    ),
    config: Path = typer.Option(None, "--config", help="YAML settings file (default: configs/player.yaml if present)"),
) -> None:
    """Extract frames from a movie and display them with a delay between each frame."""
    setup_logging("DEBUG" if debug else "INFO")

    try:
        settings = load_settings(config)
        player_cfg = build_player_config(
            movie_filename,
            time_delay=time_delay,
            frame_interval=frame_interval,
            overlay_frame_num=overlay_frame_num,
            debug=debug,
            settings=settings,
        )
    except ConfigError as exc:
        err_console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(1)

    if player_cfg.debug:
        console.print("Debug messages will be displayed")
    console.print(f"Movie to be played: {escape(str(player_cfg.movie_filename))}")
    console.print(f"Frame interval is {player_cfg.frame_interval} seconds")
    console.print(
        f"Time delay between displaying frames will be {render_hms(player_cfg.frame_display_delay)}"
    )
    if player_cfg.overlay_frame_num:
        console.print("Frame numbers will be overlayed on the images")

    from slowmovie.core.player import SlowMoviePlayer

    player = SlowMoviePlayer(player_cfg, build_media_tools(player_cfg.tools), report=console.print)
    try:
        player.play()
    except ToolError as exc:
        err_console.print(f"[red]error: {escape(str(exc))}[/red]")
        raise typer.Exit(1)
    except KeyboardInterrupt:
        err_console.print("[yellow]Interrupted[/yellow]")
        raise typer.Exit(130)


if __name__ == "__main__":
    app()
