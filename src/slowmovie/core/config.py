"""Settings loading and argument validation.

Turns the raw CLI values (plus an optional YAML settings file) into one
immutable PlayerConfig, or raises ConfigError with the message to show.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .contracts import PlayerConfig, PlayerSettings
from .errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = Path("configs/player.yaml")

_DIGITS = re.compile(r"[0-9]+")


def load_settings(config_path: Path | None = None) -> PlayerSettings:
    """Load the YAML settings file into PlayerSettings.

    With no explicit path, configs/player.yaml is used if present and
    built-in defaults otherwise. An explicit path must exist.
    """
    if config_path is None:
        if not DEFAULT_SETTINGS_PATH.is_file():
            return PlayerSettings()
        config_path = DEFAULT_SETTINGS_PATH
    elif not config_path.is_file():
        raise ConfigError(f"error: settings file '{config_path}' does not exist")

    try:
        with open(config_path, encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"error: settings file '{config_path}' is not valid YAML: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError(f"error: settings file '{config_path}' must contain a mapping")
    try:
        settings = PlayerSettings(**raw)
    except ValidationError as exc:
        raise ConfigError(f"error: invalid settings in '{config_path}':\n{exc}") from exc

    logger.debug(f"Loaded settings from {config_path}")
    return settings


def parse_seconds(value: int | str | None, message: str) -> int:
    """Parse a positive whole number of seconds, raising ConfigError(message) otherwise."""
    text = "" if value is None else str(value)
    if not _DIGITS.fullmatch(text) or int(text) <= 0:
        raise ConfigError(message)
    return int(text)


def build_player_config(
    movie_filename: str | Path | None,
    time_delay: int | str | None = None,
    frame_interval: int | str | None = None,
    overlay_frame_num: bool = False,
    debug: bool = False,
    settings: PlayerSettings | None = None,
) -> PlayerConfig:
    """Validate raw argument values in order and build the PlayerConfig.

    CLI values win over the settings file; None means "not given".
    """
    settings = settings or PlayerSettings()

    if not movie_filename:
        raise ConfigError(
            "A movie file name is required, provide it the argument: "
            "-m movie_file_name or --movie_filename movie_file_name"
        )
    movie = Path(movie_filename)
    if not movie.is_file():
        raise ConfigError(f"error: movie file '{movie}' does not exist")

    delay = parse_seconds(
        settings.time_delay if time_delay is None else time_delay,
        "error: Delay between displaying frames must be a positive integer",
    )
    interval = parse_seconds(
        settings.frame_interval if frame_interval is None else frame_interval,
        "error: Frame interval must be a positive integer",
    )

    return PlayerConfig(
        movie_filename=movie,
        frame_interval=interval,
        frame_display_delay=delay,
        overlay_frame_num=overlay_frame_num or settings.overlay_frame_num,
        debug=debug,
        tools=settings.tools,
    )
