"""slowmovie core: configuration, validation, logging, shared contracts."""

from .contracts import OverlayStyle, PlaybackSummary, PlayerConfig, PlayerSettings, ToolsConfig
from .config import build_player_config, load_settings
from .errors import ConfigError, ToolError
from .logging import setup_logging

__all__ = [
    "OverlayStyle",
    "PlaybackSummary",
    "PlayerConfig",
    "PlayerSettings",
    "ToolsConfig",
    "build_player_config",
    "load_settings",
    "ConfigError",
    "ToolError",
    "setup_logging",
]
