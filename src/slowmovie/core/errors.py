"""Exceptions that end a run with a user-facing message."""


class ConfigError(ValueError):
    """Bad, missing or unknown arguments, or an invalid settings file."""


class ToolError(RuntimeError):
    """An external media tool is missing, failed, or returned unusable output."""
