"""Duration formatting: seconds to human-readable and seek-time strings."""

from __future__ import annotations


def _split_hms(seconds: int) -> tuple[int, int, int]:
    if seconds < 0:
        raise ValueError(f"seconds must be non-negative, got {seconds}")
    return seconds // 3600, (seconds % 3600) // 60, seconds % 60


def render_hms(seconds: int) -> str:
    """Render seconds as 'H hours M minutes S seconds' (all fields, always plural)."""
    h, m, s = _split_hms(seconds)
    return f"{h} hours {m} minutes {s} seconds"


def expand_seconds(seconds: int) -> str:
    """Render seconds as an ffmpeg seek position 'HH:MM:SS'.

    Hours are not wrapped into days, so 90061 -> '25:01:01'.
    """
    h, m, s = _split_hms(seconds)
    return f"{h:02d}:{m:02d}:{s:02d}"


def render_days_hours_mins_seconds(seconds: int) -> str:
    """Render seconds as e.g. '1 day, 1 hour, 5 minutes'.

    Zero-valued units are left out and parts are joined with ', ' only
    (no 'and' before the last part). Zero seconds renders as ''.
    """
    if seconds < 0:
        raise ValueError(f"seconds must be non-negative, got {seconds}")

    units = [
        (seconds // 86400, "day"),
        ((seconds // 3600) % 24, "hour"),
        ((seconds // 60) % 60, "minute"),
        (seconds % 60, "second"),
    ]
    parts = [f"{value} {word if value == 1 else word + 's'}" for value, word in units if value > 0]
    return ", ".join(parts)
