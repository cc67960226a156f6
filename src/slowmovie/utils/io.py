"""File helpers for the intermediate frame images."""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def remove_if_exists(path: Path) -> bool:
    """Remove a stale file. Returns False when nothing was removed.

    A path that cannot be removed (a directory, no permission) is logged and
    left for the tool that writes it next to report.
    """
    try:
        Path(path).unlink()
    except FileNotFoundError:
        return False
    except OSError as exc:
        logger.debug(f"Could not remove {path}: {exc}")
        return False
    logger.debug(f"Removed {path}")
    return True


def replace_file(src: Path, dst: Path) -> Path:
    """Move src over dst, overwriting dst."""
    os.replace(src, dst)
    return Path(dst)
