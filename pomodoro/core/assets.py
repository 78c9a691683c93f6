from __future__ import annotations

"""Resolution of files bundled in `pomodoro/assets/`."""

import logging
from pathlib import Path


logger = logging.getLogger(__name__)

ASSETS_DIR = Path(__file__).resolve().parents[1] / "assets"


def get_asset_path(relative: str) -> Path:
    """Converts a path relative to `assets/` into an absolute one."""
    return ASSETS_DIR / relative


def asset_exists(relative: str) -> bool:
    return get_asset_path(relative).exists()


def existing_file(path: Path) -> Path | None:
    """Returns `path` if it points to a file, otherwise logs and returns `None`."""
    if path.is_file():
        return path
    logger.warning("Asset not found: %s", path)
    return None
