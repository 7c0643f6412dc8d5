from __future__ import annotations

"""Validated grid settings and their on-disk location.

Settings live in a per-user configuration directory resolved through
``platformdirs.user_config_dir``, falling back to a local ``./config``
folder when that directory cannot be created.  Files are written through
a temporary file and renamed into place.
"""

import logging
from enum import Enum
from pathlib import Path

from platformdirs import user_config_dir
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .geometry.coords import CoordinatePolicy
from .geometry.layout import Orientation, orientation_named
from .grid.enumeration import StrategyKind

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "settings.json"


def _compute_config_path() -> Path:
    """Return the settings file path, creating its directory if needed."""

    try:
        base = Path(user_config_dir("hexfield"))
        base.mkdir(parents=True, exist_ok=True)
        return base / CONFIG_FILENAME
    except OSError as error:
        logger.warning(f"Could not use user config dir ({error}); falling back to ./config")
        fallback_dir = Path("config")
        fallback_dir.mkdir(parents=True, exist_ok=True)
        return fallback_dir / CONFIG_FILENAME


CONFIG_PATH: Path = _compute_config_path()


class OrientationName(str, Enum):
    POINTY = "pointy"
    FLAT = "flat"


class GridSettings(BaseModel):
    """Adjustable parameters of the hex grid."""

    model_config = ConfigDict(extra="forbid")

    orientation: OrientationName = OrientationName.POINTY
    strategy: StrategyKind = StrategyKind.RADIUS
    hex_size: float = Field(default=50.0, gt=0.0)
    # ``None`` fits the radius to the viewport.
    radius: int | None = Field(default=None, ge=0)
    target_radius: int = Field(default=5, ge=0)
    fit_padding: float = Field(default=0.9, gt=0.0, le=1.0)
    margin: float = Field(default=2.0, ge=0.0)
    coordinate_policy: CoordinatePolicy = CoordinatePolicy.FORGIVING

    @property
    def orientation_matrix(self) -> Orientation:
        return orientation_named(self.orientation.value)


def load_settings(path: Path | None = None) -> GridSettings:
    """Load settings from disk, returning defaults if the file is missing or invalid."""

    path = path or CONFIG_PATH
    if not path.exists():
        return GridSettings()
    try:
        return GridSettings.model_validate_json(path.read_bytes())
    except (OSError, ValidationError) as error:
        logger.warning(f"Ignoring unreadable settings file '{path}': {error}")
        return GridSettings()


def save_settings(settings: GridSettings, path: Path | None = None) -> Path:
    """Persist ``settings`` atomically and return the path written."""

    path = path or CONFIG_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    temp_path = path.with_suffix(path.suffix + ".tmp")
    temp_path.write_text(settings.model_dump_json(indent=2), encoding="utf-8")
    temp_path.replace(path)
    logger.info(f"Saved settings to: {path}")
    return path
