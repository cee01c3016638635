from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

CONFIG_DIR_ENV = "REGPOLY_CONFIG_DIR"
CONFIG_FILE_NAME = "regpoly.cfg"
DEFAULT_CONFIG = {
    "_comment": "y_axis: down (screen, default) or up (math). Colours accept names, hex or RGB(A).",
    "y_axis": "down",
    "segments_per_circle": 64,
    "stroke": "#1f2937",
    "fill": "none",
    "stroke_width": 1.0,
}
_AXIS_ALIASES = {
    "down": "down",
    "screen": "down",
    "svg": "down",
    "up": "up",
    "math": "up",
    "mathematical": "up",
}


@dataclass(frozen=True)
class RenderSettings:
    """Resolved drawing defaults from regpoly.cfg."""

    y_axis: str
    segments_per_circle: int
    stroke: str
    fill: str
    stroke_width: float

    @property
    def flip_y(self) -> bool:
        return self.y_axis == "up"


def config_dir() -> Path:
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        return Path(override)
    return Path.home() / ".regpoly"


def config_file() -> Path:
    return config_dir() / CONFIG_FILE_NAME


def ensure_user_config() -> None:
    """Ensure regpoly.cfg exists with sane defaults."""

    try:
        config_dir().mkdir(parents=True, exist_ok=True)
    except OSError:
        return

    path = config_file()
    if path.exists():
        return

    try:
        path.write_text(json.dumps(DEFAULT_CONFIG, indent=2) + "\n")
    except OSError:
        return


def _load_user_config() -> Dict[str, Any]:
    ensure_user_config()
    try:
        loaded = json.loads(config_file().read_text())
    except (OSError, json.JSONDecodeError):
        return DEFAULT_CONFIG.copy()
    if not isinstance(loaded, dict):
        return DEFAULT_CONFIG.copy()
    return loaded


def _normalize_axis(value: str) -> str | None:
    return _AXIS_ALIASES.get(value.strip().lower())


def _coerce_segments(value: Any) -> int:
    try:
        segments = int(value)
    except (TypeError, ValueError):
        return DEFAULT_CONFIG["segments_per_circle"]
    if segments < 3:
        return DEFAULT_CONFIG["segments_per_circle"]
    return segments


def _coerce_width(value: Any) -> float:
    try:
        width = float(value)
    except (TypeError, ValueError):
        return DEFAULT_CONFIG["stroke_width"]
    if width < 0:
        return DEFAULT_CONFIG["stroke_width"]
    return width


def get_render_settings() -> RenderSettings:
    """Return the configured drawing defaults, repairing invalid entries."""

    raw_config = _load_user_config()
    axis = _normalize_axis(str(raw_config.get("y_axis", DEFAULT_CONFIG["y_axis"])))
    if axis is None:
        axis = DEFAULT_CONFIG["y_axis"]

    return RenderSettings(
        y_axis=axis,
        segments_per_circle=_coerce_segments(raw_config.get("segments_per_circle")),
        stroke=str(raw_config.get("stroke", DEFAULT_CONFIG["stroke"])),
        fill=str(raw_config.get("fill", DEFAULT_CONFIG["fill"])),
        stroke_width=_coerce_width(raw_config.get("stroke_width")),
    )
