from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np
import pyvista as pv

NO_COLOR = "none"

RGBA = Tuple[Tuple[float, float, float], float]


def _normalize_color(color: Sequence[float] | str) -> RGBA:
    if isinstance(color, str):
        col = pv.Color(color)
        rgb = tuple(col.float_rgb)
        alpha = 1.0
        return rgb, alpha

    arr = np.asarray(color, dtype=float).flatten()
    if arr.size not in (3, 4):
        raise ValueError("Color must be RGB or RGBA.")
    if arr.max() > 1.0:
        arr = arr / 255.0
    rgb = tuple(float(c) for c in arr[:3])
    alpha = float(arr[3]) if arr.size == 4 else 1.0
    return rgb, alpha


def normalize_paint_color(color: Sequence[float] | str | None) -> RGBA | None:
    """Return ``None`` for unpainted ("none") colours, else normalised RGB + alpha."""
    if color is None:
        return None
    if isinstance(color, str) and color.strip().lower() == NO_COLOR:
        return None
    return _normalize_color(color)


def to_hex(rgb: Sequence[float]) -> str:
    channels = [int(round(min(max(float(c), 0.0), 1.0) * 255)) for c in rgb]
    return "#{:02x}{:02x}{:02x}".format(*channels)
