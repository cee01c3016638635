from __future__ import annotations

import importlib
import os
from pathlib import Path

import numpy as np

from regpoly.modeling._color import normalize_paint_color
from regpoly.modeling.drawing2d import Path2D


class PreviewBackendError(RuntimeError):
    """Raised when a preview backend cannot run."""


def _load_pyvista():
    try:
        return importlib.import_module("pyvista")
    except ImportError as exc:  # pragma: no cover - pyvista is a hard dependency
        raise PreviewBackendError("PyVista is required for previews.") from exc


def path_to_pyvista(path: Path2D, segments_per_circle: int = 64, z: float = 0.0):
    """Convert a sampled outline into a PyVista polyline in the z plane."""
    pv = _load_pyvista()
    pts = path.sample(segments_per_circle=segments_per_circle)
    if pts.shape[0] < 2:
        raise PreviewBackendError("Path does not contain enough points to preview.")
    pts3 = np.column_stack([pts, np.full((pts.shape[0], 1), float(z))])
    n_pts = pts3.shape[0]
    lines = np.hstack(([n_pts], np.arange(n_pts)))
    return pv.PolyData(pts3, lines=lines)


def show_path(
    path: Path2D,
    color: str = "#1f2937",
    segments_per_circle: int = 64,
    screenshot_path: Path | None = None,
    line_width: float = 2.0,
) -> None:
    """Open a top-down preview of ``path``, or save a screenshot off-screen."""
    pv = _load_pyvista()
    outline = path_to_pyvista(path, segments_per_circle=segments_per_circle)
    rgba = normalize_paint_color(color)
    rgb = rgba[0] if rgba is not None else (0.0, 0.0, 0.0)

    off_screen = screenshot_path is not None or os.environ.get("PYVISTA_OFF_SCREEN", "").lower() == "true"
    try:
        plotter = pv.Plotter(off_screen=off_screen)
        plotter.add_mesh(outline, color=rgb, line_width=line_width)
        plotter.view_xy()
        if screenshot_path is not None:
            plotter.show(screenshot=str(screenshot_path), auto_close=True)
        else:
            plotter.show()
    except Exception as exc:  # pragma: no cover - depends on the display backend
        raise PreviewBackendError(f"Unable to open preview: {exc}") from exc
