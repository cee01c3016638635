"""regpoly – regular polygon outlines with rounded corners."""

from __future__ import annotations

from regpoly.modeling.drawing2d import Direction, Path2D, PathBuilder, Rect2D
from regpoly.modeling.polygon import PolygonSpec, construct_polygon_path, draw_polygon, polygon_path
from regpoly.modeling.vertices import compute_regular_vertices, compute_weighted_vertices
from regpoly.validation import ValidationError

__all__ = [
    "__version__",
    "Direction",
    "Path2D",
    "PathBuilder",
    "PolygonSpec",
    "Rect2D",
    "ValidationError",
    "compute_regular_vertices",
    "compute_weighted_vertices",
    "construct_polygon_path",
    "draw_polygon",
    "polygon_path",
]

__version__ = "0.1.0"
