"""Modeling utilities: 2D segments, path sinks, polygon outlines and vertices."""

from __future__ import annotations

from .drawing2d import Arc2D, Direction, Line2D, Path2D, PathBuilder, PathSink, Rect2D
from .polygon import PolygonSpec, construct_polygon_path, draw_polygon, polygon_path
from .vertices import compute_regular_vertices, compute_weighted_vertices, effective_radius

__all__ = [
    "Arc2D",
    "Direction",
    "Line2D",
    "Path2D",
    "PathBuilder",
    "PathSink",
    "Rect2D",
    "PolygonSpec",
    "construct_polygon_path",
    "draw_polygon",
    "polygon_path",
    "compute_regular_vertices",
    "compute_weighted_vertices",
    "effective_radius",
]
