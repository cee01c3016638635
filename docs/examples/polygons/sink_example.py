"""Fill a caller-owned builder and inspect its contour."""

from __future__ import annotations

from regpoly.modeling.drawing2d import PathBuilder
from regpoly.modeling.polygon import construct_polygon_path


def build():
    builder = PathBuilder()
    construct_polygon_path(builder, 3, 10.0, 10.0, 25.0, 0.0)
    return builder.to_path()
