"""A corner radius larger than the in-radius draws the inscribed circle."""

from __future__ import annotations

from regpoly.modeling.polygon import polygon_path


def build():
    return polygon_path(6, outer_radius=50.0, corner_radius=60.0)
