"""Rounded pentagon example."""

from __future__ import annotations

from regpoly.modeling.polygon import polygon_path


def build():
    return polygon_path(5, center_x=0.0, center_y=0.0, outer_radius=40.0, corner_radius=6.0)
