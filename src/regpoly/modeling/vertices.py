"""Vertex coordinates for regular polygons and radar-chart shapes.

Angles start on the positive x-axis and increase counterclockwise in the
mathematical (y-up) convention. On a y-down surface the same points read
clockwise.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from regpoly.validation import (
    ValidationError,
    require_finite,
    require_non_negative,
    require_side_count,
)


def _corner_angles(side_count: int) -> np.ndarray:
    step = 360.0 / side_count
    return np.deg2rad(np.arange(side_count) * step)


def _center_vec(center: Sequence[float]) -> np.ndarray:
    try:
        cx, cy = center
    except (TypeError, ValueError) as exc:
        raise ValidationError("center must be a 2D coordinate.") from exc
    return np.array([require_finite(cx, "center x"), require_finite(cy, "center y")])


def effective_radius(
    side_count: int,
    radius: float,
    corner_radius: float,
    *,
    truncate: bool = True,
) -> float:
    """Distance from the center to a vertex once its corner has been rounded.

    With ``truncate`` the value is cut toward zero to a whole number, which is
    what existing chart layouts were tuned against.
    """
    side_count = require_side_count(side_count)
    radius = require_non_negative(radius, "radius")
    corner_radius = require_non_negative(corner_radius, "corner_radius")

    half_corner_angle = 90.0 - (360.0 / side_count) / 2.0
    value = radius - (corner_radius / math.sin(math.radians(half_corner_angle)) - corner_radius)
    if truncate:
        return float(math.trunc(value))
    return value


def compute_regular_vertices(
    side_count: int,
    radius: float,
    corner_radius: float = 0.0,
    *,
    center: Sequence[float] = (0.0, 0.0),
    truncate_radius: bool = True,
) -> np.ndarray:
    """Return the ``(side_count, 2)`` vertices of a regular polygon.

    The radius is first reduced by :func:`effective_radius` so the points sit
    where the rounded corners actually reach.
    """
    real_radius = effective_radius(side_count, radius, corner_radius, truncate=truncate_radius)
    origin = _center_vec(center)
    angles = _corner_angles(int(side_count))
    points = np.column_stack([np.cos(angles), np.sin(angles)]) * real_radius
    return points + origin


def compute_weighted_vertices(
    dim_percentages: Sequence[float],
    radius_max: float,
    side_count: int,
    *,
    center: Sequence[float] = (0.0, 0.0),
) -> np.ndarray:
    """Return radar-chart vertices, each at its own fraction of ``radius_max``."""
    side_count = require_side_count(side_count)
    radius_max = require_non_negative(radius_max, "radius_max")
    try:
        fractions = np.asarray(list(dim_percentages), dtype=float)
    except (TypeError, ValueError) as exc:
        raise ValidationError("dim_percentages must be a flat sequence of numbers.") from exc
    if fractions.ndim != 1:
        raise ValidationError("dim_percentages must be a flat sequence of numbers.")
    if fractions.shape[0] != side_count:
        raise ValidationError(
            f"dim_percentages length must equal side_count ({fractions.shape[0]} != {side_count})."
        )
    if not np.all(np.isfinite(fractions)):
        raise ValidationError("dim_percentages must be finite.")
    origin = _center_vec(center)
    angles = _corner_angles(side_count)
    radii = fractions * radius_max
    points = np.column_stack([radii * np.cos(angles), radii * np.sin(angles)])
    return points + origin


__all__ = [
    "compute_regular_vertices",
    "compute_weighted_vertices",
    "effective_radius",
]
