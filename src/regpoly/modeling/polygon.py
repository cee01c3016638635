"""Outline construction for regular polygons with optional rounded corners."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Protocol

from regpoly.modeling.drawing2d import Direction, Path2D, PathBuilder, PathSink, Rect2D
from regpoly.validation import (
    require_finite,
    require_non_negative,
    require_positive,
    require_side_count,
)

# Corner radii below this draw sharp corners.
CORNER_EPSILON = 0.01


@dataclass(frozen=True)
class PolygonSpec:
    side_count: int
    center_x: float
    center_y: float
    outer_radius: float
    corner_radius: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "side_count", require_side_count(self.side_count))
        object.__setattr__(self, "center_x", require_finite(self.center_x, "center_x"))
        object.__setattr__(self, "center_y", require_finite(self.center_y, "center_y"))
        object.__setattr__(self, "outer_radius", require_positive(self.outer_radius, "outer_radius"))
        object.__setattr__(self, "corner_radius", require_non_negative(self.corner_radius, "corner_radius"))

    @property
    def in_radius(self) -> float:
        """Radius of the inscribed circle."""
        return self.outer_radius * math.cos(math.pi / self.side_count)

    @property
    def corner_step_deg(self) -> float:
        return 360.0 / self.side_count

    def corner_angle_deg(self, corner_number: int) -> float:
        return corner_number * self.corner_step_deg

    @property
    def falls_back_to_circle(self) -> bool:
        return self.in_radius < self.corner_radius

    @property
    def is_sharp(self) -> bool:
        return abs(self.corner_radius) < CORNER_EPSILON


class DrawingSurface(Protocol):
    def draw_path(self, path: Path2D, paint: Any) -> None: ...


def construct_polygon_path(
    sink: PathSink,
    side_count: int,
    center_x: float,
    center_y: float,
    outer_radius: float,
    corner_radius: float,
) -> None:
    """Reset ``sink`` and fill it with a regular polygon outline.

    When ``corner_radius`` exceeds the inscribed radius the corners cannot be
    rounded, and the inscribed circle is emitted instead.
    """
    spec = PolygonSpec(side_count, center_x, center_y, outer_radius, corner_radius)
    sink.reset()
    if spec.falls_back_to_circle:
        sink.add_circle(spec.center_x, spec.center_y, spec.in_radius, Direction.CW)
    elif spec.is_sharp:
        _append_sharp_polygon(sink, spec)
    else:
        _append_rounded_polygon(sink, spec)


def _append_sharp_polygon(sink: PathSink, spec: PolygonSpec) -> None:
    for index in range(spec.side_count):
        angle = math.radians(spec.corner_angle_deg(index))
        x = spec.center_x + spec.outer_radius * math.cos(angle)
        y = spec.center_y + spec.outer_radius * math.sin(angle)
        if index == 0:
            sink.move_to(x, y)
        else:
            sink.line_to(x, y)
    sink.close()


def _append_rounded_polygon(sink: PathSink, spec: PolygonSpec) -> None:
    half_interior_corner_angle = 90.0 - 180.0 / spec.side_count
    half_arc_sweep = 90.0 - half_interior_corner_angle
    distance_to_arc_center = spec.outer_radius - spec.corner_radius / math.sin(
        math.radians(half_interior_corner_angle)
    )

    for corner_number in range(spec.side_count):
        angle_to_corner = spec.corner_angle_deg(corner_number)
        angle = math.radians(angle_to_corner)
        arc_cx = spec.center_x + distance_to_arc_center * math.cos(angle)
        arc_cy = spec.center_y + distance_to_arc_center * math.sin(angle)
        # The sink draws the straight edge from the previous arc's end.
        sink.arc_to(
            Rect2D.around(arc_cx, arc_cy, spec.corner_radius),
            angle_to_corner - half_arc_sweep,
            2 * half_arc_sweep,
        )

    # Final straight edge back to the first arc.
    sink.close()


def polygon_path(
    side_count: int,
    center_x: float = 0.0,
    center_y: float = 0.0,
    outer_radius: float = 1.0,
    corner_radius: float = 0.0,
) -> Path2D:
    """Build the outline into a fresh builder and return its contour."""
    builder = PathBuilder()
    construct_polygon_path(builder, side_count, center_x, center_y, outer_radius, corner_radius)
    return builder.to_path()


def draw_polygon(
    surface: DrawingSurface,
    side_count: int,
    center_x: float,
    center_y: float,
    radius: float,
    corner_radius: float,
    paint: Any,
) -> Path2D:
    path = polygon_path(side_count, center_x, center_y, radius, corner_radius)
    surface.draw_path(path, paint)
    return path


__all__ = [
    "CORNER_EPSILON",
    "DrawingSurface",
    "PolygonSpec",
    "construct_polygon_path",
    "draw_polygon",
    "polygon_path",
]
