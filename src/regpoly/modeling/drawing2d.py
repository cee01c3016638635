from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Protocol, Sequence

import numpy as np

FULL_TURN_DEG = 360.0
# Absolute distance under which two points are the same point.
POINT_TOLERANCE = 1e-9


def _require_vec2(value: Sequence[float], label: str) -> np.ndarray:
    try:
        arr = np.asarray(value, dtype=float).reshape(2)
    except Exception as exc:
        raise ValueError(f"{label} must be a 2D coordinate.") from exc
    if not np.all(np.isfinite(arr)):
        raise ValueError(f"{label} must be finite.")
    return arr


def _same_point(a: np.ndarray, b: np.ndarray) -> bool:
    return bool(np.allclose(a, b, rtol=0.0, atol=POINT_TOLERANCE))


class Direction(Enum):
    """Traversal direction for closed contours.

    Named for a y-down drawing surface: ``CW`` sweeps toward increasing
    angles, the same way polygon corners are emitted.
    """

    CW = "cw"
    CCW = "ccw"

    @property
    def sign(self) -> float:
        return 1.0 if self is Direction.CW else -1.0


@dataclass(frozen=True)
class Rect2D:
    """Axis-aligned bounds. ``top`` is the smaller y, as on a y-down surface."""

    left: float
    top: float
    right: float
    bottom: float

    def __post_init__(self) -> None:
        for name in ("left", "top", "right", "bottom"):
            value = float(getattr(self, name))
            if not math.isfinite(value):
                raise ValueError(f"{name} must be finite.")
            object.__setattr__(self, name, value)
        if self.right < self.left or self.bottom < self.top:
            raise ValueError("Rect2D must not be inverted.")

    @classmethod
    def around(cls, cx: float, cy: float, radius: float) -> "Rect2D":
        return cls(cx - radius, cy - radius, cx + radius, cy + radius)

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def center(self) -> np.ndarray:
        return np.array([(self.left + self.right) / 2.0, (self.top + self.bottom) / 2.0])

    def is_square(self) -> bool:
        return bool(np.isclose(self.width, self.height))

    def union(self, other: "Rect2D") -> "Rect2D":
        return Rect2D(
            min(self.left, other.left),
            min(self.top, other.top),
            max(self.right, other.right),
            max(self.bottom, other.bottom),
        )


@dataclass(frozen=True, eq=False)
class Line2D:
    start: np.ndarray
    end: np.ndarray

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", _require_vec2(self.start, "start"))
        object.__setattr__(self, "end", _require_vec2(self.end, "end"))

    @property
    def start_point(self) -> np.ndarray:
        return self.start

    @property
    def end_point(self) -> np.ndarray:
        return self.end

    def bounds(self) -> Rect2D:
        lo = np.minimum(self.start, self.end)
        hi = np.maximum(self.start, self.end)
        return Rect2D(lo[0], lo[1], hi[0], hi[1])

    def translated(self, offset: Sequence[float]) -> "Line2D":
        vec = _require_vec2(offset, "offset")
        return Line2D(self.start + vec, self.end + vec)

    def sample(self) -> np.ndarray:
        return np.vstack([self.start, self.end])


@dataclass(frozen=True, eq=False)
class Arc2D:
    """Circular arc from ``start_angle_deg`` through a signed ``sweep_angle_deg``."""

    center: np.ndarray
    radius: float
    start_angle_deg: float
    sweep_angle_deg: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "center", _require_vec2(self.center, "center"))
        if not np.isfinite(self.radius) or self.radius <= 0:
            raise ValueError("radius must be positive.")
        if not np.isfinite(self.start_angle_deg) or not np.isfinite(self.sweep_angle_deg):
            raise ValueError("arc angles must be finite.")
        object.__setattr__(self, "radius", float(self.radius))
        object.__setattr__(self, "start_angle_deg", float(self.start_angle_deg))
        object.__setattr__(self, "sweep_angle_deg", float(self.sweep_angle_deg))

    @property
    def end_angle_deg(self) -> float:
        return self.start_angle_deg + self.sweep_angle_deg

    @property
    def is_full_circle(self) -> bool:
        return abs(self.sweep_angle_deg) >= FULL_TURN_DEG - 1e-9

    def point_at(self, angle_deg: float) -> np.ndarray:
        angle = np.deg2rad(angle_deg)
        return self.center + self.radius * np.array([np.cos(angle), np.sin(angle)])

    @property
    def start_point(self) -> np.ndarray:
        return self.point_at(self.start_angle_deg)

    @property
    def end_point(self) -> np.ndarray:
        return self.point_at(self.end_angle_deg)

    def bounds(self) -> Rect2D:
        lo, hi = sorted((self.start_angle_deg, self.end_angle_deg))
        angles = [lo, hi]
        # Axis extremes crossed by the sweep.
        quarter = math.ceil(lo / 90.0) * 90.0
        while quarter < hi:
            angles.append(quarter)
            quarter += 90.0
        pts = np.array([self.point_at(a) for a in angles])
        mins = pts.min(axis=0)
        maxs = pts.max(axis=0)
        return Rect2D(mins[0], mins[1], maxs[0], maxs[1])

    def translated(self, offset: Sequence[float]) -> "Arc2D":
        vec = _require_vec2(offset, "offset")
        return Arc2D(self.center + vec, self.radius, self.start_angle_deg, self.sweep_angle_deg)

    def sample(self, segments_per_circle: int) -> np.ndarray:
        if segments_per_circle < 3:
            raise ValueError("segments_per_circle must be >= 3.")
        start = np.deg2rad(self.start_angle_deg)
        end = np.deg2rad(self.end_angle_deg)
        span = abs(end - start)
        steps = max(int(np.ceil(segments_per_circle * (span / (2 * np.pi)))), 2)
        angles = np.linspace(start, end, steps, endpoint=True)
        x = self.center[0] + self.radius * np.cos(angles)
        y = self.center[1] + self.radius * np.sin(angles)
        return np.column_stack([x, y])


Segment2D = Line2D | Arc2D


@dataclass
class Path2D:
    """A single contour of line and arc segments."""

    segments: List[Segment2D] = field(default_factory=list)
    closed: bool = False

    @property
    def start_point(self) -> np.ndarray:
        if not self.segments:
            raise ValueError("Path2D is empty.")
        return self.segments[0].start_point

    @property
    def end_point(self) -> np.ndarray:
        if not self.segments:
            raise ValueError("Path2D is empty.")
        return self.segments[-1].end_point

    def anchor_points(self) -> np.ndarray:
        """Return the start point of every segment, in path order."""
        if not self.segments:
            return np.zeros((0, 2), dtype=float)
        return np.vstack([seg.start_point for seg in self.segments])

    def arcs(self) -> list[Arc2D]:
        return [seg for seg in self.segments if isinstance(seg, Arc2D)]

    def lines(self) -> list[Line2D]:
        return [seg for seg in self.segments if isinstance(seg, Line2D)]

    def bounds(self) -> Rect2D:
        if not self.segments:
            raise ValueError("Path2D is empty.")
        rect = self.segments[0].bounds()
        for segment in self.segments[1:]:
            rect = rect.union(segment.bounds())
        return rect

    def translated(self, offset: Sequence[float]) -> "Path2D":
        return Path2D(segments=[seg.translated(offset) for seg in self.segments], closed=self.closed)

    def sample(self, segments_per_circle: int = 64) -> np.ndarray:
        if not self.segments:
            return np.zeros((0, 2), dtype=float)
        points = []
        for idx, segment in enumerate(self.segments):
            if isinstance(segment, Line2D):
                seg_points = segment.sample()
            else:
                seg_points = segment.sample(segments_per_circle)
            if idx > 0 and seg_points.shape[0] > 0:
                seg_points = seg_points[1:]
            points.append(seg_points)
        pts = np.vstack(points)
        if self.closed and pts.shape[0] > 0 and not _same_point(pts[0], pts[-1]):
            pts = np.vstack([pts, pts[0]])
        return pts

    def contains(self, point: Sequence[float], segments_per_circle: int = 64) -> bool:
        """Ray-casting hit test against the sampled outline of a closed path."""
        if not self.closed:
            raise ValueError("contains requires a closed path.")
        x, y = _require_vec2(point, "point")
        pts = self.sample(segments_per_circle=segments_per_circle)
        if pts.shape[0] < 3:
            return False
        xi, yi = pts[:-1, 0], pts[:-1, 1]
        xj, yj = pts[1:, 0], pts[1:, 1]
        straddles = (yi > y) != (yj > y)
        with np.errstate(divide="ignore", invalid="ignore"):
            cross_x = (xj - xi) * (y - yi) / (yj - yi) + xi
        hits = straddles & (x < cross_x)
        return bool(np.count_nonzero(hits) % 2)


class PathSink(Protocol):
    """Append-only receiver of path primitives."""

    def reset(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def arc_to(self, bounds: Rect2D, start_angle_deg: float, sweep_angle_deg: float) -> None: ...

    def add_circle(self, cx: float, cy: float, radius: float, direction: Direction = Direction.CW) -> None: ...

    def close(self) -> None: ...


class PathBuilder:
    """Record path primitives into ``Path2D`` contours.

    ``arc_to`` connects to the arc start with a straight line when the current
    point is elsewhere, or moves there when nothing has been drawn yet.
    """

    def __init__(self) -> None:
        self._contours: list[Path2D] = []
        self._start: np.ndarray | None = None
        self._current: np.ndarray | None = None

    @property
    def contours(self) -> list[Path2D]:
        return [c for c in self._contours if c.segments]

    @property
    def is_empty(self) -> bool:
        return not self.contours

    @property
    def current_point(self) -> np.ndarray | None:
        return None if self._current is None else self._current.copy()

    def reset(self) -> None:
        self._contours = []
        self._start = None
        self._current = None

    def move_to(self, x: float, y: float) -> None:
        point = _require_vec2((x, y), "point")
        if not self._contours or self._contours[-1].closed or self._contours[-1].segments:
            self._contours.append(Path2D())
        self._start = point
        self._current = point

    def line_to(self, x: float, y: float) -> None:
        point = _require_vec2((x, y), "point")
        if self._current is None:
            self.move_to(*point)
            return
        self._open_contour().segments.append(Line2D(self._current, point))
        self._current = point

    def arc_to(self, bounds: Rect2D, start_angle_deg: float, sweep_angle_deg: float) -> None:
        if not bounds.is_square():
            raise ValueError("arc bounds must be square; only circular arcs are supported.")
        arc = Arc2D(
            center=bounds.center,
            radius=bounds.width / 2.0,
            start_angle_deg=start_angle_deg,
            sweep_angle_deg=sweep_angle_deg,
        )
        start = arc.start_point
        if self._current is None:
            self.move_to(*start)
        elif not _same_point(self._current, start):
            self.line_to(*start)
        self._open_contour().segments.append(arc)
        self._current = arc.end_point

    def add_circle(self, cx: float, cy: float, radius: float, direction: Direction = Direction.CW) -> None:
        arc = Arc2D(
            center=(cx, cy),
            radius=radius,
            start_angle_deg=0.0,
            sweep_angle_deg=direction.sign * FULL_TURN_DEG,
        )
        self._contours.append(Path2D(segments=[arc], closed=True))
        self._start = None
        self._current = None

    def close(self) -> None:
        if self._current is None or self._start is None:
            return
        contour = self._open_contour()
        if not _same_point(self._current, self._start):
            contour.segments.append(Line2D(self._current, self._start))
        contour.closed = True
        self._current = None

    def to_path(self) -> Path2D:
        contours = self.contours
        if len(contours) != 1:
            raise ValueError(f"expected a single contour, found {len(contours)}.")
        return contours[0]

    def _open_contour(self) -> Path2D:
        if not self._contours or self._contours[-1].closed:
            self._contours.append(Path2D())
        return self._contours[-1]


__all__ = [
    "Arc2D",
    "Direction",
    "Line2D",
    "Path2D",
    "PathBuilder",
    "PathSink",
    "Rect2D",
    "Segment2D",
]
