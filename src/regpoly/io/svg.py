from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence
from xml.sax.saxutils import quoteattr

import numpy as np

from regpoly.modeling._color import RGBA, normalize_paint_color, to_hex
from regpoly.modeling.drawing2d import Arc2D, Line2D, Path2D, Rect2D

_Y_AXES = ("down", "up")


def _fmt(value: float) -> str:
    text = f"{float(value):.4f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


@dataclass(frozen=True)
class Paint:
    """Fill and stroke style handed to a drawing surface."""

    fill: Sequence[float] | str | None = "none"
    stroke: Sequence[float] | str | None = "#000000"
    stroke_width: float = 1.0
    fill_rgba: RGBA | None = field(init=False, repr=False, compare=False)
    stroke_rgba: RGBA | None = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not np.isfinite(self.stroke_width) or self.stroke_width < 0:
            raise ValueError("stroke_width must be >= 0.")
        object.__setattr__(self, "fill_rgba", normalize_paint_color(self.fill))
        object.__setattr__(self, "stroke_rgba", normalize_paint_color(self.stroke))

    def svg_attributes(self) -> dict[str, str]:
        attrs: dict[str, str] = {}
        for name, rgba in (("fill", self.fill_rgba), ("stroke", self.stroke_rgba)):
            if rgba is None:
                attrs[name] = "none"
                continue
            rgb, alpha = rgba
            attrs[name] = to_hex(rgb)
            if alpha < 1.0:
                attrs[f"{name}-opacity"] = _fmt(alpha)
        if self.stroke_rgba is not None:
            attrs["stroke-width"] = _fmt(self.stroke_width)
        return attrs


def _arc_commands(arc: Arc2D, flip_y: bool) -> list[str]:
    sign = -1.0 if flip_y else 1.0
    if arc.is_full_circle:
        # A single SVG arc cannot close on itself.
        half = arc.sweep_angle_deg / 2.0
        pieces = [
            Arc2D(arc.center, arc.radius, arc.start_angle_deg, half),
            Arc2D(arc.center, arc.radius, arc.start_angle_deg + half, half),
        ]
    else:
        pieces = [arc]
    commands = []
    for piece in pieces:
        end = piece.end_point
        large_arc = 1 if abs(piece.sweep_angle_deg) > 180.0 else 0
        increasing = piece.sweep_angle_deg > 0
        sweep_flag = 1 if increasing != flip_y else 0
        r = _fmt(piece.radius)
        commands.append(f"A {r} {r} 0 {large_arc} {sweep_flag} {_fmt(end[0])} {_fmt(sign * end[1])}")
    return commands


def path_to_svg_d(path: Path2D, flip_y: bool = False) -> str:
    """Return SVG path data (M/L/A/Z) for a contour."""
    if not path.segments:
        return ""
    sign = -1.0 if flip_y else 1.0
    start = path.start_point
    parts = [f"M {_fmt(start[0])} {_fmt(sign * start[1])}"]
    segments = list(path.segments)
    if path.closed and isinstance(segments[-1], Line2D) and len(segments) > 1:
        # Z draws the closing edge.
        segments = segments[:-1]
    for segment in segments:
        if isinstance(segment, Line2D):
            parts.append(f"L {_fmt(segment.end[0])} {_fmt(sign * segment.end[1])}")
        else:
            parts.extend(_arc_commands(segment, flip_y))
    if path.closed:
        parts.append("Z")
    return " ".join(parts)


class SvgCanvas:
    """Collect painted paths and serialise them as an SVG document."""

    def __init__(self, y_axis: str = "down", margin: float = 4.0):
        if y_axis not in _Y_AXES:
            raise ValueError(f"y_axis must be one of {_Y_AXES}.")
        if not np.isfinite(margin) or margin < 0:
            raise ValueError("margin must be >= 0.")
        self.y_axis = y_axis
        self.margin = float(margin)
        self._items: list[tuple[Path2D, Paint]] = []

    @property
    def flip_y(self) -> bool:
        return self.y_axis == "up"

    def __len__(self) -> int:
        return len(self._items)

    def draw_path(self, path: Path2D, paint: Paint) -> None:
        if not path.segments:
            raise ValueError("Cannot draw an empty path.")
        self._items.append((path, paint))

    def view_box(self) -> Rect2D:
        if not self._items:
            return Rect2D(0.0, 0.0, 0.0, 0.0)
        rect = self._items[0][0].bounds()
        for path, _ in self._items[1:]:
            rect = rect.union(path.bounds())
        if self.flip_y:
            rect = Rect2D(rect.left, -rect.bottom, rect.right, -rect.top)
        pad = self.margin + max(paint.stroke_width for _, paint in self._items) / 2.0
        return Rect2D(rect.left - pad, rect.top - pad, rect.right + pad, rect.bottom + pad)

    def to_svg(self) -> str:
        box = self.view_box()
        lines = [
            '<svg xmlns="http://www.w3.org/2000/svg" '
            f'viewBox="{_fmt(box.left)} {_fmt(box.top)} {_fmt(box.width)} {_fmt(box.height)}" '
            f'width="{_fmt(box.width)}" height="{_fmt(box.height)}">'
        ]
        for path, paint in self._items:
            attrs = {"d": path_to_svg_d(path, flip_y=self.flip_y), **paint.svg_attributes()}
            rendered = " ".join(f"{key}={quoteattr(value)}" for key, value in attrs.items())
            lines.append(f"  <path {rendered}/>")
        lines.append("</svg>")
        return "\n".join(lines) + "\n"

    def save(self, path: Path) -> Path:
        path = Path(path)
        path.write_text(self.to_svg())
        return path


__all__ = ["Paint", "SvgCanvas", "path_to_svg_d"]
