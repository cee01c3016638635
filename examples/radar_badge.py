"""Example regpoly scene: a rounded hexagon badge with a radar overlay."""

from __future__ import annotations

from regpoly.io.svg import Paint, SvgCanvas
from regpoly.modeling.drawing2d import PathBuilder
from regpoly.modeling.polygon import draw_polygon
from regpoly.modeling.vertices import compute_weighted_vertices


def build():
    """Draw the badge frame, then trace six scores inside it."""

    canvas = SvgCanvas(y_axis="up")
    draw_polygon(canvas, 6, 0.0, 0.0, 60.0, 8.0, Paint(fill="#eef2ff", stroke="#4338ca", stroke_width=2.0))

    scores = [0.9, 0.6, 0.75, 0.4, 0.85, 0.5]
    points = compute_weighted_vertices(scores, 48.0, len(scores))
    builder = PathBuilder()
    builder.move_to(*points[0])
    for x, y in points[1:]:
        builder.line_to(x, y)
    builder.close()
    canvas.draw_path(builder.to_path(), Paint(fill=(99, 102, 241, 96), stroke="#312e81"))
    return canvas
