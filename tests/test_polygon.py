from __future__ import annotations

import math

import numpy as np
import pytest

from regpoly.modeling.drawing2d import Arc2D, Line2D, PathBuilder
from regpoly.modeling.polygon import (
    PolygonSpec,
    _append_rounded_polygon,
    construct_polygon_path,
    draw_polygon,
    polygon_path,
)
from regpoly.validation import ValidationError


class RecordingSurface:
    def __init__(self):
        self.calls = []

    def draw_path(self, path, paint):
        self.calls.append((path, paint))


def _arc_center_angles(path) -> np.ndarray:
    centers = np.vstack([arc.center for arc in path.arcs()])
    return np.unwrap(np.arctan2(centers[:, 1], centers[:, 0]))


def test_triangle_vertices():
    path = polygon_path(3, 0.0, 0.0, 100.0, 0.0)
    assert path.closed
    assert all(isinstance(seg, Line2D) for seg in path.segments)
    expected = [(100.0, 0.0), (-50.0, 86.6025403784), (-50.0, -86.6025403784)]
    assert np.allclose(path.anchor_points(), expected)
    assert np.allclose(path.end_point, path.start_point)


def test_sharp_polygon_is_translated_to_center():
    path = polygon_path(4, 10.0, 20.0, 5.0, 0.0)
    expected = [(15.0, 20.0), (10.0, 25.0), (5.0, 20.0), (10.0, 15.0)]
    assert np.allclose(path.anchor_points(), expected, atol=1e-9)


def test_tiny_corner_radius_draws_sharp_corners():
    path = polygon_path(5, 0.0, 0.0, 10.0, 0.009)
    assert not path.arcs()
    assert len(path.lines()) == 5


def test_oversized_corner_falls_back_to_incircle():
    path = polygon_path(6, 0.0, 0.0, 50.0, 60.0)
    assert len(path.segments) == 1
    circle = path.segments[0]
    assert isinstance(circle, Arc2D)
    assert circle.is_full_circle
    assert circle.sweep_angle_deg == pytest.approx(360.0)
    assert circle.radius == pytest.approx(50.0 * math.cos(math.radians(30.0)))
    assert circle.radius == pytest.approx(43.30127, abs=1e-5)
    assert np.allclose(circle.center, [0.0, 0.0])


@pytest.mark.parametrize("corner_radius", [43.31, 60.0, 1e6])
def test_fallback_circle_ignores_how_large_the_corner_is(corner_radius):
    circle = polygon_path(6, 3.0, -2.0, 50.0, corner_radius).segments[0]
    assert circle.radius == pytest.approx(PolygonSpec(6, 0, 0, 50.0).in_radius)
    assert np.allclose(circle.center, [3.0, -2.0])


def test_corner_equal_to_in_radius_still_rounds():
    in_radius = PolygonSpec(4, 0.0, 0.0, 10.0).in_radius
    path = polygon_path(4, 0.0, 0.0, 10.0, in_radius)
    assert len(path.arcs()) == 4
    assert not path.lines()
    for arc in path.arcs():
        assert np.allclose(arc.center, [0.0, 0.0], atol=1e-9)
        assert arc.radius == pytest.approx(in_radius)


def test_rounded_square_geometry():
    path = polygon_path(4, 0.0, 0.0, 10.0, 2.0)
    assert path.closed
    kinds = [type(seg) for seg in path.segments]
    assert kinds == [Arc2D, Line2D] * 4

    distance = 10.0 - 2.0 / math.sin(math.radians(45.0))
    for index, arc in enumerate(path.arcs()):
        angle = math.radians(90.0 * index)
        assert np.allclose(arc.center, [distance * math.cos(angle), distance * math.sin(angle)])
        assert arc.radius == pytest.approx(2.0)
        assert arc.start_angle_deg == pytest.approx(90.0 * index - 45.0)
        assert arc.sweep_angle_deg == pytest.approx(90.0)


@pytest.mark.parametrize("sides", [3, 5, 6, 8])
def test_rounded_edges_are_tangent_to_arcs(sides):
    path = polygon_path(sides, 0.0, 0.0, 40.0, 4.0)
    segments = path.segments
    for idx, segment in enumerate(segments):
        if not isinstance(segment, Line2D):
            continue
        before = segments[idx - 1]
        after = segments[(idx + 1) % len(segments)]
        direction = segment.end - segment.start
        assert abs(np.dot(direction, segment.start - before.center)) < 1e-6
        assert abs(np.dot(direction, segment.end - after.center)) < 1e-6


@pytest.mark.parametrize("sides", [3, 4, 7, 10])
def test_corner_spacing_is_uniform(sides):
    path = polygon_path(sides, 0.0, 0.0, 30.0, 3.0)
    assert np.allclose(np.diff(_arc_center_angles(path)), 2 * np.pi / sides)


@pytest.mark.parametrize("sides", [3, 4, 6, 9])
def test_rounded_converges_to_sharp(sides):
    spec = PolygonSpec(sides, 7.0, -3.0, 25.0, 1e-7)
    builder = PathBuilder()
    _append_rounded_polygon(builder, spec)
    rounded = builder.to_path()
    sharp = polygon_path(sides, 7.0, -3.0, 25.0, 0.0)
    arc_starts = np.vstack([arc.start_point for arc in rounded.arcs()])
    assert np.allclose(arc_starts, sharp.anchor_points(), atol=1e-5)


def test_rounded_path_is_closed_and_contains_center():
    path = polygon_path(5, 1.0, 1.0, 10.0, 2.0)
    pts = path.sample()
    assert np.allclose(pts[0], pts[-1])
    assert path.contains((1.0, 1.0))
    assert not path.contains((11.5, 1.0))


def test_repeated_construction_is_identical():
    builder = PathBuilder()
    construct_polygon_path(builder, 7, 2.0, 3.0, 15.0, 2.5)
    first = builder.to_path().sample()
    construct_polygon_path(builder, 7, 2.0, 3.0, 15.0, 2.5)
    assert len(builder.contours) == 1
    assert np.array_equal(first, builder.to_path().sample())


def test_construction_resets_previous_content():
    builder = PathBuilder()
    builder.add_circle(0, 0, 1.0)
    construct_polygon_path(builder, 3, 0.0, 0.0, 1.0, 0.0)
    assert len(builder.contours) == 1
    assert len(builder.to_path().lines()) == 3


@pytest.mark.parametrize(
    "args",
    [
        (2, 0.0, 0.0, 10.0, 0.0),
        (3, 0.0, 0.0, 0.0, 0.0),
        (3, 0.0, 0.0, -5.0, 0.0),
        (3, 0.0, 0.0, 5.0, -1.0),
        (3, float("nan"), 0.0, 5.0, 0.0),
        (True, 0.0, 0.0, 5.0, 0.0),
    ],
)
def test_invalid_input_leaves_sink_untouched(args):
    builder = PathBuilder()
    construct_polygon_path(builder, 4, 0.0, 0.0, 1.0, 0.0)
    before = builder.to_path().sample()
    with pytest.raises(ValidationError):
        construct_polygon_path(builder, *args)
    assert np.array_equal(builder.to_path().sample(), before)


def test_draw_polygon_hands_path_to_surface():
    surface = RecordingSurface()
    paint = object()
    path = draw_polygon(surface, 6, 0.0, 0.0, 20.0, 3.0, paint)
    assert len(surface.calls) == 1
    drawn, used_paint = surface.calls[0]
    assert drawn is path
    assert used_paint is paint
    assert len(drawn.arcs()) == 6


def test_draw_polygon_uses_fresh_paths():
    surface = RecordingSurface()
    draw_polygon(surface, 3, 0.0, 0.0, 1.0, 0.0, None)
    draw_polygon(surface, 4, 0.0, 0.0, 1.0, 0.0, None)
    first, second = surface.calls[0][0], surface.calls[1][0]
    assert first is not second
    assert len(first.lines()) == 3


def _assert_connected(path):
    segments = path.segments
    for current, following in zip(segments, segments[1:] + segments[:1]):
        assert np.allclose(current.end_point, following.start_point, rtol=0.0, atol=1e-6)


def test_sharp_polygon_far_from_origin_keeps_closing_edge():
    path = polygon_path(4, 1e7, 1e7, 10.0, 0.0)
    assert path.closed
    assert len(path.lines()) == 4
    _assert_connected(path)
    pts = path.sample()
    assert np.array_equal(pts[0], pts[-1])
    assert path.contains((1e7, 1e7))


def test_rounded_polygon_far_from_origin_keeps_connectors():
    path = polygon_path(4, 1e7, 1e7, 10.0, 2.0)
    assert [type(seg) for seg in path.segments] == [Arc2D, Line2D] * 4
    _assert_connected(path)
    assert path.contains((1e7, 1e7))
    assert not path.contains((1e7 + 10.0, 1e7 + 10.0))
