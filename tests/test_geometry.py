"""Tests for pipeline.geometry predicates."""

import math

import pytest

from sketchanimate.config import GeometrySettings
from sketchanimate.models import Point, Rect, Stroke
from sketchanimate.pipeline import geometry

from conftest import circle_stroke


def test_bounding_box_of_strokes():
    box = geometry.bounding_box([Stroke.from_xy((0, 10), (20, 5)), Stroke.from_xy((-5, 30))])
    assert box == Rect(x=-5, y=5, width=25, height=25)


def test_bounding_box_of_nothing():
    assert geometry.bounding_box([]) == Rect()


def test_verticalness_floors_width():
    assert geometry.verticalness(Rect(width=0, height=100)) == 100


def test_vertical_and_horizontal():
    assert geometry.is_vertical(Stroke.from_xy((0, 0), (5, 60)))
    assert not geometry.is_vertical(Stroke.from_xy((0, 0), (5, 20)))
    assert geometry.is_horizontal(Stroke.from_xy((0, 0), (40, 3)))
    assert not geometry.is_horizontal(Stroke.from_xy((0, 0), (40, 40)))


def test_orientation_uses_endpoints_only():
    # A loop whose ends meet has no net displacement.
    loop = Stroke.from_xy((0, 0), (0, 100), (10, 100), (0, 0))
    assert not geometry.is_vertical(loop)
    assert not geometry.is_straight(loop)


def test_single_point_stroke_degrades():
    dot = Stroke.from_xy((3, 3))
    assert not geometry.is_vertical(dot)
    assert not geometry.is_horizontal(dot)
    assert not geometry.circularity(dot)


def test_orientation_settings():
    stroke = Stroke.from_xy((0, 0), (0, 25))
    assert not geometry.is_vertical(stroke)
    assert geometry.is_vertical(stroke, GeometrySettings(vertical_min_length=20))


def test_circle_is_circular():
    assert geometry.circularity(circle_stroke(0, 0, 40, 20), tolerance=0.3)


def test_circularity_needs_enough_points():
    assert not geometry.circularity(circle_stroke(0, 0, 40, 8), min_points=8)
    assert geometry.circularity(circle_stroke(0, 0, 40, 9), min_points=8)


def test_circularity_needs_radius():
    assert not geometry.circularity(circle_stroke(0, 0, 10, 20), min_radius=15)


def test_long_line_is_not_circular():
    line = Stroke.from_xy(*[(i * 10, 0) for i in range(20)])
    assert not geometry.circularity(line, tolerance=0.3)


def test_distance_to_segment():
    a, b = Point(0, 0), Point(10, 0)
    assert geometry.distance_to_segment(Point(5, 3), a, b) == pytest.approx(3)
    assert geometry.distance_to_segment(Point(13, 4), a, b) == pytest.approx(5)
    assert geometry.distance_to_segment(Point(3, 4), a, a) == pytest.approx(5)


def test_right_angle_detection():
    corner = Stroke.from_xy((0, 0), (10, 0), (20, 0), (30, 0), (30, 10), (30, 20), (30, 30))
    assert geometry.has_right_angle(corner)
    straight = Stroke.from_xy(*[(i * 10, 0) for i in range(7)])
    assert not geometry.has_right_angle(straight)


def test_rotate_point_quarter_turn():
    rotated = geometry.rotate_point(Point(10, 0), Point(0, 0), math.pi / 2)
    assert rotated.x == pytest.approx(0, abs=1e-9)
    assert rotated.y == pytest.approx(10)


def test_tallest_upright_prefers_height_and_verticalness():
    strokes = [
        Stroke.from_xy((0, 0), (40, 0)),
        Stroke.from_xy((0, 0), (0, 50)),
        Stroke.from_xy((10, 0), (10, 120)),
    ]
    assert geometry.tallest_upright(strokes, min_verticalness=1.5, min_height=40) == 2
    assert geometry.tallest_upright(strokes[:1], min_verticalness=1.5, min_height=40) is None
