"""Geometric primitives over strokes: bounds, orientation, circularity."""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import TYPE_CHECKING

from sketchanimate.config import GeometrySettings
from sketchanimate.models.drawing import Point, Rect, Stroke

if TYPE_CHECKING:
    from collections.abc import Sequence

_DEFAULTS = GeometrySettings()


# ---------------------------------------------------------------------------
# Bounds and centres
# ---------------------------------------------------------------------------


def bounding_box(strokes: Stroke | Iterable[Stroke]) -> Rect:
    """Min/max over x and y of one stroke or many.

    Empty input yields a degenerate zero rect.
    """
    if isinstance(strokes, Stroke):
        strokes = (strokes,)
    xs: list[float] = []
    ys: list[float] = []
    for stroke in strokes:
        for p in stroke.points:
            xs.append(p.x)
            ys.append(p.y)
    if not xs:
        return Rect()
    min_x, min_y = min(xs), min(ys)
    return Rect(x=min_x, y=min_y, width=max(xs) - min_x, height=max(ys) - min_y)


def centroid(points: Sequence[Point]) -> Point:
    """Mean of *points*; the origin for an empty sequence."""
    if not points:
        return Point(0.0, 0.0)
    n = len(points)
    return Point(sum(p.x for p in points) / n, sum(p.y for p in points) / n)


def verticalness(rect: Rect) -> float:
    """Height over width, with width floored at one pixel."""
    return rect.height / max(rect.width, 1.0)


def path_length(stroke: Stroke) -> float:
    pts = stroke.points
    return sum(pts[i].distance_to(pts[i + 1]) for i in range(len(pts) - 1))


# ---------------------------------------------------------------------------
# Orientation
# ---------------------------------------------------------------------------


def _displacement(stroke: Stroke) -> tuple[float, float] | None:
    if len(stroke.points) < 2:
        return None
    return abs(stroke.end.x - stroke.start.x), abs(stroke.end.y - stroke.start.y)


def is_vertical(stroke: Stroke, settings: GeometrySettings | None = None) -> bool:
    """Net start-to-end displacement is mostly vertical.

    Only the endpoints matter; a curled stroke whose ends meet is never
    vertical whatever its middle does.
    """
    s = settings or _DEFAULTS
    d = _displacement(stroke)
    if d is None:
        return False
    dx, dy = d
    return dy > dx * s.vertical_ratio and dy > s.vertical_min_length


def is_horizontal(stroke: Stroke, settings: GeometrySettings | None = None) -> bool:
    """Net start-to-end displacement is mostly horizontal."""
    s = settings or _DEFAULTS
    d = _displacement(stroke)
    if d is None:
        return False
    dx, dy = d
    return dx > dy * s.horizontal_ratio and dx > s.horizontal_min_length


def is_straight(stroke: Stroke, settings: GeometrySettings | None = None) -> bool:
    """Proxy for "drawn as a single straight segment"."""
    return is_vertical(stroke, settings) or is_horizontal(stroke, settings)


# ---------------------------------------------------------------------------
# Circularity
# ---------------------------------------------------------------------------


def radial_stats(stroke: Stroke) -> tuple[float, float]:
    """Average distance of points from their centroid, and its variance."""
    pts = stroke.points
    center = centroid(pts)
    distances = [p.distance_to(center) for p in pts]
    avg = sum(distances) / len(distances)
    variance = sum((d - avg) ** 2 for d in distances) / len(distances)
    return avg, variance


def circularity(
    stroke: Stroke,
    *,
    min_points: int | None = None,
    min_radius: float | None = None,
    tolerance: float | None = None,
    settings: GeometrySettings | None = None,
) -> bool:
    """Whether *stroke* is roughly a circle.

    The stroke needs more than *min_points* points, an average radius above
    *min_radius*, and a radial variance below ``(avg_radius * tolerance)**2``.
    A lower *tolerance* is stricter.
    """
    s = settings or _DEFAULTS
    min_points = s.circle_min_points if min_points is None else min_points
    min_radius = s.circle_min_radius if min_radius is None else min_radius
    tolerance = s.circle_tolerance if tolerance is None else tolerance

    if len(stroke.points) < 2 or len(stroke.points) <= min_points:
        return False
    avg, variance = radial_stats(stroke)
    return avg > min_radius and variance < (avg * tolerance) ** 2


# ---------------------------------------------------------------------------
# Distances and angles
# ---------------------------------------------------------------------------


def distance_to_segment(point: Point, a: Point, b: Point) -> float:
    """Perpendicular distance from *point* to segment *a*-*b*, clamped to its ends."""
    dx = b.x - a.x
    dy = b.y - a.y
    length_sq = dx * dx + dy * dy
    if length_sq == 0:
        return point.distance_to(a)
    t = ((point.x - a.x) * dx + (point.y - a.y) * dy) / length_sq
    t = max(0.0, min(1.0, t))
    return point.distance_to(Point(a.x + t * dx, a.y + t * dy))


def turning_angles(stroke: Stroke, stride: int = 1) -> list[float]:
    """Unsigned direction change in degrees at each sampled interior point.

    Segments span *stride* points, which smooths over finger jitter.
    """
    pts = stroke.points
    angles: list[float] = []
    for i in range(stride, len(pts) - stride):
        a, b, c = pts[i - stride], pts[i], pts[i + stride]
        v1 = (b.x - a.x, b.y - a.y)
        v2 = (c.x - b.x, c.y - b.y)
        if v1 == (0.0, 0.0) or v2 == (0.0, 0.0):
            continue
        cross = v1[0] * v2[1] - v1[1] * v2[0]
        dot = v1[0] * v2[0] + v1[1] * v2[1]
        angles.append(abs(math.degrees(math.atan2(cross, dot))))
    return angles


def has_right_angle(stroke: Stroke, *, stride: int = 3, tolerance: float = 30.0) -> bool:
    """Any sampled turn along *stroke* lies within *tolerance* degrees of 90."""
    stride = min(stride, max((len(stroke.points) - 1) // 2, 1))
    return any(abs(angle - 90.0) <= tolerance for angle in turning_angles(stroke, stride))


def rotate_point(point: Point, center: Point, angle: float) -> Point:
    """Rotate *point* about *center* by *angle* radians."""
    rx = point.x - center.x
    ry = point.y - center.y
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    return Point(center.x + rx * cos_a - ry * sin_a, center.y + rx * sin_a + ry * cos_a)


def tallest_upright(
    strokes: Sequence[Stroke],
    *,
    min_verticalness: float,
    min_height: float,
) -> int | None:
    """Index of the stroke scoring highest on verticalness x height.

    Only strokes with verticalness above *min_verticalness* and a bounding
    height above *min_height* qualify.  Ties keep the earliest stroke.
    """
    best_index: int | None = None
    best_score = 0.0
    for index, stroke in enumerate(strokes):
        bounds = bounding_box(stroke)
        v = verticalness(bounds)
        if v > min_verticalness and bounds.height > min_height:
            score = v * bounds.height
            if score > best_score:
                best_score = score
                best_index = index
    return best_index
