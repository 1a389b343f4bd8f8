"""Shared fixtures for SketchAnimate tests."""

import math
from pathlib import Path

import pytest

from sketchanimate.models import Drawing, Point, Stroke


def circle_stroke(cx: float, cy: float, radius: float, n: int) -> Stroke:
    """A closed-looking polygon of *n* points on a circle."""
    return Stroke(points=tuple(
        Point(cx + radius * math.cos(2 * math.pi * i / n), cy + radius * math.sin(2 * math.pi * i / n))
        for i in range(n)
    ))


def stick_figure_strokes() -> list[Stroke]:
    return [
        Stroke.from_xy((100, 50), (100, 150)),   # body
        Stroke.from_xy((100, 80), (60, 80)),     # arm, left of the body
        Stroke.from_xy((100, 80), (140, 80)),    # arm, right of the body
        Stroke.from_xy((100, 150), (80, 200)),   # leg, left
        Stroke.from_xy((100, 150), (120, 200)),  # leg, right
    ]


@pytest.fixture
def human() -> Drawing:
    return Drawing(strokes=tuple(stick_figure_strokes()))


@pytest.fixture
def human_with_head() -> Drawing:
    return Drawing(strokes=(*stick_figure_strokes(), circle_stroke(100, 20, 20, 16)))


@pytest.fixture
def human_with_neck() -> Drawing:
    return Drawing(strokes=(
        *stick_figure_strokes(),
        Stroke.from_xy((100, 50), (100, 40)),
        circle_stroke(100, 20, 20, 16),
    ))


@pytest.fixture
def ball() -> Drawing:
    return Drawing(strokes=(circle_stroke(100, 100, 40, 20),))


@pytest.fixture
def box() -> Drawing:
    return Drawing(strokes=(
        Stroke.from_xy((0, 0), (100, 0)),
        Stroke.from_xy((100, 0), (100, 100)),
        Stroke.from_xy((100, 100), (0, 100)),
        Stroke.from_xy((0, 100), (0, 0)),
    ))


@pytest.fixture
def dog() -> Drawing:
    return Drawing(strokes=(
        Stroke.from_xy((50, 100), (200, 100)),
        Stroke.from_xy((60, 100), (60, 150)),
        Stroke.from_xy((80, 100), (80, 150)),
        Stroke.from_xy((170, 100), (170, 150)),
        Stroke.from_xy((190, 100), (190, 150)),
        Stroke.from_xy((200, 100), (220, 80)),
    ))


@pytest.fixture
def line() -> Drawing:
    return Drawing(strokes=(Stroke.from_xy((0, 0), (50, 0)),))


@pytest.fixture
def human_file(tmp_path: Path, human: Drawing) -> Path:
    return human.save(tmp_path / "human.json")
