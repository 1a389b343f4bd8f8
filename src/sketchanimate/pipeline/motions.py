"""Motions that move the drawing as a whole, or one or two chosen strokes.

These need no skeleton.  Every motion is a pure function of
``progress = f / frame_count`` and produces one stroke per source stroke,
so the frame contract matches the joint-driven path.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass

from sketchanimate.config import MotionSettings, WalkSettings
from sketchanimate.models.drawing import Drawing, Point, Rect, Stroke
from sketchanimate.models.enums import Motion, Side
from sketchanimate.models.frame import AnimationFrame
from sketchanimate.pipeline import geometry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Affine:
    """Scale, then rotate about a pivot, then translate."""

    dx: float = 0.0
    dy: float = 0.0
    rotation: float = 0.0
    scale_x: float = 1.0
    scale_y: float = 1.0

    def apply(self, point: Point, pivot: Point) -> Point:
        scaled = Point(
            pivot.x + (point.x - pivot.x) * self.scale_x,
            pivot.y + (point.y - pivot.y) * self.scale_y,
        )
        rotated = geometry.rotate_point(scaled, pivot, self.rotation) if self.rotation else scaled
        return rotated.translate(self.dx, self.dy)

    def apply_stroke(self, stroke: Stroke, pivot: Point) -> Stroke:
        return Stroke(points=tuple(self.apply(p, pivot) for p in stroke.points))


Transform = Callable[[float, MotionSettings, WalkSettings], Affine]


# ---------------------------------------------------------------------------
# Whole-drawing transforms
# ---------------------------------------------------------------------------


def bounce(progress: float, s: MotionSettings, _walk: WalkSettings) -> Affine:
    """Repeated hops with stretch in flight and squash on landing."""
    phase = (progress * s.bounce_count) % 1.0
    air = math.sin(math.pi * phase)
    if phase >= 1 - s.bounce_contact:
        k = math.sin(math.pi * (phase - (1 - s.bounce_contact)) / s.bounce_contact)
        return Affine(dy=-air * s.bounce_height, scale_x=1 + s.bounce_squash * k / 2,
                      scale_y=1 - s.bounce_squash * k)
    k = abs(math.sin(2 * math.pi * phase)) * s.bounce_stretch
    return Affine(dy=-air * s.bounce_height, scale_x=1 - k / 2, scale_y=1 + k)


def roll(progress: float, s: MotionSettings, _walk: WalkSettings) -> Affine:
    return Affine(dx=progress * s.roll_distance, rotation=2 * math.pi * s.roll_turns * progress)


def shake(progress: float, s: MotionSettings, _walk: WalkSettings) -> Affine:
    theta = 2 * math.pi * s.shake_cycles * progress
    return Affine(dx=math.sin(theta) * s.shake_x, dy=math.cos(theta) * s.shake_y)


def wag(progress: float, s: MotionSettings, _walk: WalkSettings) -> Affine:
    return Affine(dx=math.sin(2 * math.pi * s.wag_cycles * progress) * s.wag_amount)


def float_(progress: float, s: MotionSettings, _walk: WalkSettings) -> Affine:
    """Lazy figure-of-eight drift with a slight tilt."""
    return Affine(
        dx=math.sin(2 * math.pi * progress) * s.float_x,
        dy=math.cos(3 * math.pi * progress) * s.float_y,
        rotation=math.sin(math.pi * progress) * s.float_tilt,
    )


def spin(progress: float, s: MotionSettings, _walk: WalkSettings) -> Affine:
    return Affine(rotation=2 * math.pi * s.spin_turns * progress)


def jump(progress: float, s: MotionSettings, _walk: WalkSettings) -> Affine:
    """Single arc; stretched on the way up, squashed on the way down."""
    k = math.sin(2 * math.pi * progress)
    scale_y = 1 + (s.jump_stretch - 1) * k if k >= 0 else 1 + (1 - s.jump_squash) * k
    return Affine(dy=-math.sin(math.pi * progress) * s.jump_height, scale_y=scale_y)


def walk(progress: float, _s: MotionSettings, w: WalkSettings) -> Affine:
    """Forward travel with a vertical bob, for drawings without a body."""
    phase = (w.cycles * progress) % 1.0
    return Affine(dx=progress * w.travel_distance, dy=math.sin(2 * math.pi * phase) * w.bob)


def wave_sideways(progress: float, s: MotionSettings, _walk: WalkSettings) -> Affine:
    return Affine(dx=math.sin(2 * math.pi * s.wave_cycles * progress) * s.wave_fallback_amount)


WHOLE_DRAWING: dict[Motion, Transform] = {
    Motion.BOUNCE: bounce,
    Motion.ROLL: roll,
    Motion.SHAKE: shake,
    Motion.WAG: wag,
    Motion.FLOAT: float_,
    Motion.SPIN: spin,
    Motion.JUMP: jump,
    Motion.WALK: walk,
}

# Squash and stretch keep the drawing standing on its lowest point.
_BOTTOM_PIVOT = frozenset({Motion.BOUNCE, Motion.JUMP})


def transform_drawing(
    drawing: Drawing,
    motion: Motion,
    progress: float,
    *,
    settings: MotionSettings | None = None,
    walk_settings: WalkSettings | None = None,
) -> list[Stroke]:
    """Apply one whole-drawing transform to every stroke."""
    transform = WHOLE_DRAWING[motion](progress, settings or MotionSettings(), walk_settings or WalkSettings())
    bounds = geometry.bounding_box(drawing.strokes)
    pivot = Point(bounds.mid_x, bounds.max_y) if motion in _BOTTOM_PIVOT else bounds.center
    return [transform.apply_stroke(stroke, pivot) for stroke in drawing.strokes]


# ---------------------------------------------------------------------------
# Single-stroke motions
# ---------------------------------------------------------------------------


def waving_stroke(drawing: Drawing, dominant: Side = Side.RIGHT) -> int | None:
    """Index of the stroke most likely to be a waving arm.

    Scores each stroke on being upper, horizontal, long and on the dominant
    side of the drawing, one point each.  Single-point strokes never wave.
    """
    strokes = drawing.strokes
    bounds = geometry.bounding_box(strokes)
    lengths = [geometry.path_length(s) for s in strokes]
    longest = max(lengths, default=0.0) or 1.0

    best_index: int | None = None
    best_score = -1.0
    for index, stroke in enumerate(strokes):
        if len(stroke.points) < 2:
            continue
        b = geometry.bounding_box(stroke)
        upper = 1 - (b.mid_y - bounds.y) / max(bounds.height, 1.0)
        horizontal = 1.0 if geometry.is_horizontal(stroke) else b.width / max(b.width + b.height, 1.0)
        long = lengths[index] / longest
        offset = b.mid_x - bounds.mid_x
        on_side = offset > 0 if dominant is Side.RIGHT else offset < 0
        score = upper + horizontal + long + (1.0 if on_side else 0.0)
        if score > best_score:
            best_index, best_score = index, score
    return best_index


def wave(
    drawing: Drawing,
    progress: float,
    settings: MotionSettings | None = None,
) -> list[Stroke]:
    """Swing the waving arm about its inner end; whole drawing sways if there is no arm."""
    s = settings or MotionSettings()
    strokes = list(drawing.strokes)
    index = waving_stroke(drawing, s.wave_dominant_side) if len(strokes) >= 2 else None
    if index is None:
        offset = wave_sideways(progress, s, WalkSettings())
        center = geometry.bounding_box(strokes).center
        return [offset.apply_stroke(stroke, center) for stroke in strokes]

    arm = strokes[index]
    center = geometry.bounding_box(drawing.strokes).center
    pivot = min((arm.start, arm.end), key=lambda p: p.distance_to(center))
    angle = math.radians(s.wave_angle) * math.sin(2 * math.pi * s.wave_cycles * progress)
    strokes[index] = Affine(rotation=angle).apply_stroke(arm, pivot)
    return strokes


def lid_strokes(drawing: Drawing, fraction: float) -> list[int]:
    """Indices of strokes lying in the top *fraction* of the drawing."""
    bounds = geometry.bounding_box(drawing.strokes)
    line = bounds.y + fraction * bounds.height
    return [
        index for index, stroke in enumerate(drawing.strokes)
        if geometry.bounding_box(stroke).mid_y < line
    ]


def open_lid(
    drawing: Drawing,
    progress: float,
    settings: MotionSettings | None = None,
) -> list[Stroke]:
    """Lift and tilt the lid strokes about their left hinge.

    When no stroke, or every stroke, lies in the lid band the whole drawing
    lifts instead.
    """
    s = settings or MotionSettings()
    strokes = list(drawing.strokes)
    lid = lid_strokes(drawing, s.open_lid_fraction)
    lift = Affine(dy=-progress * s.open_lift)
    if not lid or len(lid) == len(strokes):
        center = geometry.bounding_box(strokes).center
        return [lift.apply_stroke(stroke, center) for stroke in strokes]

    lid_bounds: Rect = geometry.bounding_box(strokes[i] for i in lid)
    hinge = Point(lid_bounds.x, lid_bounds.max_y)
    tilt = Affine(dy=lift.dy, rotation=-math.radians(s.open_angle) * progress)
    for index in lid:
        strokes[index] = tilt.apply_stroke(strokes[index], hinge)
    return strokes


# ---------------------------------------------------------------------------
# Frame generation
# ---------------------------------------------------------------------------


def motion_strokes(
    drawing: Drawing,
    motion: Motion,
    progress: float,
    *,
    settings: MotionSettings | None = None,
    walk_settings: WalkSettings | None = None,
) -> list[Stroke]:
    """Strokes for *drawing* at *progress* through a skeleton-free *motion*."""
    if motion is Motion.WAVE:
        return wave(drawing, progress, settings)
    if motion is Motion.OPEN:
        return open_lid(drawing, progress, settings)
    return transform_drawing(drawing, motion, progress, settings=settings, walk_settings=walk_settings)


def generate_motion(
    drawing: Drawing,
    motion: Motion,
    frame_count: int,
    *,
    frame_rate: float = 10.0,
    settings: MotionSettings | None = None,
    walk_settings: WalkSettings | None = None,
) -> list[AnimationFrame]:
    """Animate *drawing* without a skeleton.

    Parameters
    ----------
    drawing:
        Source drawing; never mutated.
    motion:
        Any :class:`Motion`.  Walk and jump use their whole-drawing variants.
    frame_count:
        Number of frames, at least one.
    frame_rate:
        Frames per second, used for timestamps.

    Returns
    -------
    list[AnimationFrame]
        ``frame_count`` frames, each with one stroke per source stroke.
    """
    if frame_count <= 0:
        msg = "frame_count must be positive"
        raise ValueError(msg)

    frames = [
        AnimationFrame.at(
            f,
            motion_strokes(
                drawing, motion, f / frame_count,
                settings=settings, walk_settings=walk_settings,
            ),
            frame_rate,
        )
        for f in range(frame_count)
    ]
    logger.info("Generated %d %s frames without a skeleton", len(frames), motion)
    return frames
