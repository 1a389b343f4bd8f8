"""Read-only reports over drawings, skeletons and generated animations."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from sketchanimate.config import ClassifierSettings, GeometrySettings, SkeletonSettings
from sketchanimate.models.drawing import Rect
from sketchanimate.models.enums import Category, Motion, Side
from sketchanimate.pipeline import geometry
from sketchanimate.pipeline.classifier import ShapeClassifier
from sketchanimate.pipeline.skeleton import analyze_strokes

if TYPE_CHECKING:
    from sketchanimate.models.drawing import Drawing
    from sketchanimate.models.frame import AnimationFrame
    from sketchanimate.models.skeleton import Skeleton

logger = logging.getLogger(__name__)

# Centroid displacement below this many pixels counts as "not moving".
STATIC_THRESHOLD = 0.5


# ---------------------------------------------------------------------------
# Detection
# ---------------------------------------------------------------------------


@dataclass
class DetectionInfo:
    """What the classifier saw in a drawing."""

    stroke_count: int
    point_count: int
    vertical_strokes: int
    horizontal_strokes: int
    bounds: Rect
    category: Category
    motions: tuple[Motion, ...] = ()

    @property
    def aspect_ratio(self) -> float:
        return self.bounds.aspect_ratio

    def describe(self) -> str:
        b = self.bounds
        motions = ", ".join(m.label for m in self.motions) or "none"
        return "\n".join([
            f"Category: {self.category.label} ({self.category})",
            f"Strokes: {self.stroke_count} ({self.point_count} points)",
            f"Vertical strokes: {self.vertical_strokes}",
            f"Horizontal strokes: {self.horizontal_strokes}",
            f"Bounds: {b.width:.0f}x{b.height:.0f} at ({b.x:.0f}, {b.y:.0f})",
            f"Aspect ratio: {self.aspect_ratio:.2f}",
            f"Motions: {motions}",
        ])


def detection_info(
    drawing: Drawing,
    *,
    classifier_settings: ClassifierSettings | None = None,
    geometry_settings: GeometrySettings | None = None,
) -> DetectionInfo:
    """Summarize stroke orientations and bounds alongside the category."""
    classifier = ShapeClassifier(classifier_settings, geometry_settings)
    category = classifier.classify(drawing)
    strokes = drawing.strokes
    return DetectionInfo(
        stroke_count=len(strokes),
        point_count=drawing.point_count,
        vertical_strokes=sum(1 for s in strokes if geometry.is_vertical(s, classifier.geometry)),
        horizontal_strokes=sum(1 for s in strokes if geometry.is_horizontal(s, classifier.geometry)),
        bounds=geometry.bounding_box(strokes),
        category=category,
        motions=category.motions,
    )


# ---------------------------------------------------------------------------
# Body parts
# ---------------------------------------------------------------------------


def describe_skeleton(drawing: Drawing, settings: SkeletonSettings | None = None) -> str:
    """Human-readable role assignment for each stroke of *drawing*."""
    roles = analyze_strokes(drawing, settings)
    if roles is None:
        return "No body found: whole-drawing motions only"

    def fmt(parts: list[tuple[int, Side]]) -> str:
        if not parts:
            return "none"
        return ", ".join(f"stroke {index} ({side})" for index, side in parts)

    lines = [
        f"Body: stroke {roles.body}",
        f"Head: {'stroke ' + str(roles.head) if roles.head is not None else 'none (virtual)'}",
        f"Neck: {'stroke ' + str(roles.neck) if roles.neck is not None else 'none (virtual)'}",
        f"Arms: {len(roles.arms)} - {fmt(roles.arms)}",
        f"Legs: {len(roles.legs)} - {fmt(roles.legs)}",
    ]
    if roles.unassigned:
        lines.append(f"Unassigned: {', '.join(str(i) for i in roles.unassigned)}")
    return "\n".join(lines)


def bone_drift(skeleton: Skeleton) -> dict[str, float]:
    """Absolute difference between each bone's current and reference length."""
    return {
        bone.name: abs(skeleton.bone_length(bone) - bone.reference_length)
        for bone in skeleton.bones
    }


# ---------------------------------------------------------------------------
# Animation quality
# ---------------------------------------------------------------------------


@dataclass
class QualityCheck:
    """A single pass/fail line of the animation quality report."""

    label: str
    passed: bool
    message: str = ""


@dataclass
class AnimationQuality:
    """Aggregated quality report for one generated animation."""

    checks: list[QualityCheck] = field(default_factory=list)
    movement: dict[int, float] = field(default_factory=dict)
    static_strokes: list[int] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return all(c.passed for c in self.checks)


def analyze_animation(
    frames: list[AnimationFrame],
    source: Drawing | None = None,
) -> AnimationQuality:
    """Check frame consistency and measure how far each stroke travels.

    Movement is the largest centroid displacement of a stroke relative to
    frame 0.  Strokes that never move beyond :data:`STATIC_THRESHOLD` are
    reported as static; that is expected for pass-through strokes.
    """
    report = AnimationQuality()
    report.checks.append(QualityCheck(
        label=f"{len(frames)} frame{'s' if len(frames) != 1 else ''} generated",
        passed=bool(frames),
    ))
    if not frames:
        return report

    counts = {len(frame.strokes) for frame in frames}
    expected = len(source) if source is not None else len(frames[0].strokes)
    consistent = counts == {expected}
    report.checks.append(QualityCheck(
        label="Consistent stroke count",
        passed=consistent,
        message="" if consistent else f"expected {expected}, saw {sorted(counts)}",
    ))

    numbered = all(frame.frame_number == i for i, frame in enumerate(frames))
    ordered = all(a.timestamp < b.timestamp for a, b in zip(frames, frames[1:]))
    report.checks.append(QualityCheck(
        label="Frames numbered and timestamped in order",
        passed=numbered and ordered,
    ))

    if consistent:
        first = [geometry.centroid(s.points) for s in frames[0].strokes]
        for index, start in enumerate(first):
            report.movement[index] = max(
                geometry.centroid(frame.strokes[index].points).distance_to(start)
                for frame in frames
            )
        report.static_strokes = [i for i, d in report.movement.items() if d < STATIC_THRESHOLD]

    moving = len(report.movement) - len(report.static_strokes)
    report.checks.append(QualityCheck(
        label=f"Strokes moving ({moving}/{len(report.movement)})",
        passed=moving > 0 or len(frames) == 1,
    ))
    logger.debug("Animation quality: %s", report)
    return report
