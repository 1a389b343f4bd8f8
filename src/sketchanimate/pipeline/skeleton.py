"""Infer a joint hierarchy from an unlabeled stroke set."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from sketchanimate.config import SkeletonSettings
from sketchanimate.models.drawing import Drawing, Point, Rect, Stroke
from sketchanimate.models.enums import JointRole, Side
from sketchanimate.models.skeleton import Bone, Joint, RealJoint, Skeleton, VirtualJoint
from sketchanimate.pipeline import geometry

logger = logging.getLogger(__name__)


@dataclass
class StrokeRoles:
    """Role of every stroke index, as inferred for one request."""

    body: int
    body_bounds: Rect
    head: int | None = None
    neck: int | None = None
    arms: list[tuple[int, Side]] = field(default_factory=list)
    legs: list[tuple[int, Side]] = field(default_factory=list)
    unassigned: list[int] = field(default_factory=list)


def side_of(bounds: Rect, body: Rect) -> Side:
    """Left or right of the body's centre line, in canvas coordinates."""
    return Side.LEFT if bounds.mid_x - body.mid_x < 0 else Side.RIGHT


def analyze_strokes(drawing: Drawing, settings: SkeletonSettings | None = None) -> StrokeRoles | None:
    """Assign body, head, neck, arm and leg roles to stroke indices.

    Returns ``None`` when no stroke qualifies as a body.
    """
    s = settings or SkeletonSettings()
    strokes = drawing.strokes
    body_index = geometry.tallest_upright(
        strokes,
        min_verticalness=s.body_min_verticalness,
        min_height=s.body_min_height,
    )
    if body_index is None:
        logger.info("No body stroke among %d strokes", len(strokes))
        return None

    body = geometry.bounding_box(strokes[body_index])
    roles = StrokeRoles(body=body_index, body_bounds=body)

    for index, stroke in enumerate(strokes):
        if index == body_index:
            continue
        if len(stroke.points) < 2:
            roles.unassigned.append(index)
            continue

        bounds = geometry.bounding_box(stroke)
        if roles.head is None and _looks_like_head(stroke, bounds, body, s):
            roles.head = index
            logger.debug("Stroke %d: head", index)
        elif roles.neck is None and _looks_like_neck(bounds, body, s):
            roles.neck = index
            logger.debug("Stroke %d: neck", index)
        elif bounds.mid_y < body.mid_y - s.arm_band:
            roles.arms.append((index, side_of(bounds, body)))
            logger.debug("Stroke %d: arm (%s)", index, roles.arms[-1][1])
        else:
            roles.legs.append((index, side_of(bounds, body)))
            logger.debug("Stroke %d: leg (%s)", index, roles.legs[-1][1])

    return roles


def _looks_like_head(stroke: Stroke, bounds: Rect, body: Rect, s: SkeletonSettings) -> bool:
    return bounds.mid_y < body.y and geometry.circularity(
        stroke,
        min_points=s.head_min_points,
        min_radius=s.head_min_radius,
        tolerance=s.head_tolerance,
    )


def _looks_like_neck(bounds: Rect, body: Rect, s: SkeletonSettings) -> bool:
    return (
        geometry.verticalness(bounds) > s.neck_min_verticalness
        and bounds.height < body.height * s.neck_max_height_fraction
        and abs(bounds.mid_x - body.mid_x) < s.neck_center_tolerance
        and bounds.mid_y < body.mid_y
    )


def build_skeleton(drawing: Drawing, settings: SkeletonSettings | None = None) -> Skeleton | None:
    """Build a named joint graph from *drawing*, or ``None`` without a body.

    Works independently of the classifier: an ``unknown`` drawing with a
    tall stroke still gets a skeleton.
    """
    s = settings or SkeletonSettings()
    roles = analyze_strokes(drawing, s)
    if roles is None:
        return None

    strokes = drawing.strokes
    body = roles.body_bounds
    joints: dict[str, Joint] = {}
    bones: list[Bone] = []

    # Torso: hip near the bottom, shoulder near the top, both on the centre line.
    hip = Point(body.mid_x, body.max_y - body.height * s.hip_inset)
    shoulder = Point(body.mid_x, body.y + body.height * s.shoulder_inset)
    joints["hip"] = Joint("hip", JointRole.HIP, hip, RealJoint(roles.body))
    joints["shoulder"] = Joint(
        "shoulder", JointRole.SHOULDER, shoulder, RealJoint(roles.body), parent="hip",
    )
    bones.append(Bone(
        name="torso",
        start="hip",
        end="shoulder",
        reference_length=body.height * (1 - s.hip_inset - s.shoulder_inset),
        stroke_index=roles.body,
    ))

    # Neck: a real bone when drawn, otherwise a virtual anchor above the shoulder.
    if roles.neck is not None:
        neck_stroke = strokes[roles.neck]
        near, far = _orient(neck_stroke, lambda p: p.distance_to(shoulder))
        joints["neck_start"] = Joint(
            "neck_start", JointRole.NECK, near, RealJoint(roles.neck), parent="shoulder",
        )
        joints["neck_end"] = Joint(
            "neck_end", JointRole.NECK, far, RealJoint(roles.neck), parent="neck_start",
        )
        bones.append(Bone(
            name="neck",
            start="neck_start",
            end="neck_end",
            reference_length=near.distance_to(far),
            stroke_index=roles.neck,
        ))
        head_parent = "neck_end"
    else:
        joints["neck"] = Joint(
            "neck",
            JointRole.NECK,
            shoulder.translate(0, -s.virtual_neck_length),
            VirtualJoint(anchor="shoulder"),
            parent="shoulder",
        )
        head_parent = "neck"

    if roles.head is not None:
        head_bounds = geometry.bounding_box(strokes[roles.head])
        joints["head"] = Joint(
            "head", JointRole.HEAD, head_bounds.center, RealJoint(roles.head), parent=head_parent,
        )
    else:
        anchor = joints[head_parent].original
        joints["head"] = Joint(
            "head",
            JointRole.HEAD,
            anchor.translate(0, -s.virtual_head_offset),
            VirtualJoint(anchor=head_parent),
            parent=head_parent,
        )

    # Limbs: the endpoint nearer the hip-shoulder line attaches to the body.
    for limb_role, parent, limb_strokes in (
        (JointRole.HAND, "shoulder", roles.arms),
        (JointRole.FOOT, "hip", roles.legs),
    ):
        bone_prefix = "arm" if limb_role is JointRole.HAND else "leg"
        for index, side in limb_strokes:
            attached, free = _orient(
                strokes[index], lambda p: geometry.distance_to_segment(p, shoulder, hip),
            )
            name = _unique_name(f"{limb_role}_{side}", joints)
            joints[name] = Joint(name, limb_role, free, RealJoint(index), parent=parent, side=side)
            bones.append(Bone(
                name=name.replace(str(limb_role), bone_prefix, 1),
                start=parent,
                end=name,
                reference_length=attached.distance_to(free),
                stroke_index=index,
            ))

    skeleton = Skeleton(joints=joints, bones=bones, root="hip")
    logger.info(
        "Built skeleton: %d joints, %d bones (head=%s, neck=%s, arms=%d, legs=%d)",
        len(joints), len(bones), roles.head, roles.neck, len(roles.arms), len(roles.legs),
    )
    return skeleton


def _orient(stroke: Stroke, distance: Callable[[Point], float]) -> tuple[Point, Point]:
    """Return the stroke's endpoints as ``(nearer, farther)`` under *distance*."""
    first, last = stroke.start, stroke.end
    if distance(first) <= distance(last):
        return first, last
    return last, first


def _unique_name(base: str, taken: dict[str, Joint]) -> str:
    if base not in taken:
        return base
    n = 1
    while f"{base}_{n}" in taken:
        n += 1
    return f"{base}_{n}"
