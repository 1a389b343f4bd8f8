"""Joint-driven motions: root motion propagated outward through the skeleton.

Only the root joint is placed from its original position plus independent
offsets.  Every other joint is placed at its parent's *current* position
plus the original parent-to-joint vector plus a per-motion perturbation.
Joints with a zero perturbation (shoulder, neck) therefore keep their bone
length exactly.
"""

from __future__ import annotations

import logging
import math
from collections import deque

from sketchanimate.config import MotionSettings, WalkSettings
from sketchanimate.models.drawing import Point
from sketchanimate.models.enums import JointRole, Motion, Side
from sketchanimate.models.frame import PoseFrame
from sketchanimate.models.skeleton import Joint, Skeleton
from sketchanimate.pipeline.diagnostics import bone_drift

logger = logging.getLogger(__name__)

JOINT_MOTIONS: frozenset[Motion] = frozenset({Motion.WALK, Motion.JUMP})

Offsets = dict[str, tuple[float, float]]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def animate(
    skeleton: Skeleton,
    motion: Motion,
    frame_count: int,
    *,
    frame_rate: float = 10.0,
    walk: WalkSettings | None = None,
    motions: MotionSettings | None = None,
) -> list[PoseFrame]:
    """Compute per-frame joint positions for a joint-driven *motion*.

    Each frame's pose is a pure function of ``progress = f / frame_count``.
    The skeleton's joints are rewritten once per frame and reset to their
    original positions afterwards.
    """
    if frame_count <= 0:
        msg = "frame_count must be positive"
        raise ValueError(msg)
    if motion not in JOINT_MOTIONS:
        msg = f"'{motion}' is not a joint-driven motion"
        raise ValueError(msg)

    walk = walk or WalkSettings()
    motions = motions or MotionSettings()
    order = hierarchy_order(skeleton)
    frames: list[PoseFrame] = []

    try:
        for f in range(frame_count):
            progress = f / frame_count
            if motion is Motion.WALK:
                root_offset, offsets = walk_offsets(skeleton, progress, walk)
            else:
                root_offset, offsets = jump_offsets(skeleton, progress, motions)
            propagate(skeleton, order, root_offset, offsets)
            _check_drift(skeleton, f, walk.drift_warning)
            frames.append(PoseFrame.at(f, skeleton.positions(), frame_rate))
    finally:
        skeleton.reset()

    logger.info("Animated %s: %d pose frames over %d joints", motion, len(frames), len(order))
    return frames


def walk_phase(progress: float, cycles: float = 2.0) -> float:
    """Cyclic walk progress in ``[0, 1)``."""
    return (cycles * progress) % 1.0


def walk_swings(phase: float, walk: WalkSettings) -> dict[str, float]:
    """Leg and arm swing terms for a walk phase.

    Legs alternate; each arm swings opposite to the leg on its side.
    """
    theta = 2 * math.pi * phase
    return {
        "leg_left": math.sin(theta) * walk.leg_swing,
        "leg_right": math.sin(theta + math.pi) * walk.leg_swing,
        "arm_left": math.sin(theta + math.pi) * walk.arm_swing,
        "arm_right": math.sin(theta) * walk.arm_swing,
    }


# ---------------------------------------------------------------------------
# Motion functions
# ---------------------------------------------------------------------------


def walk_offsets(
    skeleton: Skeleton,
    progress: float,
    walk: WalkSettings,
) -> tuple[tuple[float, float], Offsets]:
    """Root offset and per-joint perturbations for one walk frame."""
    phase = walk_phase(progress, walk.cycles)
    theta = 2 * math.pi * phase
    forward = progress * walk.travel_distance
    bob = math.sin(theta) * walk.bob
    sway = math.sin(2 * theta) * walk.sway
    swings = walk_swings(phase, walk)

    offsets: Offsets = {}
    for joint in skeleton.joints.values():
        if joint.role is JointRole.HEAD:
            offsets[joint.name] = (math.sin(theta) * walk.head_sway, math.sin(theta) * walk.head_nod)
        elif joint.role is JointRole.HAND:
            offsets[joint.name] = (swings[f"arm_{_side(joint)}"], 0.0)
        elif joint.role is JointRole.FOOT:
            swing = swings[f"leg_{_side(joint)}"]
            # The foot clears the ground only while swinging forward.
            lift = -abs(swing) * walk.leg_lift if swing > 0 else 0.0
            offsets[joint.name] = (swing, lift)
    return (forward + sway, bob), offsets


def jump_offsets(
    skeleton: Skeleton,
    progress: float,
    motions: MotionSettings,
) -> tuple[tuple[float, float], Offsets]:
    """Root offset and perturbations for one frame of a single jump arc."""
    air = math.sin(math.pi * progress)
    rise = air * motions.jump_height

    offsets: Offsets = {}
    for joint in skeleton.joints.values():
        if joint.role is JointRole.FOOT:
            offsets[joint.name] = (0.0, -rise * motions.jump_tuck)
        elif joint.role is JointRole.HAND:
            offsets[joint.name] = (0.0, -air * motions.jump_arm_raise)
    return (0.0, -rise), offsets


# ---------------------------------------------------------------------------
# Propagation
# ---------------------------------------------------------------------------


def hierarchy_order(skeleton: Skeleton) -> list[str]:
    """Joint names ordered so that every parent precedes its children."""
    children: dict[str, list[str]] = {}
    for joint in skeleton.joints.values():
        if joint.parent is not None:
            children.setdefault(joint.parent, []).append(joint.name)

    order: list[str] = []
    queue = deque([skeleton.root])
    while queue:
        name = queue.popleft()
        order.append(name)
        queue.extend(children.get(name, ()))

    # Joints cut off from the root still travel with it.
    order.extend(name for name in skeleton.joints if name not in order)
    return order


def propagate(
    skeleton: Skeleton,
    order: list[str],
    root_offset: tuple[float, float],
    offsets: Offsets,
) -> None:
    """Place the root, then every joint relative to its parent's current position."""
    root = skeleton.root_joint
    root.move_to(root.original.translate(*root_offset))

    for name in order:
        if name == skeleton.root:
            continue
        joint = skeleton.joints[name]
        dx, dy = offsets.get(name, (0.0, 0.0))
        parent = _parent_of(skeleton, joint)
        base = parent.current.translate(
            joint.original.x - parent.original.x,
            joint.original.y - parent.original.y,
        )
        joint.move_to(Point(base.x + dx, base.y + dy))


def _parent_of(skeleton: Skeleton, joint: Joint) -> Joint:
    if joint.parent is not None:
        return skeleton.joints[joint.parent]
    return skeleton.root_joint


def _side(joint: Joint) -> Side:
    return joint.side or Side.RIGHT


def _check_drift(skeleton: Skeleton, frame: int, warning: float) -> None:
    for name, drift in bone_drift(skeleton).items():
        if drift > warning:
            logger.debug("Frame %d: bone '%s' drifted %.1fpx from its reference length",
                         frame, name, drift)
