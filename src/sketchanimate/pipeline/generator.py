"""End-to-end request: drawing and motion in, drawable frames out."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sketchanimate.config import AppConfig, load_config
from sketchanimate.models.frame import AnimationFrame
from sketchanimate.pipeline.animator import JOINT_MOTIONS, animate
from sketchanimate.pipeline.motions import generate_motion
from sketchanimate.pipeline.resynthesis import to_strokes
from sketchanimate.pipeline.skeleton import build_skeleton

if TYPE_CHECKING:
    from sketchanimate.models.drawing import Drawing
    from sketchanimate.models.enums import Motion

logger = logging.getLogger(__name__)


def generate_animation(
    drawing: Drawing,
    motion: Motion,
    *,
    config: AppConfig | None = None,
    frame_count: int | None = None,
) -> list[AnimationFrame]:
    """Generate every frame of *motion* for *drawing*.

    Joint-driven motions use the inferred skeleton when one exists and fall
    back to a whole-drawing transform otherwise.  The frame count defaults
    to the motion's duration times the frame rate.
    """
    if config is None:
        config = load_config()

    n = config.animation.frame_count(motion) if frame_count is None else frame_count
    rate = config.animation.frame_rate

    if motion in JOINT_MOTIONS:
        skeleton = build_skeleton(drawing, config.skeleton)
        if skeleton is not None:
            poses = animate(
                skeleton, motion, n,
                frame_rate=rate, walk=config.walk, motions=config.motions,
            )
            return [
                AnimationFrame.at(pose.frame_number, to_strokes(skeleton, pose.joints, drawing), rate)
                for pose in poses
            ]
        logger.info("No skeleton for %s; animating the whole drawing", motion)

    return generate_motion(
        drawing, motion, n,
        frame_rate=rate, settings=config.motions, walk_settings=config.walk,
    )
