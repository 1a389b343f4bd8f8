"""SketchAnimate pipeline - classify, rig, animate and render drawings."""

from sketchanimate.pipeline.animator import JOINT_MOTIONS, animate
from sketchanimate.pipeline.assembly import (
    assemble_sprite_sheet,
    export_animation,
    render_frame,
    render_frames,
    save_gif,
)
from sketchanimate.pipeline.classifier import ShapeClassifier, classify
from sketchanimate.pipeline.diagnostics import (
    analyze_animation,
    bone_drift,
    describe_skeleton,
    detection_info,
)
from sketchanimate.pipeline.generator import generate_animation
from sketchanimate.pipeline.motions import generate_motion
from sketchanimate.pipeline.resynthesis import to_strokes
from sketchanimate.pipeline.skeleton import analyze_strokes, build_skeleton

__all__ = [
    "JOINT_MOTIONS",
    "ShapeClassifier",
    "analyze_animation",
    "analyze_strokes",
    "animate",
    "assemble_sprite_sheet",
    "bone_drift",
    "build_skeleton",
    "classify",
    "describe_skeleton",
    "detection_info",
    "export_animation",
    "generate_animation",
    "generate_motion",
    "render_frame",
    "render_frames",
    "save_gif",
    "to_strokes",
]
