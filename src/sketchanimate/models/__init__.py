"""SketchAnimate data models - pydantic and dataclasses, no I/O beyond drawing files."""

from sketchanimate.models.drawing import Drawing, DrawingLoadError, Point, Rect, Stroke
from sketchanimate.models.enums import Category, JointRole, Motion, Side
from sketchanimate.models.frame import AnimationFrame, PoseFrame
from sketchanimate.models.skeleton import (
    Bone,
    Joint,
    JointSource,
    RealJoint,
    Skeleton,
    SkeletonError,
    VirtualJoint,
)

__all__ = [
    "AnimationFrame",
    "Bone",
    "Category",
    "Drawing",
    "DrawingLoadError",
    "Joint",
    "JointRole",
    "JointSource",
    "Motion",
    "Point",
    "PoseFrame",
    "RealJoint",
    "Rect",
    "Side",
    "Skeleton",
    "SkeletonError",
    "Stroke",
    "VirtualJoint",
]
