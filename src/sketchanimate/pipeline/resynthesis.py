"""Turn animated joint positions back into drawable strokes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sketchanimate.models.drawing import Point, Stroke
from sketchanimate.models.skeleton import RealJoint

if TYPE_CHECKING:
    from collections.abc import Mapping

    from sketchanimate.models.drawing import Drawing
    from sketchanimate.models.skeleton import Skeleton


def to_strokes(
    skeleton: Skeleton,
    animated_joints: Mapping[str, Point],
    original_drawing: Drawing,
) -> list[Stroke]:
    """Rebuild the drawing's strokes for one frame.

    Bone strokes become straight two-point segments between their joints'
    animated positions.  The head stroke keeps its shape and is translated
    by the head joint's displacement.  All other strokes pass through
    unchanged.  The result is index-aligned with ``original_drawing``.
    """
    strokes = list(original_drawing.strokes)

    for bone in skeleton.bones:
        start = animated_joints.get(bone.start, skeleton.joints[bone.start].original)
        end = animated_joints.get(bone.end, skeleton.joints[bone.end].original)
        strokes[bone.stroke_index] = Stroke(points=(start, end))

    head = skeleton.head
    if head is not None and isinstance(head.source, RealJoint):
        moved = animated_joints.get(head.name, head.original)
        dx = moved.x - head.original.x
        dy = moved.y - head.original.y
        index = head.source.stroke_index
        strokes[index] = strokes[index].translated(dx, dy)

    return strokes
