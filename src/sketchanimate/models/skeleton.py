"""Joint graph inferred from an unlabeled drawing."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias

from sketchanimate.models.drawing import Point
from sketchanimate.models.enums import JointRole, Side


class SkeletonError(ValueError):
    """Raised when a skeleton's joints and bones are inconsistent."""


@dataclass(frozen=True)
class RealJoint:
    """A joint backed by a stroke of the source drawing."""

    stroke_index: int


@dataclass(frozen=True)
class VirtualJoint:
    """A joint synthesized from another joint, with no stroke behind it."""

    anchor: str


JointSource: TypeAlias = RealJoint | VirtualJoint


@dataclass
class Joint:
    """A named animatable point.

    ``original`` is fixed at build time; ``current`` is rewritten once per
    animation frame.
    """

    name: str
    role: JointRole
    original: Point
    source: JointSource
    parent: str | None = None
    side: Side | None = None
    current: Point = field(init=False)

    def __post_init__(self) -> None:
        self.current = self.original

    @property
    def is_virtual(self) -> bool:
        return isinstance(self.source, VirtualJoint)

    @property
    def displacement(self) -> tuple[float, float]:
        return (self.current.x - self.original.x, self.current.y - self.original.y)

    def move_to(self, position: Point) -> None:
        self.current = position

    def reset(self) -> None:
        self.current = self.original


@dataclass(frozen=True)
class Bone:
    """An edge between two joints that repaints one source stroke."""

    name: str
    start: str
    end: str
    reference_length: float
    stroke_index: int


@dataclass
class Skeleton:
    """Joints, bones and the root joint every other joint is derived from."""

    joints: dict[str, Joint]
    bones: list[Bone] = field(default_factory=list)
    root: str = "hip"

    def __post_init__(self) -> None:
        if self.root not in self.joints:
            msg = f"root joint '{self.root}' is not in the skeleton"
            raise SkeletonError(msg)

        bone_strokes: set[int] = set()
        for bone in self.bones:
            for joint_name in (bone.start, bone.end):
                if joint_name not in self.joints:
                    msg = f"bone '{bone.name}' references missing joint '{joint_name}'"
                    raise SkeletonError(msg)
            if bone.stroke_index in bone_strokes:
                msg = f"stroke {bone.stroke_index} is bound to more than one bone"
                raise SkeletonError(msg)
            bone_strokes.add(bone.stroke_index)

        for joint in self.joints.values():
            if joint.parent is not None and joint.parent not in self.joints:
                msg = f"joint '{joint.name}' has missing parent '{joint.parent}'"
                raise SkeletonError(msg)
            if joint.role is JointRole.HEAD and isinstance(joint.source, RealJoint):
                if joint.source.stroke_index in bone_strokes:
                    msg = f"head stroke {joint.source.stroke_index} is also bound to a bone"
                    raise SkeletonError(msg)

    def __contains__(self, name: object) -> bool:
        return name in self.joints

    def get(self, name: str) -> Joint | None:
        return self.joints.get(name)

    @property
    def root_joint(self) -> Joint:
        return self.joints[self.root]

    @property
    def head(self) -> Joint | None:
        """The stroke-backed head joint, if one was found."""
        for joint in self.joints.values():
            if joint.role is JointRole.HEAD and not joint.is_virtual:
                return joint
        return None

    def by_role(self, role: JointRole) -> list[Joint]:
        return [j for j in self.joints.values() if j.role is role]

    def positions(self) -> dict[str, Point]:
        """Snapshot of every joint's current position."""
        return {name: joint.current for name, joint in self.joints.items()}

    def original_positions(self) -> dict[str, Point]:
        return {name: joint.original for name, joint in self.joints.items()}

    def reset(self) -> None:
        for joint in self.joints.values():
            joint.reset()

    def bone_length(self, bone: Bone) -> float:
        return self.joints[bone.start].current.distance_to(self.joints[bone.end].current)

    def stroke_roles(self) -> dict[int, str]:
        """Map each stroke index with an assigned role to a bone or joint name."""
        roles = {bone.stroke_index: bone.name for bone in self.bones}
        head = self.head
        if head is not None and isinstance(head.source, RealJoint):
            roles[head.source.stroke_index] = head.name
        return roles
