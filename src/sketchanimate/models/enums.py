"""Enumerations used throughout SketchAnimate."""

from enum import StrEnum


class Motion(StrEnum):
    WALK = "walk"
    JUMP = "jump"
    WAVE = "wave"
    BOUNCE = "bounce"
    ROLL = "roll"
    OPEN = "open"
    SHAKE = "shake"
    WAG = "wag"
    FLOAT = "float"
    SPIN = "spin"

    @property
    def label(self) -> str:
        return _MOTION_LABELS[self]

    @property
    def duration(self) -> float:
        """Default playback length in seconds."""
        return _MOTION_DURATIONS[self]


class Category(StrEnum):
    HUMAN = "human"
    BALL = "ball"
    BOX = "box"
    ANIMAL = "animal"
    UNKNOWN = "unknown"

    @property
    def label(self) -> str:
        return _CATEGORY_LABELS[self]

    @property
    def motions(self) -> tuple[Motion, ...]:
        """Motions offered for drawings of this category."""
        return _CATEGORY_MOTIONS[self]


class Side(StrEnum):
    LEFT = "left"
    RIGHT = "right"


class JointRole(StrEnum):
    HIP = "hip"
    SHOULDER = "shoulder"
    NECK = "neck"
    HEAD = "head"
    HAND = "hand"
    FOOT = "foot"


_MOTION_LABELS: dict[Motion, str] = {
    Motion.WALK: "Walk",
    Motion.JUMP: "Jump",
    Motion.WAVE: "Wave",
    Motion.BOUNCE: "Bounce",
    Motion.ROLL: "Roll",
    Motion.OPEN: "Open",
    Motion.SHAKE: "Shake",
    Motion.WAG: "Wag Tail",
    Motion.FLOAT: "Float",
    Motion.SPIN: "Spin",
}

_MOTION_DURATIONS: dict[Motion, float] = {
    Motion.WALK: 6.0,
    Motion.JUMP: 3.0,
    Motion.WAVE: 4.0,
    Motion.BOUNCE: 5.0,
    Motion.ROLL: 6.0,
    Motion.OPEN: 4.0,
    Motion.SHAKE: 3.0,
    Motion.WAG: 4.0,
    Motion.FLOAT: 6.0,
    Motion.SPIN: 4.0,
}

_CATEGORY_LABELS: dict[Category, str] = {
    Category.HUMAN: "Person",
    Category.BALL: "Ball",
    Category.BOX: "Box",
    Category.ANIMAL: "Animal",
    Category.UNKNOWN: "Drawing",
}

_CATEGORY_MOTIONS: dict[Category, tuple[Motion, ...]] = {
    Category.HUMAN: (Motion.WALK, Motion.JUMP, Motion.WAVE),
    Category.BALL: (Motion.BOUNCE, Motion.ROLL),
    Category.BOX: (Motion.OPEN, Motion.SHAKE),
    Category.ANIMAL: (Motion.WALK, Motion.WAG, Motion.JUMP),
    Category.UNKNOWN: (Motion.FLOAT, Motion.SPIN, Motion.SHAKE),
}
