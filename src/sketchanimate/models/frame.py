"""Per-frame animation output models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from sketchanimate.models.drawing import Point, Stroke


class PoseFrame(BaseModel):
    """Joint positions for a single frame of a joint-driven motion."""

    model_config = ConfigDict(frozen=True)

    frame_number: int = Field(ge=0)
    timestamp: float = Field(ge=0.0)
    joints: dict[str, Point]

    @classmethod
    def at(cls, frame_number: int, joints: dict[str, Point], frame_rate: float) -> PoseFrame:
        return cls(frame_number=frame_number, timestamp=frame_number / frame_rate, joints=joints)


class AnimationFrame(BaseModel):
    """One drawable frame: a stroke per source stroke index."""

    model_config = ConfigDict(frozen=True)

    frame_number: int = Field(ge=0)
    timestamp: float = Field(ge=0.0)
    strokes: tuple[Stroke, ...]

    @classmethod
    def at(cls, frame_number: int, strokes: list[Stroke], frame_rate: float) -> AnimationFrame:
        return cls(
            frame_number=frame_number,
            timestamp=frame_number / frame_rate,
            strokes=tuple(strokes),
        )

    def describe(self) -> str:
        return f"Frame {self.frame_number}: {len(self.strokes)} strokes at {self.timestamp:.1f}s"
