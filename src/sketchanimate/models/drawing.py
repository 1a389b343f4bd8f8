"""Drawing models - points, strokes and the stroke arena."""

from __future__ import annotations

import json
from pathlib import Path
from typing import NamedTuple

import jsonschema
from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from sketchanimate.validation import validate_drawing_json


class DrawingLoadError(ValueError):
    """Raised when a drawing file cannot be loaded."""


class Point(NamedTuple):
    """A 2D canvas coordinate. ``y`` grows downwards, as on screen."""

    x: float
    y: float

    def translate(self, dx: float, dy: float) -> Point:
        return Point(self.x + dx, self.y + dy)

    def distance_to(self, other: Point) -> float:
        return ((self.x - other.x) ** 2 + (self.y - other.y) ** 2) ** 0.5


class Rect(BaseModel):
    """Axis-aligned rectangle in canvas coordinates."""

    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def mid_x(self) -> float:
        return self.x + self.width / 2

    @property
    def mid_y(self) -> float:
        return self.y + self.height / 2

    @property
    def center(self) -> Point:
        return Point(self.mid_x, self.mid_y)

    @property
    def aspect_ratio(self) -> float:
        """Width over height; 1.0 when the rect has no height."""
        if self.height <= 0:
            return 1.0
        return self.width / self.height


class Stroke(BaseModel):
    """One continuous drag gesture, immutable once finalized."""

    model_config = ConfigDict(frozen=True)

    points: tuple[Point, ...] = Field(min_length=1)

    def __len__(self) -> int:
        return len(self.points)

    @property
    def start(self) -> Point:
        return self.points[0]

    @property
    def end(self) -> Point:
        return self.points[-1]

    def translated(self, dx: float, dy: float) -> Stroke:
        return Stroke(points=tuple(p.translate(dx, dy) for p in self.points))

    @classmethod
    def from_xy(cls, *coords: tuple[float, float]) -> Stroke:
        """Build a stroke from bare ``(x, y)`` pairs."""
        return cls(points=tuple(Point(float(x), float(y)) for x, y in coords))


class Drawing(BaseModel):
    """Ordered stroke arena; a stroke's index is its only identity."""

    model_config = ConfigDict(frozen=True)

    strokes: tuple[Stroke, ...] = ()

    def __len__(self) -> int:
        return len(self.strokes)

    def __getitem__(self, index: int) -> Stroke:
        return self.strokes[index]

    @property
    def is_empty(self) -> bool:
        return not self.strokes

    @property
    def point_count(self) -> int:
        return sum(len(s.points) for s in self.strokes)

    def save(self, path: Path) -> Path:
        """Save drawing to a JSON file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.model_dump_json(indent=2))
        return path

    @classmethod
    def load(cls, path: Path) -> Drawing:
        """Load and validate a drawing from a JSON file."""
        try:
            text = path.read_text()
        except FileNotFoundError:
            msg = f"drawing file not found: {path}"
            raise DrawingLoadError(msg) from None
        except PermissionError:
            msg = f"permission denied reading drawing file: {path}"
            raise DrawingLoadError(msg) from None
        except IsADirectoryError:
            msg = f"drawing path is a directory: {path}"
            raise DrawingLoadError(msg) from None
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            msg = f"drawing file contains invalid JSON: {exc}"
            raise DrawingLoadError(msg) from None
        try:
            validate_drawing_json(data)
        except jsonschema.ValidationError as exc:
            msg = f"drawing file does not match schema: {exc.message}"
            raise DrawingLoadError(msg) from None
        try:
            return cls.model_validate(data)
        except PydanticValidationError as exc:
            msg = f"drawing file has invalid structure: {exc}"
            raise DrawingLoadError(msg) from None
