"""Classifier backend protocol and shared types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from sketchanimate.models.drawing import Drawing
    from sketchanimate.models.enums import Category


@dataclass
class ClassificationResult:
    """Outcome of a classification request, with where it came from."""

    category: Category
    backend: str
    fallback: bool = False
    error: str | None = None
    metadata: dict[str, object] = field(default_factory=dict)


@runtime_checkable
class ClassifierBackend(Protocol):
    """Protocol for drawing classifiers that may be slow or remote."""

    name: str

    async def is_available(self) -> bool:
        """Check if the backend is reachable and ready."""
        ...

    async def classify(self, drawing: Drawing) -> Category:
        """Classify a drawing.  May raise or hang; callers bound it."""
        ...
