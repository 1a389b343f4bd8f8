"""Local heuristic backend, optionally pausing to mimic analysis time."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from sketchanimate.pipeline.classifier import ShapeClassifier

if TYPE_CHECKING:
    from sketchanimate.config import ClassifierSettings, GeometrySettings
    from sketchanimate.models.drawing import Drawing
    from sketchanimate.models.enums import Category


class LocalBackend:
    """Runs :class:`ShapeClassifier` in-process.

    The optional *simulated_latency* is awaited before classifying so a UI
    can show an "analyzing" state; the classifier itself never suspends.
    """

    name = "local"

    def __init__(
        self,
        settings: ClassifierSettings | None = None,
        *,
        geometry_settings: GeometrySettings | None = None,
        simulated_latency: float = 0.0,
    ) -> None:
        self.classifier = ShapeClassifier(settings, geometry_settings)
        self.simulated_latency = simulated_latency

    async def is_available(self) -> bool:
        return True

    async def classify(self, drawing: Drawing) -> Category:
        if self.simulated_latency > 0:
            await asyncio.sleep(self.simulated_latency)
        return self.classifier.classify(drawing)
