"""Time-bounded classification with a local heuristic fallback."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from sketchanimate.backend.base import ClassificationResult
from sketchanimate.models.enums import Category
from sketchanimate.pipeline.classifier import ShapeClassifier

if TYPE_CHECKING:
    from sketchanimate.backend.base import ClassifierBackend
    from sketchanimate.config import ClassifierSettings, GeometrySettings
    from sketchanimate.models.drawing import Drawing

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 5.0


async def classify_with_fallback(
    drawing: Drawing,
    backend: ClassifierBackend,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    settings: ClassifierSettings | None = None,
    geometry_settings: GeometrySettings | None = None,
) -> ClassificationResult:
    """Ask *backend* for a category, substituting the local result on failure.

    A timeout, an unavailable backend, any exception raised by the backend
    or an answer that is not a :class:`Category` is logged and answered by
    :class:`ShapeClassifier`, so this coroutine always returns a category.
    """
    name = getattr(backend, "name", type(backend).__name__)
    try:
        async with asyncio.timeout(timeout):
            if not await backend.is_available():
                msg = f"backend '{name}' is not available"
                raise RuntimeError(msg)
            category = await backend.classify(drawing)
        if not isinstance(category, Category):
            msg = f"returned {category!r} instead of a category"
            raise TypeError(msg)
    except TimeoutError:
        error = f"backend '{name}' timed out after {timeout:.1f}s"
    except Exception as exc:  # noqa: BLE001
        error = f"backend '{name}' failed: {exc}"
    else:
        return ClassificationResult(category=category, backend=name)

    logger.warning("%s; using local classifier", error)
    category = ShapeClassifier(settings, geometry_settings).classify(drawing)
    return ClassificationResult(category=category, backend="local", fallback=True, error=error)
