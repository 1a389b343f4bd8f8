"""Classification backends."""

from sketchanimate.backend.base import ClassificationResult, ClassifierBackend
from sketchanimate.backend.fallback import classify_with_fallback
from sketchanimate.backend.local import LocalBackend

__all__ = [
    "ClassificationResult",
    "ClassifierBackend",
    "LocalBackend",
    "classify_with_fallback",
]
