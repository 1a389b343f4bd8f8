"""SketchAnimate - turn freehand stroke drawings into skeletal animations."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("sketchanimate")
except PackageNotFoundError:
    __version__ = "unknown"
