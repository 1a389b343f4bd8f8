"""Validation utilities for SketchAnimate drawing files."""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path

import jsonschema

_SCHEMA_PATH = Path(__file__).parent / "schemas" / "drawing.schema.json"


@lru_cache(maxsize=1)
def _drawing_schema() -> dict[str, object]:
    return json.loads(_SCHEMA_PATH.read_text())


def validate_drawing_json(data: object) -> None:
    """Validate drawing data against drawing.schema.json.

    Parameters
    ----------
    data:
        The decoded JSON document.

    Raises
    ------
    jsonschema.ValidationError
        If the data does not conform to the schema.
    """
    jsonschema.validate(data, _drawing_schema())
