"""Utilities for normalizing data structures for JSON serialization."""

import json
from enum import Enum
from typing import Any

from pydantic import BaseModel


def normalize_for_json(obj: Any) -> Any:
    """Normalize an object for JSON serialization.

    Converts Pydantic models to dicts (by alias, without unset optional
    fields) and Enum values to their values, while recursively processing
    collections.

    Args:
        obj: The object to normalize.

    Returns:
        A JSON-serializable version of the object.
    """
    # Enum first: str-based enums would otherwise pass as primitives
    if isinstance(obj, Enum):
        return obj.value

    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj

    if isinstance(obj, BaseModel):
        return normalize_for_json(
            obj.model_dump(mode="json", by_alias=True, exclude_none=True)
        )

    if isinstance(obj, dict):
        return {key: normalize_for_json(value) for key, value in obj.items()}

    if isinstance(obj, (list, tuple)):
        return [normalize_for_json(item) for item in obj]

    # For any other type, return as-is
    return obj


def enum_as_string(value: Any) -> str:
    """Return the canonical wire string of an enum member.

    The value is serialized to JSON and the surrounding quote characters are
    stripped, so ``RestartMode.UNLESS_STOPPED`` becomes ``unless-stopped``.
    """
    return json.dumps(normalize_for_json(value)).replace('"', "")
