"""JSON value classification.

Parsed JSON arrives as plain Python values. Everything downstream dispatches on
a JsonKind tag instead of probing Python types ad hoc.
"""
from __future__ import annotations

import json
import math
from enum import Enum
from typing import Any

from jsoncards.card_extractor.errors import InvalidInput


class JsonKind(str, Enum):
    null = "null"
    boolean = "boolean"
    number = "number"
    string = "string"
    array = "array"
    object = "object"


CONTAINER_KINDS = frozenset({JsonKind.array, JsonKind.object})


def json_kind(value: Any) -> JsonKind:
    """Return the JSON kind of a parsed value."""
    if value is None:
        return JsonKind.null
    # bool is a subclass of int, so it must be checked first
    if isinstance(value, bool):
        return JsonKind.boolean
    if isinstance(value, (int, float)):
        return JsonKind.number
    if isinstance(value, str):
        return JsonKind.string
    if isinstance(value, (list, tuple)):
        return JsonKind.array
    if isinstance(value, dict):
        return JsonKind.object
    raise InvalidInput(f"not a JSON value: {type(value).__name__}")


def is_serializable(value: Any) -> bool:
    """True when the value survives a strict JSON round trip."""
    try:
        json.dumps(value, allow_nan=False)
    except (TypeError, ValueError, RecursionError):
        return False
    return True


def contains_null(value: Any) -> bool:
    """True when a null appears anywhere inside the value."""
    kind = json_kind(value)
    if kind is JsonKind.null:
        return True
    if kind is JsonKind.array:
        return any(contains_null(item) for item in value)
    if kind is JsonKind.object:
        return any(contains_null(item) for item in value.values())
    return False


def format_number(value: Any) -> str:
    if isinstance(value, float) and not math.isfinite(value):
        return "NaN" if math.isnan(value) else ("Infinity" if value > 0 else "-Infinity")
    return str(value)
