from __future__ import annotations

import json
from datetime import datetime
from typing import Any, Optional, Union

from .values import JsonKind, JsonValue

CellValue = Union[int, float, bool, datetime, str]

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def _jsonable(v: JsonValue) -> Any:
    if v.kind is JsonKind.ARRAY:
        return [_jsonable(item) for item in v.value]
    if v.kind is JsonKind.OBJECT:
        return {k: _jsonable(item) for k, item in v.value}
    if v.kind is JsonKind.DATE:
        return v.value.isoformat()
    return v.value


def to_json_text(v: JsonValue) -> str:
    """Canonical compact JSON text, e.g. [1,2,3] or {"a":1}."""
    return json.dumps(_jsonable(v), separators=(",", ":"), ensure_ascii=False)


def serialize(v: Optional[JsonValue]) -> CellValue:
    """
    Primitive written into a cell.

    Numbers, booleans and dates pass through unchanged; composites become
    compact JSON text; null and absent values become "". Integers outside
    int64 become their exact decimal text, since a numeric cell would lose
    digits.
    """
    if v is None or v.kind is JsonKind.NULL:
        return ""
    if v.is_composite:
        return to_json_text(v)
    if v.kind is JsonKind.INTEGER and not INT64_MIN <= v.value <= INT64_MAX:
        return str(v.value)
    return v.value


def scalar_text(v: JsonValue) -> str:
    """String form of a scalar root value."""
    if v.kind is JsonKind.NULL:
        return ""
    if v.kind is JsonKind.STRING:
        return v.value
    if v.kind is JsonKind.DATE:
        return v.value.isoformat()
    return to_json_text(v)
