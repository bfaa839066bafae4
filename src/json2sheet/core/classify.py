from __future__ import annotations

from enum import Enum
from typing import Dict, Optional

from .values import JsonKind, JsonValue


class PresentationType(Enum):
    INTEGER = "integer"
    FLOAT = "float"
    DATE_VALUE = "date"
    BOOLEAN = "boolean"
    PLAIN_STRING = "string"
    EMAIL_STRING = "email"
    COMPOSITE = "composite"
    EMPTY = "empty"


_BY_KIND: Dict[JsonKind, PresentationType] = {
    JsonKind.NULL: PresentationType.EMPTY,
    JsonKind.BOOLEAN: PresentationType.BOOLEAN,
    JsonKind.INTEGER: PresentationType.INTEGER,
    JsonKind.FLOAT: PresentationType.FLOAT,
    JsonKind.DATE: PresentationType.DATE_VALUE,
    JsonKind.ARRAY: PresentationType.COMPOSITE,
    JsonKind.OBJECT: PresentationType.COMPOSITE,
}


def looks_like_email(text: str) -> bool:
    """Substring heuristic only: contains both '@' and '.'."""
    return "@" in text and "." in text


def classify(v: Optional[JsonValue]) -> PresentationType:
    """Map a value (None = absent property) to its presentation category."""
    if v is None:
        return PresentationType.EMPTY
    if v.kind is JsonKind.STRING:
        return PresentationType.EMAIL_STRING if looks_like_email(v.value) else PresentationType.PLAIN_STRING
    return _BY_KIND[v.kind]
