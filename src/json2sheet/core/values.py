from __future__ import annotations

import json
import math
import re
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Iterable, List, Optional, Tuple

import pandas as pd

from ..errors import InputParseError


class JsonKind(Enum):
    NULL = "null"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    DATE = "date"
    ARRAY = "array"
    OBJECT = "object"


COMPOSITE_KINDS = frozenset({JsonKind.ARRAY, JsonKind.OBJECT})

# Full date-time stamps only; "2024-01-15" stays a plain string.
_ISO_STAMP = re.compile(
    r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d{1,7})?(Z|[+-]\d{2}:\d{2})?$"
)


@dataclass(frozen=True)
class JsonValue:
    """
    Immutable tagged JSON value.

    - ARRAY holds a tuple of JsonValue
    - OBJECT holds a tuple of (key, JsonValue) pairs in declaration order
    - DATE holds a naive datetime
    """

    kind: JsonKind
    value: Any = None

    # -- constructors ----------------------------------------------------------

    @classmethod
    def null(cls) -> "JsonValue":
        return cls(JsonKind.NULL)

    @classmethod
    def boolean(cls, b: bool) -> "JsonValue":
        return cls(JsonKind.BOOLEAN, bool(b))

    @classmethod
    def integer(cls, i: int) -> "JsonValue":
        return cls(JsonKind.INTEGER, int(i))

    @classmethod
    def float_(cls, f: float) -> "JsonValue":
        return cls(JsonKind.FLOAT, float(f))

    @classmethod
    def string(cls, s: str) -> "JsonValue":
        return cls(JsonKind.STRING, s)

    @classmethod
    def date(cls, d: datetime) -> "JsonValue":
        return cls(JsonKind.DATE, d)

    @classmethod
    def array(cls, items: Iterable["JsonValue"]) -> "JsonValue":
        return cls(JsonKind.ARRAY, tuple(items))

    @classmethod
    def object(cls, pairs: Iterable[Tuple[str, "JsonValue"]]) -> "JsonValue":
        return cls(JsonKind.OBJECT, tuple(pairs))

    # -- accessors -------------------------------------------------------------

    @property
    def is_composite(self) -> bool:
        return self.kind in COMPOSITE_KINDS

    def keys(self) -> List[str]:
        if self.kind is not JsonKind.OBJECT:
            raise TypeError(f"keys() needs an object, got {self.kind.value}")
        return [k for k, _ in self.value]

    def get(self, key: str) -> Optional["JsonValue"]:
        """Property lookup; None when absent or when self is not an object."""
        if self.kind is not JsonKind.OBJECT:
            return None
        for k, v in self.value:
            if k == key:
                return v
        return None


# ---------------------------------------------------------------------
# Building from Python / text
# ---------------------------------------------------------------------

def parse_date_stamp(text: str) -> Optional[datetime]:
    """
    Return a naive datetime for an ISO-8601 date-time stamp, else None.
    Offset-aware stamps are shifted to UTC before the zone is dropped.
    """
    if not _ISO_STAMP.match(text):
        return None
    try:
        ts = pd.Timestamp(text)
    except ValueError:
        return None
    if ts.tzinfo is not None:
        ts = ts.tz_convert("UTC").tz_localize(None)
    return ts.to_pydatetime()


def from_python(obj: Any, parse_dates: bool = True) -> JsonValue:
    """Build a JsonValue from the output of json.loads (or an equivalent tree)."""
    if obj is None:
        return JsonValue.null()
    # bool before int: bool is an int subclass
    if isinstance(obj, bool):
        return JsonValue.boolean(obj)
    if isinstance(obj, int):
        return JsonValue.integer(obj)
    if isinstance(obj, float):
        # 1e999 parses to inf; a spreadsheet cell cannot hold it
        if not math.isfinite(obj):
            raise InputParseError(f"number out of range: {obj!r}")
        return JsonValue.float_(obj)
    if isinstance(obj, datetime):
        return JsonValue.date(obj)
    if isinstance(obj, str):
        if parse_dates:
            stamp = parse_date_stamp(obj)
            if stamp is not None:
                return JsonValue.date(stamp)
        return JsonValue.string(obj)
    if isinstance(obj, dict):
        return JsonValue.object((str(k), from_python(v, parse_dates)) for k, v in obj.items())
    if isinstance(obj, (list, tuple)):
        return JsonValue.array(from_python(v, parse_dates) for v in obj)
    raise TypeError(f"Unsupported JSON value of type {type(obj).__name__}")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def parse_json_text(text: str, parse_dates: bool = True, source: Optional[str] = None) -> JsonValue:
    """Parse one JSON document into a JsonValue; raises InputParseError."""
    try:
        # plain dict keeps first position / last value for duplicate keys
        raw = json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        where = f"{source}: " if source else ""
        raise InputParseError(
            f"{where}invalid JSON at line {e.lineno}, column {e.colno}: {e.msg}",
            path=source,
            line=e.lineno,
            column=e.colno,
        ) from e
    except ValueError as e:
        where = f"{source}: " if source else ""
        raise InputParseError(f"{where}invalid JSON: {e}", path=source) from e
    try:
        return from_python(raw, parse_dates=parse_dates)
    except InputParseError as e:
        where = f"{source}: " if source else ""
        raise InputParseError(f"{where}{e}", path=source) from e
