from .classify import PresentationType, classify, looks_like_email
from .projector import CellInstruction, Grid, TableMode, project, schema_of
from .serialize import scalar_text, serialize, to_json_text
from .styles import CellPosition, StyleDirective, style_for
from .values import JsonKind, JsonValue, from_python, parse_json_text
from .widths import column_widths, display_text

__all__ = [
    "CellInstruction",
    "CellPosition",
    "Grid",
    "JsonKind",
    "JsonValue",
    "PresentationType",
    "StyleDirective",
    "TableMode",
    "classify",
    "column_widths",
    "display_text",
    "from_python",
    "looks_like_email",
    "parse_json_text",
    "project",
    "scalar_text",
    "schema_of",
    "serialize",
    "style_for",
    "to_json_text",
]
