from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

from .classify import PresentationType, classify
from .serialize import CellValue, scalar_text, serialize
from .styles import CellPosition, StyleDirective, style_for
from .values import JsonKind, JsonValue

LIST_HEADER = "Value"
PROPERTY_HEADERS = ("Property", "Value")


class TableMode(Enum):
    EMPTY = "empty"            # empty array: nothing at all
    TABULAR = "tabular"        # array of objects: one column per schema key
    LIST = "list"              # array of anything else: single "Value" column
    PROPERTIES = "properties"  # object: Property/Value pairs
    SCALAR = "scalar"          # bare scalar: one unstyled cell


@dataclass(frozen=True)
class CellInstruction:
    row: int      # 1-based
    column: int   # 1-based
    value: CellValue
    style: Optional[StyleDirective] = None


@dataclass
class Grid:
    mode: TableMode
    cells: List[CellInstruction] = field(default_factory=list)

    @property
    def n_rows(self) -> int:
        return max((c.row for c in self.cells), default=0)

    @property
    def n_columns(self) -> int:
        return max((c.column for c in self.cells), default=0)

    def at(self, row: int, column: int) -> Optional[CellInstruction]:
        """Linear-scan lookup, for inspecting a grid in tests and debugging."""
        for c in self.cells:
            if c.row == row and c.column == column:
                return c
        return None

    def rows(self) -> List[List[CellValue]]:
        """Values as a dense row-major list; unset cells are ""."""
        out: List[List[CellValue]] = [[""] * self.n_columns for _ in range(self.n_rows)]
        for c in self.cells:
            out[c.row - 1][c.column - 1] = c.value
        return out

    def column_values(self, column: int) -> Dict[int, CellInstruction]:
        return {c.row: c for c in self.cells if c.column == column}


# ---------------------------------------------------------------------
# Cell builders
# ---------------------------------------------------------------------

def _header_cells(labels: Sequence[str], formatting_enabled: bool) -> List[CellInstruction]:
    style = style_for(None, None, CellPosition(is_header=True), formatting_enabled)
    return [CellInstruction(1, col, label, style) for col, label in enumerate(labels, start=1)]


def _data_cell(
    row_index: int,
    column: int,
    value: Optional[JsonValue],
    formatting_enabled: bool,
    ptype: Optional[PresentationType] = None,
) -> CellInstruction:
    ptype = ptype or classify(value)
    raw = value.value if value is not None else None
    style = style_for(ptype, raw, CellPosition(is_header=False, row_index=row_index), formatting_enabled)
    # data rows start below the single header row
    return CellInstruction(row_index + 2, column, serialize(value), style)


# ---------------------------------------------------------------------
# Shapes
# ---------------------------------------------------------------------

def schema_of(items: Sequence[JsonValue]) -> List[str]:
    """Column keys, taken from the first element only."""
    if not items or items[0].kind is not JsonKind.OBJECT:
        return []
    return items[0].keys()


def _project_tabular(items: Tuple[JsonValue, ...], formatting_enabled: bool) -> Grid:
    schema = schema_of(items)
    grid = Grid(TableMode.TABULAR, _header_cells(schema, formatting_enabled))
    for i, item in enumerate(items):
        # non-object elements have no properties -> an all-blank row
        for col, key in enumerate(schema, start=1):
            grid.cells.append(_data_cell(i, col, item.get(key), formatting_enabled))
    return grid


def _project_list(items: Tuple[JsonValue, ...], formatting_enabled: bool) -> Grid:
    grid = Grid(TableMode.LIST, _header_cells([LIST_HEADER], formatting_enabled))
    for i, item in enumerate(items):
        grid.cells.append(_data_cell(i, 1, item, formatting_enabled))
    return grid


def _project_properties(obj: JsonValue, formatting_enabled: bool) -> Grid:
    grid = Grid(TableMode.PROPERTIES, _header_cells(PROPERTY_HEADERS, formatting_enabled))
    for i, (key, value) in enumerate(obj.value):
        name = JsonValue.string(key)
        grid.cells.append(_data_cell(i, 1, name, formatting_enabled, PresentationType.PLAIN_STRING))
        grid.cells.append(_data_cell(i, 2, value, formatting_enabled))
    return grid


def project(root: JsonValue, formatting_enabled: bool = True) -> Grid:
    """
    Decide the table shape for ``root`` and build its cells.

    1. empty array            -> empty grid, not even a header
    2. array, first is object -> tabular; schema = keys of element 0
    3. any other array        -> single "Value" column
    4. object                 -> Property/Value rows in declaration order
    5. scalar                 -> one unstyled cell with its string form
    """
    if root.kind is JsonKind.ARRAY:
        items = root.value
        if not items:
            return Grid(TableMode.EMPTY)
        if items[0].kind is JsonKind.OBJECT:
            return _project_tabular(items, formatting_enabled)
        return _project_list(items, formatting_enabled)
    if root.kind is JsonKind.OBJECT:
        return _project_properties(root, formatting_enabled)
    return Grid(TableMode.SCALAR, [CellInstruction(1, 1, scalar_text(root))])
