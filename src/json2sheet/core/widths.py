from __future__ import annotations

from datetime import datetime
from typing import Dict, Optional

from .projector import Grid
from .serialize import CellValue
from .styles import StyleDirective

MAX_COLUMN_WIDTH = 50.0
MIN_COLUMN_WIDTH = 8.0
WIDTH_PADDING = 2.0


def display_text(value: CellValue, style: Optional[StyleDirective] = None) -> str:
    """Approximate the text a spreadsheet shows for ``value`` under ``style``."""
    fmt = style.number_format if style is not None else None
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, datetime):
        if fmt == "mm/dd/yyyy":
            return value.strftime("%m/%d/%Y")
        return value.strftime("%Y-%m-%d %H:%M:%S")
    if isinstance(value, int):
        # exact: a float round-trip overflows on very long integers
        if fmt == "#,##0":
            return f"{value:,}"
        if fmt == "#,##0.00":
            return f"{value:,}.00"
        return str(value)
    if isinstance(value, float):
        if fmt == "#,##0":
            return f"{value:,.0f}"
        if fmt == "#,##0.00":
            return f"{value:,.2f}"
        return str(value)
    return str(value)


def column_widths(
    grid: Grid,
    max_width: float = MAX_COLUMN_WIDTH,
    min_width: float = MIN_COLUMN_WIDTH,
    padding: float = WIDTH_PADDING,
) -> Dict[int, float]:
    """
    Width per 1-based column, measured from the rendered content of every
    row (header included) and clamped to ``min_width..max_width``.
    """
    widths: Dict[int, float] = {}
    for col in range(1, grid.n_columns + 1):
        longest = 0
        for cell in grid.column_values(col).values():
            # multi-line text is as wide as its widest line
            text = display_text(cell.value, cell.style)
            longest = max([longest] + [len(line) for line in text.splitlines()])
        widths[col] = min(max(min_width, longest + padding), max_width)
    return widths
