from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import xlsxwriter

from ..core.serialize import CellValue
from ..core.styles import StyleDirective
from .base import WorksheetWriter, atomic_save, sanitize_sheet_name

# used for datetime cells that carry no explicit number format
DEFAULT_DATE_FORMAT = "yyyy-mm-dd hh:mm:ss"

Coord = Tuple[int, int]


def format_properties(d: StyleDirective) -> Dict[str, Any]:
    """Translate a StyleDirective into an xlsxwriter format dict."""
    props: Dict[str, Any] = {}
    if d.bold:
        props["bold"] = True
    if d.italic:
        props["italic"] = True
    if d.underline == "single":
        props["underline"] = 1
    if d.font_color:
        props["font_color"] = f"#{d.font_color}"
    if d.fill_color:
        props["pattern"] = 1
        props["bg_color"] = f"#{d.fill_color}"
    if d.border == "thin":
        props["border"] = 1
    if d.horizontal_align:
        props["align"] = d.horizontal_align
    if d.vertical_align:
        props["valign"] = "vcenter" if d.vertical_align == "center" else d.vertical_align
    if d.number_format:
        props["num_format"] = d.number_format
    return props


class _SheetBuffer:
    def __init__(self, name: str) -> None:
        self.name = name
        self.values: Dict[Coord, CellValue] = {}
        self.styles: Dict[Coord, StyleDirective] = {}
        self.widths: Dict[int, float] = {}


class XlsxWriterWriter(WorksheetWriter):
    """
    XLSX adapter backed by xlsxwriter.

    xlsxwriter is write-once (value and format go out together, the file name
    is fixed up front), so everything is buffered and written in save().
    """

    kind = "xlsxwriter"

    def __init__(self) -> None:
        self._sheets: List[_SheetBuffer] = []

    def create_sheet(self, name: str) -> _SheetBuffer:
        title = sanitize_sheet_name(name)
        if any(s.name.lower() == title.lower() for s in self._sheets):
            raise ValueError(f"Duplicate sheet name '{title}'")
        buf = _SheetBuffer(title)
        self._sheets.append(buf)
        return buf

    def set_cell(self, sheet: _SheetBuffer, row: int, col: int, value: CellValue) -> None:
        sheet.values[(row, col)] = value

    def set_style(self, sheet: _SheetBuffer, row: int, col: int, directive: StyleDirective) -> None:
        sheet.styles[(row, col)] = directive

    def set_column_width(self, sheet: _SheetBuffer, col: int, width: float) -> None:
        sheet.widths[col] = width

    # ------------------------------
    # Output
    # ------------------------------

    @staticmethod
    def _write_value(ws, r: int, c: int, value: CellValue, fmt: Optional[Any]) -> None:
        # typed writers: ws.write() would turn "=..." strings into formulas
        if isinstance(value, bool):
            ws.write_boolean(r, c, value, fmt)
        elif isinstance(value, (int, float)):
            ws.write_number(r, c, value, fmt)
        elif isinstance(value, datetime):
            ws.write_datetime(r, c, value, fmt)
        elif value == "" or value is None:
            ws.write_blank(r, c, None, fmt)
        else:
            ws.write_string(r, c, str(value), fmt)

    def _write_workbook(self, target: Path) -> None:
        wb = xlsxwriter.Workbook(str(target), {"default_date_format": DEFAULT_DATE_FORMAT})
        formats: Dict[StyleDirective, Any] = {}
        try:
            for buf in self._sheets:
                ws = wb.add_worksheet(buf.name)
                for (row, col) in sorted(set(buf.values) | set(buf.styles)):
                    fmt = None
                    directive = buf.styles.get((row, col))
                    if directive is not None:
                        fmt = formats.get(directive)
                        if fmt is None:
                            fmt = formats[directive] = wb.add_format(format_properties(directive))
                    self._write_value(ws, row - 1, col - 1, buf.values.get((row, col), ""), fmt)
                for col, width in sorted(buf.widths.items()):
                    ws.set_column(col - 1, col - 1, width)
        finally:
            wb.close()

    def save(self, path: str | os.PathLike) -> Path:
        if not self._sheets:
            # xlsxwriter adds a default sheet on close; keep the output explicit
            self.create_sheet("Sheet1")
        return atomic_save(path, self._write_workbook)
