from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Optional, Tuple

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from ..core.serialize import CellValue
from ..core.styles import StyleDirective
from .base import WorksheetWriter, atomic_save, sanitize_sheet_name

_Resolved = Tuple[Font, Optional[PatternFill], Optional[Border], Optional[Alignment]]


def _to_openpyxl(d: StyleDirective) -> _Resolved:
    font = Font(bold=d.bold, italic=d.italic, underline=d.underline, color=d.font_color)
    fill = PatternFill("solid", fgColor=d.fill_color) if d.fill_color else None
    border = None
    if d.border:
        side = Side(style=d.border)
        border = Border(left=side, right=side, top=side, bottom=side)
    alignment = None
    if d.horizontal_align or d.vertical_align:
        alignment = Alignment(horizontal=d.horizontal_align, vertical=d.vertical_align)
    return font, fill, border, alignment


class OpenpyxlWriter(WorksheetWriter):
    """
    XLSX adapter writing straight into an in-memory openpyxl Workbook.
    """

    kind = "openpyxl"

    def __init__(self) -> None:
        self._wb = Workbook()
        self._wb.remove(self._wb.active)
        self._resolved: Dict[StyleDirective, _Resolved] = {}

    def create_sheet(self, name: str) -> Worksheet:
        return self._wb.create_sheet(title=sanitize_sheet_name(name))

    def set_cell(self, sheet: Worksheet, row: int, col: int, value: CellValue) -> None:
        cell = sheet.cell(row=row, column=col)
        if isinstance(value, str):
            value = ILLEGAL_CHARACTERS_RE.sub("", value)
            if value == "":
                cell.value = None
                return
        cell.value = value
        # text only, never a formula
        if isinstance(value, str) and value.startswith("="):
            cell.data_type = "s"

    def set_style(self, sheet: Worksheet, row: int, col: int, directive: StyleDirective) -> None:
        resolved = self._resolved.get(directive)
        if resolved is None:
            resolved = self._resolved[directive] = _to_openpyxl(directive)
        font, fill, border, alignment = resolved

        cell = sheet.cell(row=row, column=col)
        cell.font = font
        if fill is not None:
            cell.fill = fill
        if border is not None:
            cell.border = border
        if alignment is not None:
            cell.alignment = alignment
        if directive.number_format:
            cell.number_format = directive.number_format

    def set_column_width(self, sheet: Worksheet, col: int, width: float) -> None:
        sheet.column_dimensions[get_column_letter(col)].width = width

    def save(self, path: str | os.PathLike) -> Path:
        if not self._wb.worksheets:
            # a workbook needs at least one visible sheet
            self.create_sheet("Sheet1")
        return atomic_save(path, lambda tmp: self._wb.save(tmp))
