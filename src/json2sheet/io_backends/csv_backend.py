from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Optional, Tuple

import pandas as pd

from ..core.serialize import CellValue
from ..core.styles import StyleDirective
from .base import WorksheetWriter, atomic_save, sanitize_sheet_name


class CsvWriter(WorksheetWriter):
    """
    Plain CSV output:
    - one sheet only, written row by row (header row included as data)
    - styles and column widths are ignored
    - UTF-8 without BOM
    """

    kind = "csv"

    def __init__(self) -> None:
        self._name: Optional[str] = None
        self._values: Dict[Tuple[int, int], CellValue] = {}

    def create_sheet(self, name: str) -> str:
        if self._name is not None:
            raise ValueError("CSV output holds a single sheet")
        self._name = sanitize_sheet_name(name)
        return self._name

    def set_cell(self, sheet: str, row: int, col: int, value: CellValue) -> None:
        self._values[(row, col)] = value

    def set_style(self, sheet: str, row: int, col: int, directive: StyleDirective) -> None:
        pass

    def set_column_width(self, sheet: str, col: int, width: float) -> None:
        pass

    def to_frame(self) -> pd.DataFrame:
        n_rows = max((r for r, _ in self._values), default=0)
        n_cols = max((c for _, c in self._values), default=0)
        rows = [[self._values.get((r, c), "") for c in range(1, n_cols + 1)] for r in range(1, n_rows + 1)]
        return pd.DataFrame(rows, dtype=object)

    def save(self, path: str | os.PathLike) -> Path:
        df = self.to_frame()
        return atomic_save(path, lambda tmp: df.to_csv(tmp, index=False, header=False, encoding="utf-8"))
