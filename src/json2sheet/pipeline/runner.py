from __future__ import annotations

import logging
import os
from typing import Optional

from ..core.projector import Grid, project
from ..core.widths import column_widths
from ..io_backends.base import SheetHandle, WorksheetWriter
from ..io_backends.json_backend import load_json
from ..io_backends.router import backend_for_path, make_backend
from .config import ConvertConfig

log = logging.getLogger("json2sheet.run")


def write_grid(grid: Grid, writer: WorksheetWriter, sheet: SheetHandle, config: ConvertConfig) -> None:
    """
    Emit every cell instruction of ``grid`` to ``writer``; with formatting
    on, size the columns once all rows are written.
    """
    for cell in grid.cells:
        writer.set_cell(sheet, cell.row, cell.column, cell.value)
        if cell.style is not None:
            writer.set_style(sheet, cell.row, cell.column, cell.style)

    if config.formatting:
        # every column is auto-sized then clamped, not only the ones over the cap
        for col, width in column_widths(grid, max_width=config.max_column_width).items():
            writer.set_column_width(sheet, col, width)


def convert(
        input_path: str | os.PathLike,
        output_path: str | os.PathLike,
        config: Optional[ConvertConfig] = None,
) -> Grid:
    """
    Convert one JSON file into a one-sheet workbook:
      - load + parse the input (nothing is written if this fails)
      - project it onto a grid of styled cells
      - write the grid through the selected backend and save atomically

    Returns the projected grid.
    """
    cfg = config or ConvertConfig()

    root = load_json(input_path, parse_dates=cfg.parse_dates)
    grid = project(root, formatting_enabled=cfg.formatting)
    log.debug("projected %s grid: %d rows x %d columns", grid.mode.value, grid.n_rows, grid.n_columns)

    kind = cfg.backend or backend_for_path(output_path)
    writer = make_backend(kind)
    sheet = writer.create_sheet(cfg.sheet_name)
    write_grid(grid, writer, sheet, cfg)

    out = writer.save(output_path)
    log.debug("wrote %s via %s backend", out, writer.kind)
    return grid
