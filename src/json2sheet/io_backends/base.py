from __future__ import annotations

import logging
import os
import re
import uuid
from pathlib import Path
from typing import Any, Callable

from ..core.serialize import CellValue
from ..core.styles import StyleDirective
from ..errors import OutputWriteError

log = logging.getLogger("json2sheet.backends")

SheetHandle = Any

_INVALID_SHEET_CHARS = re.compile(r"[:\\/?*\[\]]")


def sanitize_sheet_name(name: str) -> str:
    """Excel constraints: no ':\\/?*[]', no control chars, at most 31 chars."""
    cleaned = _INVALID_SHEET_CHARS.sub("_", str(name or ""))
    cleaned = re.sub(r"[\x00-\x1F]", "", cleaned).strip().strip("'")
    return (cleaned or "Sheet")[:31]


def atomic_save(
        path: str | os.PathLike,
        write: Callable[[Path], None],
) -> Path:
    """
    Let ``write`` produce a temp file next to ``path``, then move it into place.
    Any failure removes the temp file, so no partial output is ever left next
    to ``path``; errors surface as OutputWriteError (interrupts pass through).
    """
    out = Path(path)
    tmp = out.with_name(f".{out.name}.tmp-{os.getpid()}-{uuid.uuid4().hex}")
    try:
        out.parent.mkdir(parents=True, exist_ok=True)
        write(tmp)
        tmp.replace(out)
    except BaseException as e:
        try:
            tmp.unlink(missing_ok=True)
        except OSError:
            log.debug("could not remove temp file %s", tmp)
        if not isinstance(e, Exception):
            raise
        raise OutputWriteError(f"Cannot write {out}: {e}", path=str(out)) from e
    log.debug("saved %s", out)
    return out


class WorksheetWriter:
    """
    Capability interface the conversion core writes through.
    Rows and columns are 1-based; a concrete backend translates as needed.
    """

    kind: str = "abstract"

    def create_sheet(self, name: str) -> SheetHandle:
        raise NotImplementedError

    def set_cell(self, sheet: SheetHandle, row: int, col: int, value: CellValue) -> None:
        raise NotImplementedError

    def set_style(self, sheet: SheetHandle, row: int, col: int, directive: StyleDirective) -> None:
        raise NotImplementedError

    def set_column_width(self, sheet: SheetHandle, col: int, width: float) -> None:
        raise NotImplementedError

    def save(self, path: str | os.PathLike) -> Path:
        raise NotImplementedError
