from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Type

from .base import WorksheetWriter
from .csv_backend import CsvWriter
from .openpyxl_backend import OpenpyxlWriter
from .xlsxwriter_backend import XlsxWriterWriter

DEFAULT_BACKEND = "openpyxl"

# Registry of available writers keyed by "kind"
_BACKENDS: Dict[str, Type[WorksheetWriter]] = {
    "openpyxl": OpenpyxlWriter,
    "xlsxwriter": XlsxWriterWriter,
    "csv": CsvWriter,
}

_ALIASES: Dict[str, str] = {
    "xlsx": DEFAULT_BACKEND,
}


def available_backends() -> list[str]:
    return sorted(_BACKENDS)


def make_backend(kind: str) -> WorksheetWriter:
    """
    Factory returning a fresh writer of the requested kind.

    Parameters
    ----------
    kind : str
        Short identifier used in config/CLI (e.g., 'openpyxl', 'xlsxwriter', 'csv').

    Returns
    -------
    WorksheetWriter
        Fresh instance of the backend.

    Raises
    ------
    KeyError
        If `kind` is unknown.
    """
    k = (kind or "").strip().lower()
    k = _ALIASES.get(k, k)
    cls = _BACKENDS.get(k)
    if cls is None:
        available = ", ".join(available_backends())
        raise KeyError(f"Unknown backend kind '{kind}'. Available: {available}")
    return cls()


def backend_for_path(path: str | os.PathLike) -> str:
    """Pick a backend kind from the output file suffix."""
    return "csv" if Path(path).suffix.lower() == ".csv" else DEFAULT_BACKEND
