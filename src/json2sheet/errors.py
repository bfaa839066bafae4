from __future__ import annotations

from typing import Optional


class Json2SheetError(Exception):
    """Base class for every failure of a single conversion."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


class InputNotFoundError(Json2SheetError):
    """The input JSON path does not exist (or is not a file)."""


class InputParseError(Json2SheetError):
    """The input text is not a valid JSON document."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ) -> None:
        super().__init__(message, path)
        self.line = line
        self.column = column


class OutputWriteError(Json2SheetError):
    """Saving the workbook failed (permissions, bad path, disk full, ...)."""


class ConfigError(Json2SheetError):
    """The YAML config file is unreadable or has unexpected content."""
