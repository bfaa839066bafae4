from __future__ import annotations

import logging
import os
from pathlib import Path

from ..core.values import JsonValue, parse_json_text
from ..errors import InputNotFoundError, InputParseError

log = logging.getLogger("json2sheet.backends")


def load_json(path: str | os.PathLike, parse_dates: bool = True) -> JsonValue:
    """
    Read one UTF-8 JSON document (a leading BOM is tolerated).

    Raises
    ------
    InputNotFoundError
        If ``path`` does not exist or is not a file.
    InputParseError
        If the bytes are not UTF-8 or the text is not valid JSON.
    """
    p = Path(path)
    if not p.is_file():
        raise InputNotFoundError(f"JSON file not found: {p}", path=str(p))
    try:
        text = p.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as e:
        raise InputParseError(f"{p}: not UTF-8 text ({e.reason} at byte {e.start})", path=str(p)) from e
    log.debug("read %d chars from %s", len(text), p)
    return parse_json_text(text, parse_dates=parse_dates, source=str(p))
