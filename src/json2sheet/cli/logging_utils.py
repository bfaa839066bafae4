from __future__ import annotations
import logging

_LEVELS = [logging.WARNING, logging.INFO, logging.DEBUG]


def setup_logging(verbosity: int) -> None:
    """
    - 0  -> WARNING
    - 1  -> INFO
    - 2+ -> DEBUG (including the backends' per-file messages)
    """
    level = _LEVELS[min(max(verbosity, 0), len(_LEVELS) - 1)]
    logging.basicConfig(level=level, format="%(levelname)s  %(name)s:%(message)s")
    logging.getLogger("json2sheet").setLevel(level)
