from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from ..core.widths import MAX_COLUMN_WIDTH
from ..errors import ConfigError


@dataclass(frozen=True)
class ConvertConfig:
    """
    Settings of one conversion.

    - formatting:        full rule set (False -> bold headers only)
    - backend:           writer kind; None -> chosen from the output suffix
    - sheet_name:        name of the single worksheet
    - max_column_width:  cap for auto-sized columns (character units)
    - parse_dates:       turn ISO date-time strings into date cells
    """
    formatting: bool = True
    backend: Optional[str] = None
    sheet_name: str = "Data"
    max_column_width: float = MAX_COLUMN_WIDTH
    parse_dates: bool = True

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ConvertConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config key(s): {', '.join(unknown)}. Allowed: {', '.join(sorted(known))}")
        cfg = cls(**dict(data))
        if not isinstance(cfg.formatting, bool) or not isinstance(cfg.parse_dates, bool):
            raise ConfigError("'formatting' and 'parse_dates' must be true/false")
        if not isinstance(cfg.max_column_width, (int, float)) or cfg.max_column_width <= 0:
            raise ConfigError("'max_column_width' must be a positive number")
        return cfg

    def with_overrides(self, **overrides: Any) -> "ConvertConfig":
        """CLI-style overrides; None means 'not given'."""
        changes: Dict[str, Any] = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)


def load_config(path: str | Path) -> ConvertConfig:
    p = Path(path)
    try:
        with p.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config {p}: {e}", path=str(p)) from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {p}: {e}", path=str(p)) from e
    if raw is None:
        return ConvertConfig()
    if not isinstance(raw, dict):
        raise ConfigError(f"Config root in {p} must be a mapping", path=str(p))
    return ConvertConfig.from_mapping(raw)
