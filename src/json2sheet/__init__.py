from .core import JsonValue, PresentationType, StyleDirective, classify, project, serialize, style_for
from .errors import (
    ConfigError,
    InputNotFoundError,
    InputParseError,
    Json2SheetError,
    OutputWriteError,
)
from .pipeline import ConvertConfig, convert

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "ConvertConfig",
    "InputNotFoundError",
    "InputParseError",
    "Json2SheetError",
    "JsonValue",
    "OutputWriteError",
    "PresentationType",
    "StyleDirective",
    "classify",
    "convert",
    "project",
    "serialize",
    "style_for",
]
