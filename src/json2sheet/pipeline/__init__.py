from .config import ConvertConfig, load_config
from .runner import convert, write_grid

__all__ = ["ConvertConfig", "convert", "load_config", "write_grid"]
