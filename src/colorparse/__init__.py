"""Parse Git-style color configuration strings into terminal styles."""

from .colors import ColorResolution, NoColor, NotAColor, ResolvedColor, resolve_color
from .config import PaletteConfig, load_palette_config
from .exceptions import (
    ColorParseError,
    ConfigError,
    ExtraColorError,
    StyleParseError,
    UnknownWordError,
)
from .logger import get_logger, setup_logger
from .models import Color, IndexedColor, NamedColor, RgbColor, Style
from .parser import parse

__all__ = [
    "Color",
    "ColorParseError",
    "ColorResolution",
    "ConfigError",
    "ExtraColorError",
    "IndexedColor",
    "NamedColor",
    "NoColor",
    "NotAColor",
    "PaletteConfig",
    "ResolvedColor",
    "RgbColor",
    "Style",
    "StyleParseError",
    "UnknownWordError",
    "get_logger",
    "load_palette_config",
    "parse",
    "resolve_color",
    "setup_logger",
]
