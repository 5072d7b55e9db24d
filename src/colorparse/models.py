"""Data models for colorparse."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

BYTE_MAX = 255


class NamedColor(Enum):
    """The eight basic terminal colors."""

    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"


def _check_byte(name: str, value: int) -> None:
    if not 0 <= value <= BYTE_MAX:
        raise ValueError(f"{name} must be between 0 and {BYTE_MAX}, got {value}")


@dataclass(frozen=True)
class IndexedColor:
    """A color from the 256-color palette."""

    index: int

    def __post_init__(self) -> None:
        _check_byte("index", self.index)


@dataclass(frozen=True)
class RgbColor:
    """A 24-bit color."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        _check_byte("red", self.red)
        _check_byte("green", self.green)
        _check_byte("blue", self.blue)

    @property
    def hex(self) -> str:
        """Return the color as a lowercase ``#rrggbb`` string."""
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"


Color = NamedColor | IndexedColor | RgbColor


@dataclass(frozen=True)
class Style:
    """Resolved terminal text style.

    A missing foreground or background means the terminal default is used.
    Turning this into escape sequences is left to the renderer.
    """

    foreground: Color | None = None
    background: Color | None = None
    bold: bool = False
    dim: bool = False
    underline: bool = False
    blink: bool = False
    reverse: bool = False

    @property
    def is_plain(self) -> bool:
        """True if no color and no attribute is set."""
        return self == Style()
