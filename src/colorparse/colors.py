"""Resolution of single color words."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .models import BYTE_MAX, Color, IndexedColor, NamedColor, RgbColor

NO_COLOR_WORDS = frozenset({"normal", "-1"})

HEX_COLOR_LENGTH = 7  # "#" plus three two-character channels

# Unsigned byte syntax: optional plus sign, ASCII digits only
_HEX_CHANNEL_RE = re.compile(r"\+?[0-9a-fA-F]+")
_DECIMAL_RE = re.compile(r"\+?[0-9]+")

_NAMED_COLORS: dict[str, NamedColor] = {color.value: color for color in NamedColor}


@dataclass(frozen=True)
class NotAColor:
    """The word is not a color literal."""


@dataclass(frozen=True)
class NoColor:
    """The word names the terminal default color ("normal" or "-1")."""


@dataclass(frozen=True)
class ResolvedColor:
    """The word is a color literal."""

    color: Color


ColorResolution = NotAColor | NoColor | ResolvedColor


def resolve_color(word: str) -> ColorResolution:
    """Resolve a single word to a color.

    Supported forms, checked in order:
    - black, red, green, yellow, blue, magenta, cyan, white (any case)
    - normal, -1 - no color
    - #RRGGBB - 24-bit color; a channel may be "+" and one digit ("#+f+f+f")
    - 0 to 255 - 256-color palette index

    Anything else resolves to NotAColor. Never raises.
    """
    named = _NAMED_COLORS.get(word.lower())
    if named is not None:
        return ResolvedColor(named)

    if word in NO_COLOR_WORDS:
        return NoColor()

    if word.startswith("#"):
        if len(word) != HEX_COLOR_LENGTH:
            return NotAColor()
        channels = [word[1:3], word[3:5], word[5:7]]
        if not all(_HEX_CHANNEL_RE.fullmatch(channel) for channel in channels):
            return NotAColor()
        red, green, blue = (int(channel, 16) for channel in channels)
        return ResolvedColor(RgbColor(red, green, blue))

    if _DECIMAL_RE.fullmatch(word):
        # Leading zeros are allowed; the length check keeps int() off huge inputs
        digits = word.lstrip("+").lstrip("0") or "0"
        if len(digits) <= len(str(BYTE_MAX)) and int(digits) <= BYTE_MAX:
            return ResolvedColor(IndexedColor(int(digits)))

    return NotAColor()
