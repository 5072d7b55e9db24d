"""Parser for Git-style color configuration strings."""

from __future__ import annotations

import re

from .colors import NoColor, NotAColor, ResolvedColor, resolve_color
from .exceptions import ExtraColorError, UnknownWordError
from .logger import get_logger
from .models import Color, Style

MAX_COLORS = 2  # Foreground, then background

# Unicode whitespace except the information separators U+001C-U+001F
_WHITESPACE_RE = re.compile(r"[^\S\x1c-\x1f]+")

# Attribute word -> (attribute name, enabled)
ATTRIBUTE_WORDS: dict[str, tuple[str, bool]] = {
    "bold": ("bold", True),
    "nobold": ("bold", False),
    "dim": ("dim", True),
    "nodim": ("dim", False),
    "ul": ("underline", True),
    "noul": ("underline", False),
    "blink": ("blink", True),
    "noblink": ("blink", False),
    "reverse": ("reverse", True),
    "noreverse": ("reverse", False),
}


def parse(text: str) -> Style:
    """Parse a string in Git's color configuration syntax into a Style.

    The string is a whitespace-separated list of words. Up to two colors may
    be given, foreground first and background second. Colors are a name,
    ``normal`` or ``-1`` (no color), a number from 0 to 255, or ``#RRGGBB``.
    Attribute words (bold, dim, ul, blink, reverse) switch an attribute on
    and their ``no`` forms switch it off; the last mention wins.

    Example:
        parse("bold red blue") -> Style(foreground=RED, background=BLUE, bold=True)

    Raises:
        ExtraColorError: If a third color appears
        UnknownWordError: If a word is neither an attribute nor a color
    """
    logger = get_logger()

    colors: list[Color | None] = []
    attributes = dict.fromkeys(("bold", "dim", "underline", "blink", "reverse"), False)

    words = [word for word in _WHITESPACE_RE.split(text) if word]
    for word in words:
        lowered = word.lower()

        attribute = ATTRIBUTE_WORDS.get(lowered)
        if attribute is not None:
            name, enabled = attribute
            attributes[name] = enabled
            logger.tokens("%r: %s %s", word, name, "on" if enabled else "off")
            continue

        resolution = resolve_color(lowered)
        if isinstance(resolution, NotAColor):
            raise UnknownWordError(text, word)
        if len(colors) == MAX_COLORS:
            raise ExtraColorError(text, word)

        color = resolution.color if isinstance(resolution, ResolvedColor) else None
        colors.append(color)
        slot = "foreground" if len(colors) == 1 else "background"
        if isinstance(resolution, NoColor):
            logger.tokens("%r: %s left as default", word, slot)
        else:
            logger.tokens("%r: %s %r", word, slot, color)

    colors.extend([None] * (MAX_COLORS - len(colors)))
    style = Style(foreground=colors[0], background=colors[1], **attributes)
    logger.debug("Parsed style %r -> %r", text, style)
    return style
