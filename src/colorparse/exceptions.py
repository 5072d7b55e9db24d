"""Custom exceptions for colorparse."""

from __future__ import annotations


class ColorParseError(Exception):
    """Base exception for all colorparse errors."""

    pass


class StyleParseError(ColorParseError):
    """Raised when a style string cannot be parsed.

    Carries the full original input and the offending word verbatim so callers
    can build their own diagnostics.
    """

    description = "invalid word"

    def __init__(self, input: str, word: str) -> None:  # noqa: A002 - mirrors the error fields
        self.input = input
        self.word = word
        super().__init__(input, word)

    def __str__(self) -> str:
        return f'Error parsing style "{self.input}": {self.description} "{self.word}"'

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StyleParseError):
            return NotImplemented
        return type(self) is type(other) and (self.input, self.word) == (other.input, other.word)

    def __hash__(self) -> int:
        return hash((type(self), self.input, self.word))


class ExtraColorError(StyleParseError):
    """Raised when a color appears after both color slots are used."""

    description = "extra color"


class UnknownWordError(StyleParseError):
    """Raised when a word is neither an attribute nor a color."""

    description = "unknown word:"


class ConfigError(ColorParseError):
    """Raised when a palette configuration file cannot be loaded."""

    pass
