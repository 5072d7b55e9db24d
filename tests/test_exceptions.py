"""Tests for colorparse exceptions."""

from __future__ import annotations

from colorparse.exceptions import (
    ColorParseError,
    ConfigError,
    ExtraColorError,
    StyleParseError,
    UnknownWordError,
)


def test_hierarchy() -> None:
    """Test that all errors share a base class."""
    assert issubclass(ExtraColorError, StyleParseError)
    assert issubclass(UnknownWordError, StyleParseError)
    assert issubclass(StyleParseError, ColorParseError)
    assert issubclass(ConfigError, ColorParseError)


def test_fields() -> None:
    """Test that errors keep the input and word."""
    error = UnknownWordError("Bold Purple", "Purple")
    assert error.input == "Bold Purple"
    assert error.word == "Purple"


def test_equality() -> None:
    """Test that equality depends on kind, input and word."""
    assert ExtraColorError("a b c", "c") == ExtraColorError("a b c", "c")
    assert ExtraColorError("a b c", "c") != UnknownWordError("a b c", "c")
    assert ExtraColorError("a b c", "c") != ExtraColorError("a b c d", "c")
    assert len({ExtraColorError("x", "y"), ExtraColorError("x", "y")}) == 1
