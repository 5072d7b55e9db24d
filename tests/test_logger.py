"""Tests for logger configuration."""

from __future__ import annotations

import io

import pytest

from colorparse import logger as log


class TestSetupLogger:
    """Test verbosity handling."""

    @pytest.mark.parametrize(
        ("verbosity", "warnings", "tokens", "debug"),
        [
            (0, False, False, False),
            (1, True, False, False),
            (2, True, True, False),
            (3, True, True, True),
            (99, False, False, False),
        ],
    )
    def test_levels(self, verbosity: int, warnings: bool, tokens: bool, debug: bool) -> None:
        """Test which levels each verbosity enables."""
        log.setup_logger(verbosity, io.StringIO())
        assert log.warnings_enabled() == warnings
        assert log.tokens_enabled() == tokens
        assert log.debug_enabled() == debug

    def test_tokens_method(self) -> None:
        """Test the custom tokens() method."""
        output = io.StringIO()
        log.setup_logger(log.VERBOSITY_TOKENS, output)
        log.get_logger().tokens("word %s", "red")
        assert output.getvalue() == "word red\n"

    def test_reconfigure(self) -> None:
        """Test that reconfiguring replaces the handler."""
        log.setup_logger(1, io.StringIO())
        log.setup_logger(1, io.StringIO())
        assert len(log.get_logger().handlers) == 1

    def test_reset(self) -> None:
        """Test that reset_logger clears handlers."""
        log.setup_logger(3, io.StringIO())
        log.reset_logger()
        assert log.get_logger().handlers == []
        assert not log.warnings_enabled()

    def test_debug_shows_finished_style(self) -> None:
        """Test that verbosity 3 reports the parsed Style."""
        from colorparse import parse

        output = io.StringIO()
        log.setup_logger(log.VERBOSITY_DEBUG, output)
        parse("bold red")
        assert "Parsed style 'bold red'" in output.getvalue()
        assert log.get_logger().propagate is False
