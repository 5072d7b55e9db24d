"""Logging configuration for colorparse with custom verbosity levels."""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

# Between DEBUG (10) and INFO (20) - for verbosity level 2
TOKENS_LEVEL = 15

logging.addLevelName(TOKENS_LEVEL, "TOKENS")

# Verbosity level constants for external use
VERBOSITY_SILENT = 0  # Only errors
VERBOSITY_WARNINGS = 1  # Show style fallbacks
VERBOSITY_TOKENS = 2  # Show how each word was classified
VERBOSITY_DEBUG = 3  # Full debug output


class ColorParseLogger(logging.Logger):
    """Custom logger with a per-token tracing method."""

    def tokens(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log token classification (verbosity level 2)."""
        if self.isEnabledFor(TOKENS_LEVEL):
            self._log(TOKENS_LEVEL, msg, args, **kwargs)


def get_logger() -> ColorParseLogger:
    """Get the colorparse logger instance (singleton).

    Use setup_logger() to configure it before first use.
    """
    logging.setLoggerClass(ColorParseLogger)
    logger = logging.getLogger("colorparse")
    assert isinstance(logger, ColorParseLogger)
    return logger


# Logging level used for each verbosity; unknown values fall back to errors only
_VERBOSITY_LEVELS = {
    VERBOSITY_SILENT: logging.ERROR,  # Nothing from a successful parse
    VERBOSITY_WARNINGS: logging.WARNING,  # Palette entries replaced by a default
    VERBOSITY_TOKENS: TOKENS_LEVEL,  # One line per word: attribute or color slot
    VERBOSITY_DEBUG: logging.DEBUG,  # Finished Style values and loaded palettes
}


def setup_logger(verbosity: int, stream: TextIO | None = None) -> None:
    """Route colorparse diagnostics to a stream.

    Parsing itself never prints; this is how an application sees why a palette
    entry fell back to its default or how a style string was read. Calling it
    again replaces the previous handler.

    Args:
        verbosity: 0=errors only, 1=style fallbacks, 2=word classification, 3=debug
        stream: Where messages go (defaults to sys.stderr)
    """
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(_VERBOSITY_LEVELS.get(verbosity, logging.ERROR))

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False


def reset_logger() -> None:
    """Drop any handler installed by setup_logger() and go back to errors only."""
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(logging.ERROR)
    logger.propagate = True


def warnings_enabled() -> bool:
    """Check if warning-level logging is enabled (verbosity >= 1)."""
    return get_logger().isEnabledFor(logging.WARNING)


def tokens_enabled() -> bool:
    """Check if token-level logging is enabled (verbosity >= 2)."""
    return get_logger().isEnabledFor(TOKENS_LEVEL)


def debug_enabled() -> bool:
    """Check if debug-level logging is enabled (verbosity >= 3)."""
    return get_logger().isEnabledFor(logging.DEBUG)
