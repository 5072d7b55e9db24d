"""Pytest configuration and fixtures for colorparse tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from colorparse.logger import reset_logger


@pytest.fixture(autouse=True)
def clean_logger() -> Iterator[None]:
    """Reset logger state before and after each test for isolation."""
    reset_logger()
    yield
    reset_logger()
