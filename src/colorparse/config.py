"""Palette configuration: named slots mapped to style strings.

A palette file is YAML with a ``styles`` mapping, for example::

    strict: false
    styles:
      diff.old: red bold
      diff.new: green
      hyperlink: "#0000ee ul"
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from .exceptions import ConfigError, StyleParseError
from .logger import get_logger
from .models import Style
from .parser import parse

DEFAULT_CONFIG_FILENAME = "colorparse.yaml"


class PaletteConfig(BaseModel):
    """Style strings keyed by slot name."""

    styles: dict[str, str] = Field(default_factory=dict)
    strict: bool = False  # Raise on invalid style strings instead of falling back

    @field_validator("styles", mode="before")
    @classmethod
    def ensure_string_values(cls, v: Any) -> Any:
        """Accept scalar YAML values such as bare color numbers."""
        if v is None:
            return {}
        if isinstance(v, dict):
            return {str(key): "" if value is None else str(value) for key, value in v.items()}  # type: ignore[misc]
        return v

    @model_validator(mode="after")
    def check_strict_styles(self) -> PaletteConfig:
        """In strict mode every style string must parse."""
        if self.strict:
            for name, value in self.styles.items():
                try:
                    parse(value)
                except StyleParseError as e:
                    raise ValueError(f"Invalid style for '{name}': {e}") from e
        return self

    def get_style(self, name: str, default: Style | None = None) -> Style:
        """Parse and return the style configured for a slot.

        Unknown slots give the default. Invalid style strings raise in strict
        mode and otherwise log a warning and give the default.
        """
        fallback = default if default is not None else Style()
        value = self.styles.get(name)
        if value is None:
            return fallback

        try:
            return parse(value)
        except StyleParseError as e:
            if self.strict:
                raise
            get_logger().warning("%s; using default style for '%s'", e, name)
            return fallback


def load_palette_config(config_path: Path | str = DEFAULT_CONFIG_FILENAME) -> PaletteConfig:
    """Load a palette configuration from a YAML file.

    Args:
        config_path: Path to the YAML file (default: colorparse.yaml in the working directory)

    Returns:
        The validated PaletteConfig

    Raises:
        FileNotFoundError: If config file doesn't exist
        ConfigError: If the file is empty, malformed or fails validation
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with config_path.open(encoding="utf-8") as f:
            data: Any = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse YAML: {e}") from e

    if not data:
        raise ConfigError("Empty configuration file")
    if not isinstance(data, dict):
        raise ConfigError("Config must contain a mapping at the root level")

    try:
        config = PaletteConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_path}: {e}") from e

    get_logger().debug("Loaded %d styles from %s", len(config.styles), config_path)
    return config
