"""Configuration management for svg2excalidraw."""

import copy
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import toml

from .constants import (
    DEFAULT_CURVE_RESOLUTION,
    Colors,
    SceneDefaults,
    TextDefaults,
)
from .error_handling import ConfigurationError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "svg2excalidraw_config.toml"

DEFAULT_CONFIG: Dict[str, Dict[str, Any]] = {
    "colors": {
        "default_stroke": Colors.DEFAULT_STROKE,
        "default_text": Colors.DEFAULT_TEXT,
        "hole_fill": Colors.HOLE_FILL,
        "transparent": Colors.TRANSPARENT,
        "path_stroke": Colors.TRANSPARENT_STROKE,
    },
    "text": {
        "default_font_size": TextDefaults.FONT_SIZE,
        "font_family": TextDefaults.FONT_FAMILY,
        "char_width": TextDefaults.CHAR_WIDTH,
        "height": TextDefaults.HEIGHT,
        "line_height": TextDefaults.LINE_HEIGHT,
    },
    "paths": {
        "curve_resolution": DEFAULT_CURVE_RESOLUTION,
    },
    "scene": {
        "source": SceneDefaults.SOURCE,
        "view_background_color": Colors.VIEW_BACKGROUND,
    },
}


def _merge_config(base: Dict[str, Any], override: Dict[str, Any]) -> None:
    """Recursively merge override values into base."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _merge_config(base[key], value)
        else:
            base[key] = value


def find_config_file(filename: str = CONFIG_FILENAME) -> Optional[Path]:
    """Find a configuration file.

    Search order (local overrides global):
    1. Current directory
    2. ~/.config/svg2excalidraw/
    """
    search_locations = [
        Path.cwd(),
        Path.home() / ".config" / "svg2excalidraw",
    ]

    for location in search_locations:
        config_path = location / filename
        if config_path.exists() and config_path.is_file():
            return config_path

    return None


class Config:
    """Configuration manager for the converter."""

    def __init__(
        self,
        config_path: Union[str, Path, None] = None,
        overrides: Optional[Dict[str, Any]] = None,
        search: bool = False,
    ) -> None:
        """Initialize configuration.

        Args:
            config_path: TOML file to load on top of the defaults
            overrides: Nested dict merged last, mostly for tests
            search: Look for svg2excalidraw_config.toml when no path is given
        """
        self._config = copy.deepcopy(DEFAULT_CONFIG)
        self.config_path: Optional[Path] = None

        if config_path is None and search:
            config_path = find_config_file()

        if config_path is not None:
            self.config_path = Path(config_path)
            self._merge_config_file(self.config_path)

        if overrides:
            _merge_config(self._config, overrides)

        self.validate()

    def _merge_config_file(self, config_path: Path) -> None:
        try:
            with open(config_path, "r") as f:
                loaded_config = toml.load(f)
        except (OSError, toml.TomlDecodeError) as e:
            raise ConfigurationError(
                f"Failed to load config from {config_path}: {e}",
                {"config_path": str(config_path)},
            ) from e

        _merge_config(self._config, loaded_config)
        logger.debug(f"Configuration loaded from {config_path}")

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """Get a configuration value."""
        try:
            return self._config[section][key]
        except KeyError:
            if default is not None:
                return default
            raise ConfigurationError(f"Configuration key '{section}.{key}' not found")

    def get_section(self, section: str) -> Dict[str, Any]:
        """Get an entire configuration section."""
        try:
            return self._config[section]
        except KeyError:
            raise ConfigurationError(f"Configuration section '{section}' not found")

    @property
    def colors(self) -> Dict[str, Any]:
        """Get colour configuration."""
        return self.get_section("colors")

    @property
    def text(self) -> Dict[str, Any]:
        """Get text layout configuration."""
        return self.get_section("text")

    @property
    def paths(self) -> Dict[str, Any]:
        """Get path flattening configuration."""
        return self.get_section("paths")

    @property
    def scene(self) -> Dict[str, Any]:
        """Get scene document configuration."""
        return self.get_section("scene")

    @property
    def config(self) -> Dict[str, Any]:
        """Get the full configuration dictionary."""
        return self._config

    def validate(self) -> None:
        """Validate configuration completeness and correctness."""
        for section, keys in DEFAULT_CONFIG.items():
            if section not in self._config:
                raise ConfigurationError(
                    f"Missing required configuration section: {section}"
                )
            section_config = self.get_section(section)
            if not isinstance(section_config, dict):
                raise ConfigurationError(
                    f"Configuration section '{section}' must be a table"
                )
            for key in keys:
                if key not in section_config:
                    raise ConfigurationError(
                        f"Missing required key '{key}' in section '{section}'"
                    )

        self._validate_ranges()

    def _require_positive(self, section: str, key: str) -> None:
        value = self.get_section(section)[key]
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigurationError(f"{section}.{key} must be a number")
        if value <= 0:
            raise ConfigurationError(f"{section}.{key} must be positive")

    def _validate_ranges(self) -> None:
        for key in ("default_font_size", "char_width", "height", "line_height"):
            self._require_positive("text", key)
        self._require_positive("paths", "curve_resolution")

        for key, value in self.colors.items():
            if not isinstance(value, str) or not value:
                raise ConfigurationError(f"colors.{key} must be a non-empty string")
