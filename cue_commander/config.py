"""Configuration management for cue-commander."""

from __future__ import annotations

import codecs
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomli_w

from cue_commander.exceptions import (
    ConfigParseError,
    ConfigValidationError,
)

DEFAULT_ENCODING = "utf-8"


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".config" / "cue-commander" / "config.toml"


@dataclass
class Config:
    """Application configuration.

    Attributes:
        strict: Stop at the first bad cue sheet line (False skips bad lines).
        encoding: Character encoding used to read .cue files.
        colored_output: Whether to use colored terminal output.
        config_path: Path where config was loaded from (None if defaults).
    """

    strict: bool = True
    encoding: str = DEFAULT_ENCODING
    colored_output: bool = True
    config_path: Path | None = None

    def validate(self) -> list[str]:
        """Validate configuration values.

        Returns:
            List of warning messages for non-fatal issues.
        """
        warnings: list[str] = []

        try:
            codecs.lookup(self.encoding)
        except LookupError:
            warnings.append(
                f"Unknown encoding '{self.encoding}', falling back to {DEFAULT_ENCODING}"
            )
            self.encoding = DEFAULT_ENCODING

        return warnings


def load_config(config_path: Path | None = None) -> tuple[Config, list[str]]:
    """Load configuration from file or use defaults.

    Args:
        config_path: Explicit config file path. If None, uses default location.

    Returns:
        Tuple of (Config object, list of warning messages).

    Raises:
        ConfigParseError: If config file exists but has invalid syntax.
        ConfigValidationError: If config values are invalid.
    """
    warnings: list[str] = []

    if config_path is None:
        config_path = get_default_config_path()

    config_path = config_path.expanduser().resolve()

    if not config_path.exists():
        config = Config()
        warnings.append(
            f"No config file found at {config_path}. Using defaults. "
            f"Create config with: cue-commander init-config"
        )
        return config, warnings + config.validate()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(config_path, str(e)) from e

    config = _parse_config_dict(data, config_path)
    return config, warnings + config.validate()


def _parse_config_dict(data: dict[str, Any], config_path: Path) -> Config:
    """Parse configuration dictionary into Config object."""
    config = Config(config_path=config_path)

    # Parse [parser] section
    parser = data.get("parser", {})
    if "strict" in parser:
        value = parser["strict"]
        if not isinstance(value, bool):
            raise ConfigValidationError("parser.strict", value, "must be a boolean")
        config.strict = value

    if "encoding" in parser:
        value = parser["encoding"]
        if not isinstance(value, str):
            raise ConfigValidationError("parser.encoding", value, "must be a string")
        config.encoding = value

    # Parse [display] section
    display = data.get("display", {})
    if "colored_output" in display:
        value = display["colored_output"]
        if not isinstance(value, bool):
            raise ConfigValidationError("display.colored_output", value, "must be a boolean")
        config.colored_output = value

    return config


def save_config(config: Config, config_path: Path | None = None) -> None:
    """Save configuration to file.

    Args:
        config: Configuration to save.
        config_path: Path to save to. If None, uses config.config_path or default.
    """
    if config_path is None:
        config_path = config.config_path or get_default_config_path()

    config_path = config_path.expanduser().resolve()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data: dict[str, Any] = {
        "display": {
            "colored_output": config.colored_output,
        },
    }

    # Build [parser] section (only if non-default values)
    parser_data: dict[str, Any] = {}
    if not config.strict:
        parser_data["strict"] = False
    if config.encoding != DEFAULT_ENCODING:
        parser_data["encoding"] = config.encoding
    if parser_data:
        data["parser"] = parser_data

    with open(config_path, "wb") as f:
        tomli_w.dump(data, f)
