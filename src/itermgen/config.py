"""
Configuration for itermgen.

All tunable parameters in one place. Loaded from:
1. Defaults (this file)
2. Config file (~/.config/itermgen/config.toml) if exists
3. Environment variables (ITERMGEN_*) override file
4. CLI flags override everything
"""

from __future__ import annotations

import contextlib
import logging
import os
import tomllib  # stdlib in 3.11+
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class InputConfig:
    """Input line handling."""
    max_columns: int = 80  # longer lines are truncated with a warning


@dataclass
class OutputConfig:
    """XML output settings."""
    indent: int = 2
    escape_text: bool = False  # escape &, <, > in leaf text


@dataclass
class LoggingConfig:
    level: str = "WARNING"


@dataclass
class Config:
    """Root config with all settings."""
    input: InputConfig = field(default_factory=InputConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_config_path() -> Path:
    """Get config file path, respecting XDG."""
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "itermgen" / "config.toml"
    return Path.home() / ".config" / "itermgen" / "config.toml"


def load_config() -> Config:
    """Load config from file if exists, else return defaults."""
    config = Config()
    path = get_config_path()

    if path.exists():
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
            config = _apply_toml(config, data)
        except (OSError, tomllib.TOMLDecodeError, TypeError, ValueError) as e:
            logger.warning("Ignoring config file %s: %s", path, e)
            config = Config()

    # env var overrides
    config = _apply_env(config)

    return config


def _apply_toml(config: Config, data: dict) -> Config:
    """Apply toml data to config."""
    if "input" in data:
        i = data["input"]
        if "max_columns" in i:
            config.input.max_columns = _at_least_one(int(i["max_columns"]), "max_columns")

    if "output" in data:
        o = data["output"]
        if "indent" in o:
            config.output.indent = int(o["indent"])
        if "escape_text" in o:
            config.output.escape_text = bool(o["escape_text"])

    if "logging" in data:
        lg = data["logging"]
        if "level" in lg:
            config.logging.level = str(lg["level"]).upper()

    return config


def _at_least_one(value: int, name: str) -> int:
    if value < 1:
        raise ValueError(f"{name} must be at least 1, got {value}")
    return value


def _apply_env(config: Config) -> Config:
    """Apply environment variable overrides."""
    env_map: dict[str, tuple[str, str, type]] = {
        "ITERMGEN_MAX_COLUMNS": ("input", "max_columns", int),
        "ITERMGEN_INDENT": ("output", "indent", int),
        "ITERMGEN_ESCAPE_TEXT": ("output", "escape_text", bool),
        "ITERMGEN_LOG_LEVEL": ("logging", "level", str),
    }

    for env_key, (section, attr, conv) in env_map.items():
        val = os.environ.get(env_key)
        if val is not None:
            with contextlib.suppress(ValueError, AttributeError):
                # Bool needs special handling: "true", "1", "yes" -> True
                converted = val.lower() in ("true", "1", "yes") if conv is bool else conv(val)
                if attr == "level":
                    converted = converted.upper()
                elif attr == "max_columns":
                    converted = _at_least_one(converted, attr)
                setattr(getattr(config, section), attr, converted)

    return config


# Module-level config instance, loaded on first use
_config: Config | None = None


def get_config() -> Config:
    """Get the global config instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Drop the cached config so the next get_config() reloads it."""
    global _config
    _config = None
