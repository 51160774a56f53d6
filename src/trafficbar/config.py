"""Configuration loading and management."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from trafficbar.preferences import parse_hide_list


@dataclass
class AppConfig:
    """Application configuration with sensible defaults."""

    # Refresh intervals (seconds)
    interval: float = 1.5
    connectivity_interval: float = 2.0

    # Counter source; empty interface sums every non-loopback interface
    interface: str = ""
    proc_path: str = "/proc"

    # Indicator
    hide: list[str] = field(default_factory=list)
    text_color: str = ""

    # Logging
    log_file: str = ""
    log_level: str = "WARNING"

    @classmethod
    def load(
        cls,
        config_path: str | None = None,
        cli_overrides: dict | None = None,
    ) -> AppConfig:
        """Load config from TOML file with CLI overrides.

        Resolution order: CLI flag > env var > config file > defaults
        """
        config = cls()

        toml_path = _resolve_config_path(config_path)
        if toml_path and toml_path.exists():
            with open(toml_path, "rb") as f:
                data = tomllib.load(f)
            _apply_toml(config, data)

        _apply_env(config)

        if cli_overrides:
            _apply_overrides(config, cli_overrides)

        config.validate()
        return config

    def validate(self) -> None:
        """Raise ValueError for settings the indicator cannot run with."""
        if self.interval <= 0:
            raise ValueError(f"interval must be positive, got {self.interval}")
        if self.connectivity_interval <= 0:
            raise ValueError(
                f"connectivity_interval must be positive, got {self.connectivity_interval}"
            )


def _resolve_config_path(explicit_path: str | None) -> Path | None:
    """Resolve config file path."""
    if explicit_path:
        return Path(explicit_path)
    xdg = os.environ.get("XDG_CONFIG_HOME", str(Path.home() / ".config"))
    candidates = [
        Path(xdg) / "trafficbar" / "config.toml",
        Path.home() / ".trafficbar.toml",
    ]
    for p in candidates:
        if p.exists():
            return p
    return None


def _apply_toml(config: AppConfig, data: dict) -> None:
    """Apply TOML data to config."""
    # section -> {toml key: config attribute}
    section_map = {
        "refresh": {"interval": "interval", "connectivity_interval": "connectivity_interval"},
        "indicator": {"hide": "hide", "color": "text_color"},
        "log": {"file": "log_file", "level": "log_level"},
    }

    for key in ("interface", "proc_path"):
        if key in data:
            setattr(config, key, data[key])

    for section, keys in section_map.items():
        if section not in data:
            continue
        for short_key, attr in keys.items():
            if short_key in data[section]:
                setattr(config, attr, data[section][short_key])

    # hide may be given as "a,b" as well as a list
    if isinstance(config.hide, str):
        config.hide = sorted(parse_hide_list(config.hide))
    config.interval = float(config.interval)
    config.connectivity_interval = float(config.connectivity_interval)


def _apply_env(config: AppConfig) -> None:
    """Apply environment variable overrides (TRAFFICBAR_ prefix)."""
    env_map = {
        "TRAFFICBAR_INTERVAL": ("interval", float),
        "TRAFFICBAR_INTERFACE": ("interface", str),
        "TRAFFICBAR_HIDE": ("hide", lambda v: sorted(parse_hide_list(v))),
        "TRAFFICBAR_COLOR": ("text_color", str),
        "TRAFFICBAR_LOG_FILE": ("log_file", str),
        "TRAFFICBAR_LOG_LEVEL": ("log_level", str),
    }
    for env_key, (attr, converter) in env_map.items():
        val = os.environ.get(env_key)
        if val is not None:
            setattr(config, attr, converter(val))


def _apply_overrides(config: AppConfig, overrides: dict) -> None:
    """Apply CLI argument overrides."""
    for key, value in overrides.items():
        if value is not None and hasattr(config, key):
            setattr(config, key, value)
