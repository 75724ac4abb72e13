"""YAML configuration parser for juliakit.

This module provides parsing and validation for juliakit.yaml configuration files.

Example juliakit.yaml::

    version: "^1.6"
    arch: x64
    cache_dir: ~/.cache/juliakit
    timeout: 60
"""

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from juliakit.core.exceptions import ConfigError
from juliakit.toolchain.catalog import VERSIONS_URL
from juliakit.toolchain.locator import NIGHTLY_BASE_URL

DEFAULT_CONFIG_FILE = "juliakit.yaml"


@dataclass
class JuliaKitConfig:
    """Complete juliakit configuration."""

    version: str = "1"  # exact version, range or 'nightly'
    arch: Optional[str] = None  # 'x64', 'x86'; None = host architecture
    versions_url: str = VERSIONS_URL
    nightly_url: str = NIGHTLY_BASE_URL
    cache_dir: Optional[str] = None
    timeout: Optional[float] = None  # HTTP timeout in seconds

    @property
    def cache_path(self) -> Optional[Path]:
        """cache_dir with '~' expanded, or None."""
        return Path(self.cache_dir).expanduser() if self.cache_dir else None


_STRING_KEYS = ("version", "arch", "versions_url", "nightly_url", "cache_dir")


def parse_config(config_path: Path) -> JuliaKitConfig:
    """
    Parse juliakit.yaml configuration file.

    Args:
        config_path: Path to juliakit.yaml

    Returns:
        Parsed and validated configuration

    Raises:
        ConfigError: If configuration is invalid
    """
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax: {e}")

    if data is None:
        return JuliaKitConfig()

    return _parse_and_validate(data)


def _parse_and_validate(data: Any) -> JuliaKitConfig:
    """Validate raw YAML data and build a JuliaKitConfig."""
    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a mapping")

    known = {f.name for f in fields(JuliaKitConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

    values: Dict[str, Any] = {}
    for key in _STRING_KEYS:
        if key not in data or data[key] is None:
            continue
        value = data[key]
        if key == "version" and not isinstance(value, bool):
            # YAML reads `version: 1.10` as the float 1.1
            if isinstance(value, float):
                raise ConfigError(
                    "'version' must be a quoted string, e.g. version: \"1.10\""
                )
            if isinstance(value, int):
                value = str(value)
        if not isinstance(value, str) or not value:
            raise ConfigError(f"'{key}' must be a non-empty string")
        values[key] = value

    timeout = data.get("timeout")
    if timeout is not None:
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
            raise ConfigError("'timeout' must be a number")
        if timeout <= 0:
            raise ConfigError("'timeout' must be positive")
        values["timeout"] = float(timeout)

    return JuliaKitConfig(**values)


def load_config(
    config_path: Optional[Path] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> JuliaKitConfig:
    """
    Load configuration and apply overrides.

    Args:
        config_path: Explicit config file (must exist). If None, uses
                     ./juliakit.yaml when present, defaults otherwise.
        overrides: Values that win over the file (None values are ignored),
                   typically command-line options

    Returns:
        Effective configuration

    Raises:
        ConfigError: If the file is invalid or an override key is unknown
    """
    if config_path is not None:
        config = parse_config(Path(config_path))
    else:
        default_file = Path.cwd() / DEFAULT_CONFIG_FILE
        config = parse_config(default_file) if default_file.exists() else JuliaKitConfig()

    if overrides:
        known = {f.name for f in fields(JuliaKitConfig)}
        applied = {k: v for k, v in overrides.items() if v is not None}
        unknown = sorted(set(applied) - known)
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")
        config = replace(config, **applied)

    return config
