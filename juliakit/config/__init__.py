"""
Configuration for juliakit.

Settings come from an optional juliakit.yaml file, overridden by
command-line options.
"""

from .parser import (
    DEFAULT_CONFIG_FILE,
    JuliaKitConfig,
    load_config,
    parse_config,
)
from juliakit.core.exceptions import ConfigError

__all__ = [
    "DEFAULT_CONFIG_FILE",
    "JuliaKitConfig",
    "ConfigError",
    "load_config",
    "parse_config",
]
