"""
StemPrune Configuration Module

Run options, logging settings and run defaults. Supports an optional YAML
configuration file with environment variable overrides.

Author: StemPrune Project
License: MIT
"""

from .schema import Config, DedupOptions, DefaultsConfig, LoggingConfig, LogLevel
from .config_loader import ConfigError, ConfigLoader, load_config

__all__ = [
    'Config', 'DedupOptions', 'DefaultsConfig', 'LoggingConfig', 'LogLevel',
    'ConfigError', 'ConfigLoader', 'load_config',
]
