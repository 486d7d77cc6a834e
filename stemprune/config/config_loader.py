"""
Configuration Loader

Loads the optional YAML configuration file and merges environment variable
overrides (including a local .env file). Configuration is read-only: the
tool never writes it back.

Author: StemPrune Project
License: MIT
"""

import os
import yaml
from pathlib import Path
from typing import Optional, Dict, Any
from dotenv import load_dotenv
from pydantic import ValidationError

from .schema import Config
from ..utils.logger import get_logger

logger = get_logger(__name__)

CONFIG_ENV_VAR = "STEMPRUNE_CONFIG"


class ConfigError(Exception):
    """Raised when the configuration file cannot be read or is invalid."""


class ConfigLoader:
    """
    Configuration loader.

    Loads configuration from a YAML file, merges environment variables and
    validates the result.
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the configuration loader.

        Args:
            config_path: Path to the configuration file. If None, uses
                $STEMPRUNE_CONFIG; with neither, only defaults and the
                environment apply.
        """
        # Load environment variables from .env if present
        load_dotenv()

        self.config_path = config_path or os.getenv(CONFIG_ENV_VAR)
        self._config: Optional[Config] = None

    def load(self) -> Config:
        """
        Load and validate configuration.

        Returns:
            Validated Config object

        Raises:
            ConfigError: If the file is unreadable, is not valid YAML, or
                fails validation
        """
        config_data = self._load_yaml()
        config_data = self._merge_env_vars(config_data)

        try:
            self._config = Config(**config_data)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e

        return self._config

    def _load_yaml(self) -> Dict[str, Any]:
        """
        Load YAML configuration file.

        Returns:
            Dictionary with configuration data
        """
        if not self.config_path:
            return self._create_default_config()

        config_file = Path(self.config_path)

        # A configured but absent file falls back to defaults
        if not config_file.exists():
            logger.debug(f"Config file not found, using defaults: {config_file}")
            return self._create_default_config()

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Failed to parse YAML config: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to read config {config_file}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config file must contain a mapping: {config_file}")

        logger.debug(f"Loaded configuration from {config_file}")
        return data

    def _create_default_config(self) -> Dict[str, Any]:
        """
        Create default configuration structure.

        Returns:
            Default configuration dictionary
        """
        return {
            "logging": {
                "log_level": "WARNING",
                "log_to_file": False,
                "json_format": False
            },
            "defaults": {
                "keep": [],
                "recursive": False,
                "move_to": None
            }
        }

    def _merge_env_vars(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Merge environment variables into configuration.

        Environment variables override config file values.
        Naming convention: STEMPRUNE_KEY (e.g., STEMPRUNE_LOG_LEVEL)

        Args:
            config_data: Configuration dictionary from file

        Returns:
            Merged configuration dictionary
        """
        # Logging
        if os.getenv("STEMPRUNE_LOG_LEVEL"):
            config_data.setdefault("logging", {})["log_level"] = os.getenv("STEMPRUNE_LOG_LEVEL").upper()
        if os.getenv("STEMPRUNE_LOG_FILE"):
            config_data.setdefault("logging", {})["log_to_file"] = True
            config_data["logging"]["log_file_path"] = os.getenv("STEMPRUNE_LOG_FILE")
        if os.getenv("STEMPRUNE_LOG_JSON"):
            config_data.setdefault("logging", {})["json_format"] = os.getenv("STEMPRUNE_LOG_JSON").lower() == "true"

        # Run defaults
        if os.getenv("STEMPRUNE_KEEP"):
            config_data.setdefault("defaults", {})["keep"] = [
                ext.strip() for ext in os.getenv("STEMPRUNE_KEEP").split(",") if ext.strip()
            ]
        if os.getenv("STEMPRUNE_RECURSIVE"):
            config_data.setdefault("defaults", {})["recursive"] = os.getenv("STEMPRUNE_RECURSIVE").lower() == "true"
        if os.getenv("STEMPRUNE_MOVE_TO"):
            config_data.setdefault("defaults", {})["move_to"] = os.getenv("STEMPRUNE_MOVE_TO")

        return config_data

    @property
    def config(self) -> Optional[Config]:
        """Get the current configuration object."""
        return self._config


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Convenience function to load configuration.

    Args:
        config_path: Optional path to config file

    Returns:
        Loaded and validated Config object
    """
    loader = ConfigLoader(config_path)
    return loader.load()
