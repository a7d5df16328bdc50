"""Configuration loading from files and the environment."""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

import yaml

from gof_patterns.config.utils.env_expansion import expand_config_env_vars
from gof_patterns.domain.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "GOF_PATTERNS_"
CONFIG_FILE_ENV = f"{ENV_PREFIX}CONFIG"
LOG_LEVEL_ENV = f"{ENV_PREFIX}LOG_LEVEL"


class ConfigurationLoader:
    """Loads raw configuration dictionaries."""

    def load_from_file(self, config_file: str) -> Dict[str, Any]:
        """
        Load a JSON or YAML configuration file.

        Raises:
            ConfigurationError: If the file cannot be read or parsed
        """
        path = Path(config_file)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(
                f"Cannot read configuration file {config_file}: {e}",
                {"config_file": config_file},
            ) from e

        try:
            if path.suffix.lower() in (".yaml", ".yml"):
                data = yaml.safe_load(text)
            else:
                data = json.loads(text)
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigurationError(
                f"Invalid configuration file {config_file}: {e}",
                {"config_file": config_file},
            ) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file {config_file} must contain a mapping",
                {"config_file": config_file},
            )

        logger.debug(f"Loaded configuration from {config_file}")
        return expand_config_env_vars(data)

    def load_configuration(self) -> Dict[str, Any]:
        """Load from the file named by GOF_PATTERNS_CONFIG, or return defaults."""
        config_file = os.environ.get(CONFIG_FILE_ENV)
        if config_file:
            return self.load_from_file(config_file)
        return {}

    def apply_environment_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply GOF_PATTERNS_* environment overrides on top of file values."""
        result = dict(config_data)
        log_level = os.environ.get(LOG_LEVEL_ENV)
        if log_level:
            logging_section = dict(result.get("logging") or {})
            logging_section["level"] = log_level
            result["logging"] = logging_section
            logger.debug(f"Log level overridden from environment: {log_level}")
        return result
