"""Configuration management for the application."""

import logging
import threading
from typing import Any, Dict, Optional

from pydantic import ValidationError

from gof_patterns.config.loader import ConfigurationLoader
from gof_patterns.config.schemas import AppConfig, DemoConfig, LoggingConfig
from gof_patterns.domain.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class ConfigurationManager:
    """
    Single source of truth for configuration.

    Configuration is loaded lazily on first access, from the given file (or
    the file named by GOF_PATTERNS_CONFIG), then environment overrides are
    applied and the result is validated.
    """

    def __init__(
        self,
        config_file: Optional[str] = None,
        overrides: Optional[Dict[str, Any]] = None,
    ):
        self._config_file = config_file
        self._overrides = overrides or {}
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None
        self._loader = ConfigurationLoader()

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        if self._config_file:
            config_data = self._loader.load_from_file(self._config_file)
        else:
            config_data = self._loader.load_configuration()

        config_data = self._loader.apply_environment_overrides(config_data)
        config_data = _merge(config_data, self._overrides)

        try:
            return AppConfig.from_dict(config_data)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration: {e.error_count()} error(s)",
                {"errors": [str(err["msg"]) for err in e.errors()]},
            ) from e

    def get_logging_config(self) -> LoggingConfig:
        return self.app_config.logging

    def get_demo_config(self) -> DemoConfig:
        return self.app_config.demo

    def reload(self) -> AppConfig:
        """Drop the cached configuration and load it again."""
        with self._lock:
            self._app_config = None
        return self.app_config


def _merge(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Merge nested dictionaries; ``overrides`` wins. None values are ignored."""
    result = dict(base)
    for key, value in overrides.items():
        if value is None:
            continue
        if isinstance(value, dict):
            existing = result.get(key)
            result[key] = _merge(existing if isinstance(existing, dict) else {}, value)
        else:
            result[key] = value
    return result
