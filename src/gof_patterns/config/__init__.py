"""Configuration package with clean public API."""

from .manager import ConfigurationManager
from .schemas import AppConfig, DemoConfig, LogDestination, LoggingConfig, LogLevel

__all__ = [
    "AppConfig",
    "DemoConfig",
    "LoggingConfig",
    "LogLevel",
    "LogDestination",
    "ConfigurationManager",
]
