"""Main application configuration schema."""

from typing import Any, Dict

from pydantic import BaseModel, Field

from .demo_schema import DemoConfig
from .logging_schema import LoggingConfig


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    demo: DemoConfig = Field(default_factory=lambda: DemoConfig())

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        """Create and validate configuration from a plain dictionary."""
        return cls.model_validate(data)
