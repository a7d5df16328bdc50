"""Core domain types shared by the pattern models."""

from .exceptions import (
    BuilderNotSetError,
    ConfigurationError,
    InvalidBehaviourError,
    InvalidComponentError,
    PatternError,
    PizzaNotBakedError,
    SingletonInitializationError,
    UnknownPatternError,
)

__all__ = [
    "PatternError",
    "InvalidBehaviourError",
    "InvalidComponentError",
    "PizzaNotBakedError",
    "BuilderNotSetError",
    "SingletonInitializationError",
    "UnknownPatternError",
    "ConfigurationError",
]
