"""Exceptions shared by every pattern model."""

from typing import Any, Dict, Optional


class PatternError(Exception):
    """Base exception for all pattern-model errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert the exception to a dictionary for logging and output."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class InvalidBehaviourError(PatternError):
    """Raised when a strategy is missing or does not implement the capability."""

    def __init__(self, behaviour: Any, operation: str):
        super().__init__(
            f"{type(behaviour).__name__} does not implement '{operation}'",
            "INVALID_BEHAVIOUR",
            {"behaviour": repr(behaviour), "operation": operation},
        )


class InvalidComponentError(PatternError):
    """Raised when a decorator is given something it cannot wrap."""


class PizzaNotBakedError(PatternError):
    """Raised when a builder step runs before a pizza has been baked."""

    def __init__(self, builder_name: str, step: str):
        super().__init__(
            f"{builder_name}.{step}() called before bake_pizza()",
            "PIZZA_NOT_BAKED",
            {"builder": builder_name, "step": step},
        )


class BuilderNotSetError(PatternError):
    """Raised when a cook is asked to work without a builder."""

    def __init__(self, operation: str):
        super().__init__(
            f"Cannot {operation}: no pizza builder has been set",
            "BUILDER_NOT_SET",
            {"operation": operation},
        )


class SingletonInitializationError(PatternError):
    """Raised when a singleton would be constructed more than once."""


class UnknownPatternError(PatternError, ValueError):
    """Raised when a name is not registered."""

    def __init__(self, kind: str, name: str, available: list):
        super().__init__(
            f"Unknown {kind} '{name}'. Available: {sorted(available)}",
            "UNKNOWN_NAME",
            {"kind": kind, "name": name, "available": sorted(available)},
        )
        self.kind = kind
        self.name = name


class ConfigurationError(PatternError):
    """Raised when there's an issue with configuration."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "CONFIGURATION_ERROR", details)
