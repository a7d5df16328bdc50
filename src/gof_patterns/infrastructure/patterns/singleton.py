"""Singleton - one instance, one global point of access."""

from gof_patterns.domain.core.exceptions import SingletonInitializationError
from gof_patterns.infrastructure.patterns.singleton_access import get_singleton
from gof_patterns.infrastructure.patterns.singleton_registry import SingletonRegistry


class Singleton:
    """
    Class with exactly one instance, reached through ``get_instance()``.

    Direct construction is only allowed while the registry is creating the
    instance.
    """

    def __init__(self):
        if not SingletonRegistry.get_instance().is_initializing(type(self)):
            raise SingletonInitializationError(
                f"Use {type(self).__name__}.get_instance() instead of constructing directly",
                "SINGLETON_DIRECT_CONSTRUCTION",
                {"class": type(self).__name__},
            )

    @classmethod
    def get_instance(cls) -> "Singleton":
        return get_singleton(cls)
