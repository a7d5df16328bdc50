"""Process-wide registry of singleton instances."""

import threading
from typing import Any, Dict, Optional, Set, Type, TypeVar

from gof_patterns.domain.core.exceptions import SingletonInitializationError
from gof_patterns.infrastructure.logging.logger import get_logger

T = TypeVar("T")


class SingletonRegistry:
    """
    Registry that owns exactly one instance per class.

    Instances are created lazily on first access. The lock is re-entrant so
    that a constructor which asks for *another* singleton does not deadlock;
    a constructor that asks for its own class is rejected instead of creating
    a second instance.
    """

    _instance: Optional["SingletonRegistry"] = None
    _instance_lock = threading.Lock()

    def __init__(self):
        self._instances: Dict[Type, Any] = {}
        self._initializing: Set[Type] = set()
        self._lock = threading.RLock()
        self._logger = get_logger(__name__)

    @classmethod
    def get_instance(cls) -> "SingletonRegistry":
        """Get the process-wide registry, creating it on first use."""
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def get(self, singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
        """
        Get the instance of ``singleton_class``, creating it if needed.

        Args:
            singleton_class: The class to get an instance of
            *args: Constructor arguments, used only on first creation
            **kwargs: Constructor keyword arguments, used only on first creation

        Returns:
            The singleton instance

        Raises:
            SingletonInitializationError: If called for a class while that
                class is still being constructed
        """
        with self._lock:
            if singleton_class in self._instances:
                return self._instances[singleton_class]

            if singleton_class in self._initializing:
                raise SingletonInitializationError(
                    f"Re-entrant initialization of singleton {singleton_class.__name__}",
                    "SINGLETON_REENTRANT_INIT",
                    {"class": singleton_class.__name__},
                )

            self._initializing.add(singleton_class)
            try:
                instance = singleton_class(*args, **kwargs)
            finally:
                self._initializing.discard(singleton_class)

            self._instances[singleton_class] = instance
            self._logger.debug(f"Created singleton instance of {singleton_class.__name__}")
            return instance

    def is_initializing(self, singleton_class: Type) -> bool:
        with self._lock:
            return singleton_class in self._initializing

    def has_instance(self, singleton_class: Type) -> bool:
        with self._lock:
            return singleton_class in self._instances

    def reset(self, singleton_class: Optional[Type] = None) -> None:
        """Discard one instance, or all of them when no class is given."""
        with self._lock:
            if singleton_class is None:
                self._instances.clear()
                self._logger.debug("Reset all singleton instances")
            else:
                self._instances.pop(singleton_class, None)
                self._logger.debug(f"Reset singleton instance of {singleton_class.__name__}")
