"""Registries of named pattern variants."""

import threading
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from gof_patterns.domain.core.exceptions import UnknownPatternError
from gof_patterns.infrastructure.logging.logger import get_logger

T = TypeVar("T")

QUACK_BEHAVIOURS = "quack behaviour"
PIZZA_BUILDERS = "pizza builder"
GARNISHES = "garnish"


class NamedRegistry(Generic[T]):
    """Registry mapping names to factories for one kind of variant."""

    def __init__(self, kind: str):
        """Initialize an empty registry for ``kind``."""
        self.kind = kind
        self._factories: Dict[str, Callable[..., T]] = {}
        self._lock = threading.Lock()
        self.logger = get_logger(__name__)

    def register(self, name: str, factory: Callable[..., T]) -> None:
        """
        Register a variant.

        Args:
            name: Name of the variant (e.g., 'loud', 'spicy', 'lime')
            factory: Callable that creates the variant instance
        """
        with self._lock:
            if name in self._factories:
                self.logger.warning(f"Overriding existing {self.kind}: {name}")

            self._factories[name] = factory
            self.logger.debug(f"Registered {self.kind}: {name}")

    def create(self, name: str, **kwargs: Any) -> T:
        """
        Create a variant instance.

        Args:
            name: Name of the variant
            **kwargs: Arguments to pass to the factory

        Returns:
            New variant instance

        Raises:
            UnknownPatternError: If the name is not registered
        """
        with self._lock:
            if name not in self._factories:
                raise UnknownPatternError(self.kind, name, list(self._factories.keys()))
            factory = self._factories[name]
        return factory(**kwargs)

    def list_names(self) -> List[str]:
        with self._lock:
            return sorted(self._factories.keys())

    def is_registered(self, name: str) -> bool:
        with self._lock:
            return name in self._factories


# Global registry instances
_registries: Optional[Dict[str, NamedRegistry]] = None
_registries_lock = threading.Lock()


def _get_registries() -> Dict[str, NamedRegistry]:
    global _registries

    if _registries is None:
        with _registries_lock:
            if _registries is None:
                registries = {
                    kind: NamedRegistry(kind)
                    for kind in (QUACK_BEHAVIOURS, PIZZA_BUILDERS, GARNISHES)
                }
                _register_defaults(registries)
                _registries = registries

    return _registries


def _register_defaults(registries: Dict[str, NamedRegistry]) -> None:
    """Register the built-in variants."""
    from gof_patterns.domain.beverage import Ice, Lime, Umbrella
    from gof_patterns.domain.duck import LouderQuackBehaviour, MuteQuackBehaviour, QuackBehaviour
    from gof_patterns.domain.pizza import MeatFeastBuilder, SpicyPizzaBuilder

    behaviours = registries[QUACK_BEHAVIOURS]
    behaviours.register("quack", QuackBehaviour)
    behaviours.register("loud", LouderQuackBehaviour)
    behaviours.register("mute", MuteQuackBehaviour)

    builders = registries[PIZZA_BUILDERS]
    builders.register("meat_feast", MeatFeastBuilder)
    builders.register("spicy", SpicyPizzaBuilder)

    garnishes = registries[GARNISHES]
    garnishes.register("lime", Lime)
    garnishes.register("umbrella", Umbrella)
    garnishes.register("ice", Ice)


def get_registry(kind: str) -> NamedRegistry:
    """
    Get the global registry for one kind of variant.

    Raises:
        UnknownPatternError: If ``kind`` is not a known registry
    """
    registries = _get_registries()
    if kind not in registries:
        raise UnknownPatternError("registry", kind, list(registries.keys()))
    return registries[kind]


def get_behaviour_registry() -> NamedRegistry:
    return get_registry(QUACK_BEHAVIOURS)


def get_builder_registry() -> NamedRegistry:
    return get_registry(PIZZA_BUILDERS)


def get_garnish_registry() -> NamedRegistry:
    return get_registry(GARNISHES)
