"""Named variant registries."""

from .pattern_registry import (
    GARNISHES,
    PIZZA_BUILDERS,
    QUACK_BEHAVIOURS,
    NamedRegistry,
    get_behaviour_registry,
    get_builder_registry,
    get_garnish_registry,
    get_registry,
)

__all__ = [
    "NamedRegistry",
    "QUACK_BEHAVIOURS",
    "PIZZA_BUILDERS",
    "GARNISHES",
    "get_registry",
    "get_behaviour_registry",
    "get_builder_registry",
    "get_garnish_registry",
]
