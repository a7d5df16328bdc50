"""Builder pattern: a cook directing pizza builders."""

from .builders import BuilderState, MeatFeastBuilder, PizzaBuilder, SpicyPizzaBuilder
from .cook import Cook
from .pizza import Pizza

__all__ = [
    "Pizza",
    "PizzaBuilder",
    "BuilderState",
    "MeatFeastBuilder",
    "SpicyPizzaBuilder",
    "Cook",
]
