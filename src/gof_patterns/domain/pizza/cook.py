"""Cook - the director that runs a builder's steps in a fixed order."""

import logging
from typing import Optional

from gof_patterns.domain.core.exceptions import BuilderNotSetError

from .builders import PizzaBuilder
from .pizza import Pizza

logger = logging.getLogger(__name__)


class Cook:
    def __init__(self, pizza_builder: Optional[PizzaBuilder] = None):
        self._pizza_builder = pizza_builder

    def set_pizza_builder(self, pizza_builder: PizzaBuilder) -> None:
        self._pizza_builder = pizza_builder

    def get_pizza(self) -> Pizza:
        return self._builder("get a pizza").get_pizza()

    def bake_pizza(self) -> Pizza:
        """Bake a pizza: bake, then base, sauce and topping. Returns the product."""
        builder = self._builder("bake a pizza")
        builder.bake_pizza()
        builder.choose_base()
        builder.choose_sauce()
        builder.choose_topping()
        logger.debug(f"Cook finished a pizza with {type(builder).__name__}")
        return builder.get_pizza()

    def _builder(self, operation: str) -> PizzaBuilder:
        if self._pizza_builder is None:
            raise BuilderNotSetError(operation)
        return self._pizza_builder
