"""
Pizza builders.

A builder is either unbaked or baked. ``bake_pizza()`` is the only way into
the baked state and always starts from a fresh, empty pizza. The choose steps
and ``get_pizza()`` are only valid once baked.
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from gof_patterns.domain.core.exceptions import PizzaNotBakedError

from .pizza import Pizza

logger = logging.getLogger(__name__)


class BuilderState(str, Enum):
    UNBAKED = "unbaked"
    BAKED = "baked"


class PizzaBuilder(ABC):
    """Base builder holding the pizza under construction."""

    def __init__(self):
        self._pizza: Optional[Pizza] = None

    @property
    def state(self) -> BuilderState:
        return BuilderState.UNBAKED if self._pizza is None else BuilderState.BAKED

    def bake_pizza(self) -> None:
        """Start a fresh, empty pizza."""
        self._pizza = Pizza()
        logger.debug(f"{type(self).__name__} baked a new pizza")

    def get_pizza(self) -> Pizza:
        return self._require_pizza("get_pizza")

    def _require_pizza(self, step: str) -> Pizza:
        if self._pizza is None:
            raise PizzaNotBakedError(type(self).__name__, step)
        return self._pizza

    @abstractmethod
    def choose_base(self) -> None:
        """Set the base on the current pizza."""

    @abstractmethod
    def choose_sauce(self) -> None:
        """Set the sauce on the current pizza."""

    @abstractmethod
    def choose_topping(self) -> None:
        """Set the topping on the current pizza."""


class MeatFeastBuilder(PizzaBuilder):
    def choose_base(self) -> None:
        self._require_pizza("choose_base").set_base("deep pan")

    def choose_sauce(self) -> None:
        self._require_pizza("choose_sauce").set_sauce("bbq")

    def choose_topping(self) -> None:
        self._require_pizza("choose_topping").set_topping("all the meat")


class SpicyPizzaBuilder(PizzaBuilder):
    def choose_base(self) -> None:
        self._require_pizza("choose_base").set_base("thin crust")

    def choose_sauce(self) -> None:
        self._require_pizza("choose_sauce").set_sauce("tomato")

    def choose_topping(self) -> None:
        self._require_pizza("choose_topping").set_topping("ground beef and jalapenos")
