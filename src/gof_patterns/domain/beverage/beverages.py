"""Beverage components - the leaves a decorator chain terminates in."""

from abc import ABC, abstractmethod


class Beverage(ABC):
    """Anything that can describe itself."""

    @abstractmethod
    def describe(self) -> str:
        """Return the full description of this beverage."""


class RumAndCoke(Beverage):
    def describe(self) -> str:
        return "I am a rum and coke"

    def __repr__(self) -> str:
        return "RumAndCoke()"
