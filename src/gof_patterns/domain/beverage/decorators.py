"""
Garnish decorators for beverages.

Each decorator wraps exactly one beverage and appends its own suffix to the
wrapped description, so the last garnish applied is the last one described.
"""

from typing import List

from gof_patterns.domain.core.exceptions import InvalidComponentError

from .beverages import Beverage


class BeverageDecorator(Beverage):
    """Base decorator: delegates to the wrapped beverage and adds a suffix."""

    suffix = ""

    def __init__(self, beverage: Beverage):
        if not isinstance(beverage, Beverage):
            raise InvalidComponentError(
                f"{type(self).__name__} can only wrap a Beverage, got {type(beverage).__name__}",
                "INVALID_COMPONENT",
                {"decorator": type(self).__name__, "component": repr(beverage)},
            )
        self._beverage = beverage

    @property
    def wrapped(self) -> Beverage:
        """The beverage this decorator wraps (read-only)."""
        return self._beverage

    def describe(self) -> str:
        return self._beverage.describe() + self.suffix

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._beverage!r})"


class Lime(BeverageDecorator):
    suffix = ", with a lime!"


class Umbrella(BeverageDecorator):
    suffix = ", with an umbrella!"


class Ice(BeverageDecorator):
    suffix = ", with ice!"


def chain(beverage: Beverage) -> List[Beverage]:
    """Return the components of a chain from the outermost wrapper to the leaf."""
    components = [beverage]
    while isinstance(components[-1], BeverageDecorator):
        components.append(components[-1].wrapped)
    return components

