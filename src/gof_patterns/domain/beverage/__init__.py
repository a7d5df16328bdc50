"""Decorator pattern: a rum and coke dressed up with garnishes."""

from .beverages import Beverage, RumAndCoke
from .decorators import BeverageDecorator, Ice, Lime, Umbrella, chain

__all__ = [
    "Beverage",
    "RumAndCoke",
    "BeverageDecorator",
    "Lime",
    "Umbrella",
    "Ice",
    "chain",
]
