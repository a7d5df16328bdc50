"""Strategy pattern: a duck with an interchangeable quack."""

from .behaviours import LouderQuackBehaviour, MuteQuackBehaviour, QuackBehaviour
from .duck import Duck

__all__ = ["Duck", "QuackBehaviour", "LouderQuackBehaviour", "MuteQuackBehaviour"]
