"""Shapes produced by the shape factory."""

import logging
from abc import ABC
from enum import IntEnum
from typing import Optional

logger = logging.getLogger(__name__)


class ShapeType(IntEnum):
    """Discriminator for the shape factory. The first member is the default."""

    CIRCLE = 0
    SQUARE = 1


class Shape(ABC):
    """
    A named shape owned by whoever asked the factory for it.

    ``release()`` ends the shape's lifetime and emits its teardown trace
    exactly once; shapes can also be used as context managers.
    """

    name: str = ""

    def __init__(self):
        self._released = False

    @property
    def released(self) -> bool:
        return self._released

    def draw(self) -> str:
        return f"drawing {self.name}"

    def release(self) -> Optional[str]:
        """Release the shape. Returns the teardown trace, or None if already released."""
        if self._released:
            return None
        self._released = True
        trace = f"{self.name} destructor called"
        logger.debug(trace)
        return trace

    def __enter__(self) -> "Shape":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.release()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(released={self._released})"


class Circle(Shape):
    name = "Circle"


class Square(Shape):
    name = "Square"
