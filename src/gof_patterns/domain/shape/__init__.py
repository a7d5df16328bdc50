"""Factory pattern: shapes created from a discriminator."""

from .factory import ShapeFactory
from .shapes import Circle, Shape, ShapeType, Square

__all__ = ["Shape", "ShapeType", "Circle", "Square", "ShapeFactory"]
