"""Shape factory - maps a ShapeType to a fresh shape."""

import logging
from typing import Callable, Dict, Union

from .shapes import Circle, Shape, ShapeType, Square

logger = logging.getLogger(__name__)


class ShapeFactory:
    """
    Create shapes from a discriminator.

    The mapping is total: a value outside ShapeType (for example an integer
    read from elsewhere) produces the default shape, the one for the first
    ShapeType member, rather than an error.
    """

    _creators: Dict[ShapeType, Callable[[], Shape]] = {
        ShapeType.CIRCLE: Circle,
        ShapeType.SQUARE: Square,
    }

    default_type = next(iter(ShapeType))

    def get_shape(self, shape_type: Union[ShapeType, int]) -> Shape:
        try:
            resolved = ShapeType(shape_type)
        except ValueError:
            logger.warning(
                f"Unknown shape type {shape_type!r}, falling back to {self.default_type.name}"
            )
            resolved = self.default_type

        creator = self._creators.get(resolved, self._creators[self.default_type])
        shape = creator()
        logger.debug(f"Created {shape.name} for {resolved.name}")
        return shape
