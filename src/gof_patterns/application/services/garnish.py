"""Apply garnish decorators to a beverage by name."""

from typing import Optional

from gof_patterns.domain.beverage import Beverage
from gof_patterns.domain.core.exceptions import InvalidComponentError
from gof_patterns.infrastructure.logging.logger import get_logger
from gof_patterns.infrastructure.registry import NamedRegistry, get_garnish_registry

logger = get_logger(__name__)


def garnish(beverage: Beverage, *names: str, registry: Optional[NamedRegistry] = None) -> Beverage:
    """
    Wrap a beverage in the named garnishes, innermost first.

    Args:
        beverage: The beverage to decorate
        *names: Garnish names as registered in the garnish registry
        registry: Registry to look names up in (default: the global garnish registry)

    Returns:
        The outermost decorator, or the beverage itself when no names are given

    Raises:
        InvalidComponentError: If a garnish name is not registered
    """
    registry = registry or get_garnish_registry()
    for name in names:
        if not registry.is_registered(name):
            raise InvalidComponentError(
                f"Unknown garnish '{name}'. Available: {registry.list_names()}",
                "UNKNOWN_GARNISH",
                {"garnish": name},
            )
        beverage = registry.create(name, beverage=beverage)
        logger.debug(f"Applied garnish {name}")
    return beverage
