"""Duck - the context that delegates quacking to a swappable behaviour."""

import logging
from typing import Any, Optional

from gof_patterns.domain.core.exceptions import InvalidBehaviourError

from .behaviours import QuackBehaviour

logger = logging.getLogger(__name__)


class Duck:
    """
    Strategy context.

    A duck always holds exactly one quack behaviour. Any object with a
    callable ``quack()`` is accepted, so behaviours need not subclass
    QuackBehaviour.
    """

    def __init__(self, quack_behaviour: Optional[Any] = None):
        self._quacker = QuackBehaviour()
        if quack_behaviour is not None:
            self.set_quack_behaviour(quack_behaviour)

    @property
    def quack_behaviour(self) -> Any:
        return self._quacker

    def set_quack_behaviour(self, quack_behaviour: Any) -> None:
        """
        Replace the active behaviour.

        Raises:
            InvalidBehaviourError: If the object has no callable quack()
        """
        if not callable(getattr(quack_behaviour, "quack", None)):
            raise InvalidBehaviourError(quack_behaviour, "quack")
        logger.debug(
            f"Duck behaviour changed from {type(self._quacker).__name__} "
            f"to {type(quack_behaviour).__name__}"
        )
        self._quacker = quack_behaviour

    def quack(self) -> str:
        return self._quacker.quack()
