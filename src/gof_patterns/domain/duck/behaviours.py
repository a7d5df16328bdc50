"""Quack behaviours - interchangeable strategies for a duck."""

import logging

logger = logging.getLogger(__name__)


class QuackBehaviour:
    """The plain quack every duck starts with."""

    message = "Quack"

    def quack(self) -> str:
        logger.debug(f"{type(self).__name__} quacking")
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class LouderQuackBehaviour(QuackBehaviour):
    message = "QUACK!!!"


class MuteQuackBehaviour(QuackBehaviour):
    message = "<< silence >>"
