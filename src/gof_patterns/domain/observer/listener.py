"""Listener - an observer that counts the notifications it receives."""

import logging
from typing import List

from .ports import Observer

logger = logging.getLogger(__name__)


class Listener(Observer):
    message = "received notification"

    def __init__(self):
        self.received: List[str] = []

    @property
    def notification_count(self) -> int:
        return len(self.received)

    def update(self) -> None:
        self.received.append(self.message)
        logger.debug(self.message)
