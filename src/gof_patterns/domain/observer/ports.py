"""Observer and observee interfaces."""

from abc import ABC, abstractmethod


class Observer(ABC):
    """Something that wants to hear about changes."""

    @abstractmethod
    def update(self) -> None:
        """Receive a notification."""


class Observee(ABC):
    """Something observers can subscribe to."""

    @abstractmethod
    def register_listener(self, observer: Observer) -> None:
        """Add an observer."""

    @abstractmethod
    def unregister_listener(self, observer: Observer) -> None:
        """Remove every registration of an observer."""
