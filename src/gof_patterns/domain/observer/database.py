"""Database - a subject that notifies the listeners registered with it."""

import logging
import weakref
from typing import Callable, List, Optional

from .ports import Observee, Observer

logger = logging.getLogger(__name__)


class _StrongRef:
    """Stand-in for weakref.ref for observers that cannot be weakly referenced."""

    __slots__ = ("_obj",)

    def __init__(self, obj: Observer):
        self._obj = obj

    def __call__(self) -> Observer:
        return self._obj


def _reference(observer: Observer) -> Callable[[], Optional[Observer]]:
    try:
        return weakref.ref(observer)
    except TypeError:
        logger.debug(f"{type(observer).__name__} is not weak-referenceable, holding it strongly")
        return _StrongRef(observer)


class Database(Observee):
    """
    Subject keeping observers in registration order.

    The database does not own its observers: it holds weak references, so an
    observer that is garbage collected simply stops being notified. A
    notification round works on a snapshot of the registrations, so observers
    may unregister themselves (or others) from inside ``update()``; the
    change applies from the next round.
    """

    def __init__(self):
        self._observers: List[Callable[[], Optional[Observer]]] = []

    def register_listener(self, observer: Observer) -> None:
        # Duplicates are kept and notified once per registration
        self._observers.append(_reference(observer))
        logger.debug(f"Registered {type(observer).__name__} ({len(self._observers)} total)")

    def unregister_listener(self, observer: Observer) -> None:
        before = len(self._observers)
        self._observers = [ref for ref in self._observers if ref() is not observer]
        logger.debug(f"Unregistered {before - len(self._observers)} registration(s)")

    @property
    def listener_count(self) -> int:
        return sum(1 for ref in self._observers if ref() is not None)

    def update(self) -> None:
        """Notify every registered observer, in registration order."""
        snapshot = list(self._observers)
        logger.debug(f"Notifying {len(snapshot)} registration(s)")
        for ref in snapshot:
            observer = ref()
            if observer is not None:
                observer.update()
        self._prune()

    notify = update

    def _prune(self) -> None:
        self._observers = [ref for ref in self._observers if ref() is not None]
