"""Observer pattern: a database broadcasting to listeners."""

from .database import Database
from .listener import Listener
from .ports import Observee, Observer

__all__ = ["Observer", "Observee", "Database", "Listener"]
