"""Infrastructure patterns package."""

from .singleton import Singleton
from .singleton_access import get_singleton
from .singleton_registry import SingletonRegistry

__all__ = ["Singleton", "SingletonRegistry", "get_singleton"]
