"""
gof-patterns - classic object-oriented design patterns as small runnable models.

Import the pattern models from ``gof_patterns.domain`` or run the demo with
``gof-patterns run``.
"""

__version__ = "1.0.0"

__all__ = ["__version__"]
