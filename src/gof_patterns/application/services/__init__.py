"""Application services."""

from .demo_service import PATTERN_NAMES, PatternDemoService, PatternResult
from .garnish import garnish

__all__ = ["PatternDemoService", "PatternResult", "PATTERN_NAMES", "garnish"]
