"""Demo service that exercises each pattern and collects its output."""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional

from gof_patterns.application.services.garnish import garnish
from gof_patterns.config.schemas import DemoConfig
from gof_patterns.domain.beverage import RumAndCoke
from gof_patterns.domain.core.exceptions import UnknownPatternError
from gof_patterns.domain.duck import Duck
from gof_patterns.domain.observer import Database, Listener
from gof_patterns.domain.pizza import Cook
from gof_patterns.domain.shape import ShapeFactory, ShapeType
from gof_patterns.infrastructure.logging.logger import get_logger
from gof_patterns.infrastructure.patterns import Singleton
from gof_patterns.infrastructure.registry import get_behaviour_registry, get_builder_registry

PATTERN_NAMES = ("singleton", "strategy", "decorator", "builder", "factory", "observer")


@dataclass
class PatternResult:
    """Output lines produced by one pattern run."""

    pattern: str
    lines: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"pattern": self.pattern, "output": list(self.lines)}


class PatternDemoService:
    """Runs the pattern demos independently, in a fixed order."""

    def __init__(self, demo_config: Optional[DemoConfig] = None):
        self.config = demo_config or DemoConfig()
        self.logger = get_logger(__name__)
        self._runners: Dict[str, Callable[[], PatternResult]] = {
            "singleton": self.run_singleton,
            "strategy": self.run_strategy,
            "decorator": self.run_decorator,
            "builder": self.run_builder,
            "factory": self.run_factory,
            "observer": self.run_observer,
        }

    def run(self, patterns: Optional[Iterable[str]] = None) -> List[PatternResult]:
        """
        Run the named patterns, or all of them.

        Patterns are always run in the canonical order regardless of the order
        they are given in; duplicates run once.

        Raises:
            UnknownPatternError: If a name is not a known pattern
        """
        requested = list(patterns) if patterns else list(PATTERN_NAMES)
        unknown = [name for name in requested if name not in self._runners]
        if unknown:
            raise UnknownPatternError("pattern", unknown[0], list(PATTERN_NAMES))

        results = []
        for name in PATTERN_NAMES:
            if name in requested:
                self.logger.info(f"Running {name} pattern")
                results.append(self._runners[name]())
        return results

    def run_singleton(self) -> PatternResult:
        first = Singleton.get_instance()
        second = Singleton.get_instance()
        return PatternResult(
            "singleton",
            [f"Singleton instance {id(first):#x} acquired (same instance: {first is second})"],
        )

    def run_strategy(self) -> PatternResult:
        duck = Duck()
        duck.set_quack_behaviour(get_behaviour_registry().create(self.config.quack_behaviour))
        return PatternResult("strategy", [duck.quack()])

    def run_decorator(self) -> PatternResult:
        drink = garnish(RumAndCoke(), *self.config.garnishes)
        return PatternResult("decorator", [drink.describe()])

    def run_builder(self) -> PatternResult:
        cook = Cook()
        cook.set_pizza_builder(get_builder_registry().create(self.config.pizza_builder))
        cook.bake_pizza()
        return PatternResult("builder", [cook.get_pizza().describe()])

    def run_factory(self) -> PatternResult:
        factory = ShapeFactory()
        shapes = [factory.get_shape(ShapeType[name.upper()]) for name in self.config.shapes]
        lines = [shape.draw() for shape in shapes]
        for shape in shapes:
            trace = shape.release()
            if trace:
                lines.append(trace)
        return PatternResult("factory", lines)

    def run_observer(self) -> PatternResult:
        db = Database()
        listener = Listener()
        db.register_listener(listener)
        db.update()
        db.unregister_listener(listener)
        return PatternResult("observer", list(listener.received))
