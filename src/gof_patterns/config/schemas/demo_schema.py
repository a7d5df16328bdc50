"""Demo run configuration schema."""

from typing import List

from pydantic import BaseModel, Field, field_validator

from gof_patterns.domain.shape.shapes import ShapeType


def _check_registered(kind: str, names: List[str]) -> None:
    # Imported lazily: the registries log through infrastructure, which imports config
    from gof_patterns.infrastructure.registry import get_registry

    registry = get_registry(kind)
    unknown = [name for name in names if not registry.is_registered(name)]
    if unknown:
        raise ValueError(f"Unknown {kind} {unknown}. Available: {registry.list_names()}")


class DemoConfig(BaseModel):
    """Which variants the demo driver exercises."""

    quack_behaviour: str = Field("loud", description="Quack behaviour given to the duck")
    pizza_builder: str = Field("meat_feast", description="Builder handed to the cook")
    garnishes: List[str] = Field(
        default_factory=lambda: ["umbrella", "lime"],
        description="Decorators applied to the drink, innermost first",
    )
    shapes: List[str] = Field(
        default_factory=lambda: ["circle", "square"],
        description="Shapes drawn by the factory demo",
    )
    pause_on_exit: bool = Field(False, description="Wait for Enter before exiting")

    @field_validator("quack_behaviour")
    @classmethod
    def validate_quack_behaviour(cls, v: str) -> str:
        """Validate the behaviour name."""
        _check_registered("quack behaviour", [v])
        return v

    @field_validator("pizza_builder")
    @classmethod
    def validate_pizza_builder(cls, v: str) -> str:
        """Validate the builder name."""
        _check_registered("pizza builder", [v])
        return v

    @field_validator("garnishes")
    @classmethod
    def validate_garnishes(cls, v: List[str]) -> List[str]:
        """Validate each garnish name."""
        _check_registered("garnish", v)
        return v

    @field_validator("shapes")
    @classmethod
    def validate_shapes(cls, v: List[str]) -> List[str]:
        """Validate each shape name against ShapeType."""
        valid = [member.name.lower() for member in ShapeType]
        normalised = [name.lower() for name in v]
        unknown = [name for name in normalised if name not in valid]
        if unknown:
            raise ValueError(f"Unknown shapes {unknown}. Available: {valid}")
        return normalised
