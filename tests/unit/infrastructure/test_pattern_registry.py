"""Tests for the named variant registries."""

import pytest

from gof_patterns.domain.beverage import Lime, RumAndCoke
from gof_patterns.domain.core.exceptions import UnknownPatternError
from gof_patterns.domain.duck import LouderQuackBehaviour
from gof_patterns.domain.pizza import SpicyPizzaBuilder
from gof_patterns.infrastructure.registry import (
    NamedRegistry,
    get_behaviour_registry,
    get_builder_registry,
    get_garnish_registry,
    get_registry,
)


@pytest.mark.unit
class TestNamedRegistry:
    """Test cases for NamedRegistry."""

    def test_register_and_create(self):
        registry = NamedRegistry("widget")
        registry.register("list", list)

        assert registry.is_registered("list")
        assert registry.create("list") == []

    def test_create_passes_kwargs(self):
        registry = NamedRegistry("widget")
        registry.register("dict", dict)

        assert registry.create("dict", a=1) == {"a": 1}

    def test_override_keeps_latest(self):
        registry = NamedRegistry("widget")
        registry.register("thing", list)
        registry.register("thing", dict)

        assert registry.create("thing") == {}

    def test_unknown_name(self):
        registry = NamedRegistry("widget")
        registry.register("b", list)
        registry.register("a", list)

        with pytest.raises(UnknownPatternError) as exc_info:
            registry.create("missing")

        assert exc_info.value.details["available"] == ["a", "b"]
        assert isinstance(exc_info.value, ValueError)

    def test_list_names_sorted(self):
        registry = NamedRegistry("widget")
        registry.register("z", list)
        registry.register("m", list)

        assert registry.list_names() == ["m", "z"]


@pytest.mark.unit
class TestDefaultRegistries:
    """Test cases for the built-in variants."""

    def test_behaviours(self):
        registry = get_behaviour_registry()

        assert registry.list_names() == ["loud", "mute", "quack"]
        assert isinstance(registry.create("loud"), LouderQuackBehaviour)

    def test_builders(self):
        registry = get_builder_registry()

        assert registry.list_names() == ["meat_feast", "spicy"]
        assert isinstance(registry.create("spicy"), SpicyPizzaBuilder)

    def test_garnishes(self):
        registry = get_garnish_registry()

        assert registry.list_names() == ["ice", "lime", "umbrella"]
        drink = registry.create("lime", beverage=RumAndCoke())
        assert isinstance(drink, Lime)

    def test_registries_are_shared(self):
        assert get_registry("garnish") is get_garnish_registry()

    def test_unknown_registry(self):
        with pytest.raises(UnknownPatternError):
            get_registry("sauce")
