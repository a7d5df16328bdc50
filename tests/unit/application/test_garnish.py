"""Tests for applying garnishes by name."""

import pytest

from gof_patterns.application.services import garnish
from gof_patterns.domain.beverage import BeverageDecorator, Lime, RumAndCoke
from gof_patterns.domain.core.exceptions import InvalidComponentError
from gof_patterns.infrastructure.registry import NamedRegistry


@pytest.mark.unit
class TestGarnish:
    """Test cases for garnish()."""

    def test_garnish_applies_names_innermost_first(self):
        drink = garnish(RumAndCoke(), "umbrella", "lime")

        assert isinstance(drink, Lime)
        assert drink.describe() == "I am a rum and coke, with an umbrella!, with a lime!"

    def test_garnish_without_names_returns_beverage(self):
        leaf = RumAndCoke()

        assert garnish(leaf) is leaf

    def test_garnish_unknown_name(self):
        with pytest.raises(InvalidComponentError) as exc_info:
            garnish(RumAndCoke(), "lime", "cherry")

        assert exc_info.value.details == {"garnish": "cherry"}

    def test_garnish_with_custom_registry(self):
        class Straw(BeverageDecorator):
            suffix = ", with a straw!"

        registry = NamedRegistry("garnish")
        registry.register("straw", Straw)

        drink = garnish(RumAndCoke(), "straw", registry=registry)

        assert drink.describe() == "I am a rum and coke, with a straw!"
        with pytest.raises(InvalidComponentError):
            garnish(RumAndCoke(), "lime", registry=registry)
