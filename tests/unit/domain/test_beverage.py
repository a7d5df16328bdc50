"""Tests for the beverage decorator chain."""

import pytest

from gof_patterns.domain.beverage import (
    Beverage,
    BeverageDecorator,
    Ice,
    Lime,
    RumAndCoke,
    Umbrella,
    chain,
)
from gof_patterns.domain.core.exceptions import InvalidComponentError

LEAF = "I am a rum and coke"


@pytest.mark.unit
class TestDecoratorChain:
    """Test cases for describing decorated beverages."""

    def test_leaf_description(self):
        assert RumAndCoke().describe() == LEAF

    def test_umbrella_then_lime(self):
        drink = Lime(Umbrella(RumAndCoke()))

        assert drink.describe() == "I am a rum and coke, with an umbrella!, with a lime!"

    def test_wrap_order_determines_suffix_order(self):
        lime_first = Umbrella(Lime(RumAndCoke()))
        umbrella_first = Lime(Umbrella(RumAndCoke()))

        assert lime_first.describe() != umbrella_first.describe()
        assert lime_first.describe().endswith(", with an umbrella!")

    @pytest.mark.parametrize(
        "decorators",
        [
            [],
            [Lime],
            [Ice, Ice],
            [Umbrella, Lime, Ice],
            [Ice, Lime, Umbrella, Lime],
        ],
    )
    def test_description_is_leaf_plus_suffixes_in_wrap_order(self, decorators):
        drink = RumAndCoke()
        for decorator in decorators:
            drink = decorator(drink)

        expected = LEAF + "".join(decorator.suffix for decorator in decorators)
        assert drink.describe() == expected

    def test_decorator_exposes_wrapped_component(self):
        leaf = RumAndCoke()
        drink = Lime(leaf)

        assert drink.wrapped is leaf
        with pytest.raises(AttributeError):
            drink.wrapped = Lime(RumAndCoke())

    @pytest.mark.parametrize("not_a_beverage", [None, "rum", 3])
    def test_decorator_rejects_non_beverages(self, not_a_beverage):
        with pytest.raises(InvalidComponentError):
            Lime(not_a_beverage)

    def test_beverage_is_abstract(self):
        with pytest.raises(TypeError):
            Beverage()

    def test_chain_lists_components_outermost_first(self):
        leaf = RumAndCoke()
        umbrella = Umbrella(leaf)
        lime = Lime(umbrella)

        assert chain(lime) == [lime, umbrella, leaf]
        assert chain(leaf) == [leaf]


    def test_base_decorator_passes_description_through(self):
        assert BeverageDecorator(RumAndCoke()).describe() == LEAF
