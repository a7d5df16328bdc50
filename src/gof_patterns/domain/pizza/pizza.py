"""Pizza - the product assembled by a builder."""

from dataclasses import dataclass, astuple
from typing import Tuple


@dataclass
class Pizza:
    """A pizza is constructed empty and filled in one step at a time."""

    base: str = ""
    sauce: str = ""
    topping: str = ""

    def set_base(self, base: str) -> None:
        self.base = base

    def set_sauce(self, sauce: str) -> None:
        self.sauce = sauce

    def set_topping(self, topping: str) -> None:
        self.topping = topping

    def fields(self) -> Tuple[str, str, str]:
        return astuple(self)

    def describe(self) -> str:
        return f"Pizza with {self.base} base, {self.sauce} sauce, {self.topping} topping"
