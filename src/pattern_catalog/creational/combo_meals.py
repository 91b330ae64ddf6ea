"""Abstract Factory, second example: combo meals at a burger restaurant.

Problem:
    A restaurant sells a Veg combo and a Non-Veg combo. Each combo is a burger
    plus fries, and a Veg combo must never come with a Non-Veg burger.

Solution:
    Burger and Fries are the product interfaces, with a veg and a non-veg
    burger and one kind of fries as variants. ``ComboMealFactory`` is the
    abstract factory and every combo implements it, so ordering through a
    combo can only ever produce a matching meal. Combos are looked up by name
    in a registry populated at startup.

Pros:
    1. Burgers and fries from one combo are always compatible.
    2. Client code never names a concrete burger or fries class.
    3. Open/Closed Principle: a new combo is one more family and one more
       registration.

Cons:
    1. Adding a new kind of product (a drink) changes every combo.
"""
from abc import ABC, abstractmethod
from typing import Optional

from pattern_catalog.infrastructure.registry.factory_registry import FactoryRegistry, build_registry


class Burger(ABC):
    """Burger product interface."""

    @abstractmethod
    def prepare_burger(self) -> None:
        pass


class Fries(ABC):
    """French fries product interface."""

    @abstractmethod
    def prepare_fries(self) -> None:
        pass


class NonVegBurger(Burger):
    def prepare_burger(self) -> None:
        print("Preparing non veg burger")


class VegBurger(Burger):
    def prepare_burger(self) -> None:
        print("Preparing veg burger")


class NormalFries(Fries):
    def prepare_fries(self) -> None:
        print("Preparing fries")


class ComboMealFactory(ABC):
    """Abstract factory: one combo is one family of products."""

    @abstractmethod
    def order_burger(self) -> Burger:
        pass

    @abstractmethod
    def order_fries(self) -> Fries:
        pass


class VegCombo(ComboMealFactory):
    def order_burger(self) -> Burger:
        return VegBurger()

    def order_fries(self) -> Fries:
        return NormalFries()


class NonVegCombo(ComboMealFactory):
    def order_burger(self) -> Burger:
        return NonVegBurger()

    def order_fries(self) -> Fries:
        return NormalFries()


def create_combo_registry() -> FactoryRegistry[ComboMealFactory]:
    """Create a registry with the Veg and NonVeg combos."""
    return build_registry("combo meal", {"Veg": VegCombo, "NonVeg": NonVegCombo})


def serve(combo: ComboMealFactory) -> None:
    combo.order_burger().prepare_burger()
    combo.order_fries().prepare_fries()


def main(registry: Optional[FactoryRegistry[ComboMealFactory]] = None) -> None:
    """Serve one Veg and one NonVeg combo."""
    if registry is None:
        registry = create_combo_registry()

    serve(registry.create("Veg"))
    serve(registry.create("NonVeg"))


if __name__ == "__main__":
    main()
