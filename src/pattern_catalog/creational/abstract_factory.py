"""Abstract Factory: build families of related objects without naming their concrete classes.

Problem:
    A furniture shop simulator sells a family of products (chair, sofa, coffee
    table) in several variants: Victorian, Art Deco and Modern. Customers get
    upset when a Victorian sofa arrives with a Modern chair, so the pieces of
    one order must always come from the same variant. Catalogues also change
    often, and adding a variant should not mean editing the code that uses
    the furniture.

Solution:
    1. Declare an interface for every product (Chair, Sofa, CoffeeTable).
    2. Implement each product once per variant (VictorianChair, ModernSofa ...).
    3. Declare the abstract factory: one creation method per product.
    4. Implement one concrete factory per variant; it only ever returns
       products of its own variant, so a family stays consistent.
    5. Clients look a factory up by style name in a registry and then work
       through the abstract interfaces only.

Registry instead of a conditional:
    Mapping a style name to a factory constructor keeps the lookup closed for
    modification: a new style is a new registration, not a new ``elif``.
    Dependency injection containers and configuration files (JSON, YAML) are
    the usual alternatives for wiring the registrations.

Use cases:
    1. Code must work with several families of related products without
       depending on their concrete classes.
    2. A class deals with multiple product types and its factory methods blur
       its primary responsibility.

Pros:
    1. Products obtained from one factory are compatible with each other.
    2. Single Responsibility Principle: creation code lives in one place.
    3. Open/Closed Principle: new variants do not break client code.

Cons:
    1. Many new interfaces and classes are introduced along with the pattern.
"""
from abc import ABC, abstractmethod
from typing import Optional

from pattern_catalog.infrastructure.registry.factory_registry import FactoryRegistry


# ---------- Products ----------

class Chair(ABC):
    """Chair product interface."""

    @abstractmethod
    def sit_on(self) -> None:
        pass


class Sofa(ABC):
    """Sofa product interface."""

    @abstractmethod
    def lie_on(self) -> None:
        pass


class CoffeeTable(ABC):
    """Coffee table product interface."""

    @abstractmethod
    def keep_things(self) -> None:
        pass


# ---------- Art Deco variant ----------

class ArtChair(Chair):
    def sit_on(self) -> None:
        print("Sitting on Art Chair")


class ArtSofa(Sofa):
    def lie_on(self) -> None:
        print("Lieing on Art Sofa")


class ArtCoffeeTable(CoffeeTable):
    def keep_things(self) -> None:
        print("Keeping cups on Art Coffee table")


# ---------- Victorian variant ----------

class VictorianChair(Chair):
    def sit_on(self) -> None:
        print("Sitting on Victorian Chair")


class VictorianSofa(Sofa):
    def lie_on(self) -> None:
        print("Lieing on Victorian Sofa")


class VictorianCoffeeTable(CoffeeTable):
    def keep_things(self) -> None:
        print("Keeping cups on Victorian Coffee table")


# ---------- Modern variant ----------

class ModernChair(Chair):
    def sit_on(self) -> None:
        print("Sitting on Modern Chair")


class ModernSofa(Sofa):
    def lie_on(self) -> None:
        print("Lieing on Modern Sofa")


class ModernCoffeeTable(CoffeeTable):
    def keep_things(self) -> None:
        print("Keeping cups on Modern Coffee table")


# ---------- Abstract factory and families ----------

class FurnitureFactory(ABC):
    """Abstract factory that creates chairs, sofas and coffee tables."""

    @abstractmethod
    def chair(self) -> Chair:
        pass

    @abstractmethod
    def sofa(self) -> Sofa:
        pass

    @abstractmethod
    def coffee_table(self) -> CoffeeTable:
        pass


class VictorianFurniture(FurnitureFactory):
    def chair(self) -> Chair:
        return VictorianChair()

    def sofa(self) -> Sofa:
        return VictorianSofa()

    def coffee_table(self) -> CoffeeTable:
        return VictorianCoffeeTable()


class ArtFurniture(FurnitureFactory):
    def chair(self) -> Chair:
        return ArtChair()

    def sofa(self) -> Sofa:
        return ArtSofa()

    def coffee_table(self) -> CoffeeTable:
        return ArtCoffeeTable()


class ModernFurniture(FurnitureFactory):
    def chair(self) -> Chair:
        return ModernChair()

    def sofa(self) -> Sofa:
        return ModernSofa()

    def coffee_table(self) -> CoffeeTable:
        return ModernCoffeeTable()


# ---------- Registry ----------

FURNITURE_STYLES = {
    "Victorian": "Victorian Furniture",
    "ArtDeco": "Art Deco Furniture",
    "Modern": "Modern Furniture",
}


def register_furniture_factories(registry: FactoryRegistry[FurnitureFactory]) -> FactoryRegistry[FurnitureFactory]:
    """Register the known furniture families under their style names."""
    registry.register("Victorian", VictorianFurniture)
    registry.register("ArtDeco", ArtFurniture)
    registry.register("Modern", ModernFurniture)
    return registry


def create_furniture_registry() -> FactoryRegistry[FurnitureFactory]:
    """Create a registry populated with every furniture family."""
    return register_furniture_factories(FactoryRegistry("furniture"))


def get_furniture_factory(
    style: str, registry: Optional[FactoryRegistry[FurnitureFactory]] = None
) -> FurnitureFactory:
    """
    Get a fresh furniture family for a style.

    Raises:
        UnsupportedTypeError: If no family is registered for the style
    """
    if registry is None:
        registry = create_furniture_registry()
    return registry.create(style)


def furnish_room(factory: FurnitureFactory) -> None:
    """Client code: uses one family through the abstract interfaces only."""
    factory.chair().sit_on()
    factory.sofa().lie_on()
    factory.coffee_table().keep_things()


def main(registry: Optional[FactoryRegistry[FurnitureFactory]] = None) -> None:
    """Furnish one room per registered style."""
    if registry is None:
        registry = create_furniture_registry()

    for style, heading in FURNITURE_STYLES.items():
        print(f"****{heading}****")
        furnish_room(get_furniture_factory(style, registry))
        print()


if __name__ == "__main__":
    main()
