"""Decorator: attach behaviour to an object by wrapping it.

Problem:
    A coffee ordering system offers add-ons such as milk, sugar and whipped
    cream. One subclass per combination (CoffeeWithMilk,
    CoffeeWithMilkAndSugar ...) multiplies with every new add-on.

Solution:
    Keep one component interface (``Coffee``) and one concrete component
    (``BaseCoffee``). Each add-on is a decorator that implements the same
    interface, holds the coffee it wraps, forwards calls to it and adds its
    own increment. Decorators stack in any order at runtime.

Use cases:
    1. Extra behaviour must be assigned at runtime without breaking the code
       that uses the objects.
    2. Extending behaviour through inheritance is awkward or impossible.

Pros:
    1. Behaviour is combined dynamically without modifying existing code.
    2. Each decorator has one focused task.
    3. Open for new add-ons, closed for modification.

Cons:
    1. Many small classes.
    2. Deep stacks are hard to read and debug.
    3. Results depend on the order decorators are applied in.
    4. Each layer costs a call and an object.
    5. The final behaviour is only visible by inspecting every layer.
"""
from abc import ABC, abstractmethod


class Coffee(ABC):
    """Component interface."""

    @abstractmethod
    def get_cost(self) -> float:
        pass

    @abstractmethod
    def get_description(self) -> str:
        pass


class BaseCoffee(Coffee):
    def get_cost(self) -> float:
        return 1.0

    def get_description(self) -> str:
        return "Base coffee"


class CoffeeDecorator(Coffee):
    """Forwards to the wrapped coffee; subclasses add their increment."""

    def __init__(self, coffee: Coffee):
        self.coffee = coffee

    def get_cost(self) -> float:
        return self.coffee.get_cost()

    def get_description(self) -> str:
        return self.coffee.get_description()


class SugarDecorator(CoffeeDecorator):
    def get_cost(self) -> float:
        return super().get_cost() + 1

    def get_description(self) -> str:
        return super().get_description() + ", sugar"


class MilkDecorator(CoffeeDecorator):
    def get_cost(self) -> float:
        return super().get_cost() + 1

    def get_description(self) -> str:
        return super().get_description() + ", milk"


def describe(coffee: Coffee) -> str:
    return f"{coffee.get_description()}: $ {coffee.get_cost()}"


def main() -> None:
    """Price a plain coffee, then add sugar, then milk."""
    coffee: Coffee = BaseCoffee()
    print(describe(coffee))

    coffee = SugarDecorator(coffee)
    print(describe(coffee))

    coffee = MilkDecorator(coffee)
    print(describe(coffee))


if __name__ == "__main__":
    main()
