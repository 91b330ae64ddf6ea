"""Composite: treat single objects and groups of objects uniformly.

Problem:
    A graphics editor lets users draw circles and rectangles. Later users
    want to group shapes and move or draw the whole group at once, without
    the editor caring whether it holds a single shape or a group.

Solution:
    Leaves (``Circle``, ``Rectangle``) and containers (``CompoundShape``)
    share the ``Graphic`` interface. A container forwards every operation to
    its children, in the order they were added, and then performs its own
    part. Containers may hold other containers, forming a tree.

Use cases:
    1. The object structure is a tree.
    2. Client code should treat simple and complex elements the same way.

Pros:
    1. Polymorphism and recursion make complex trees easy to work with.
    2. Open/Closed Principle: new element types fit into the existing tree.

Cons:
    1. A common interface for very different classes may need to be
       overgeneralized and becomes harder to understand.
"""
from abc import ABC, abstractmethod
from typing import List


class Graphic(ABC):
    """Component interface."""

    @abstractmethod
    def move(self, x: int, y: int) -> None:
        pass

    @abstractmethod
    def draw(self) -> None:
        pass


class Circle(Graphic):
    def move(self, x: int, y: int) -> None:
        print(f"Moving circle to ({x}, {y})")

    def draw(self) -> None:
        print("Drawing a circle")


class Rectangle(Graphic):
    def move(self, x: int, y: int) -> None:
        print(f"Moving rectangle to ({x}, {y})")

    def draw(self) -> None:
        print("Drawing a rectangle")


class CompoundShape(Graphic):
    """Container node; children are visited before the shape itself."""

    def __init__(self) -> None:
        self._children: List[Graphic] = []

    def add(self, graphic: Graphic) -> None:
        self._children.append(graphic)

    def remove(self, graphic: Graphic) -> None:
        """Remove a child; removing a graphic that is not a child is a no-op."""
        if graphic in self._children:
            self._children.remove(graphic)

    @property
    def children(self) -> List[Graphic]:
        return list(self._children)

    def move(self, x: int, y: int) -> None:
        for child in self._children:
            child.move(x, y)
        print(f"Moving compound shape to ({x}, {y})")

    def draw(self) -> None:
        for child in self._children:
            child.draw()
        print("Drawing a compound shape")


def main() -> None:
    """Group a circle and a rectangle, then move and draw the group."""
    compound_shape = CompoundShape()
    compound_shape.add(Circle())
    compound_shape.add(Rectangle())

    compound_shape.move(10, 20)
    compound_shape.draw()


if __name__ == "__main__":
    main()
