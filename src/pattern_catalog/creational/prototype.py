"""Prototype: copy existing objects without depending on their classes.

Why clone?
    1. Copying every property by hand is error prone for objects with many or
       complex properties.
    2. Creating an object can be expensive (costly computation, queries,
       complex initialization); copying a ready one is cheaper.
    3. A clone is independent: changing it does not affect the original.

Problem:
    Copying an object field by field requires knowing its concrete class,
    and code that only sees an interface does not.

Solution:
    Delegate cloning to the objects themselves. Every prototype implements
    ``clone()``, so a list of ``Shape`` values can be copied without knowing
    which are circles and which are rectangles. A clone compares equal to
    its original field by field while being a different object.

Pros:
    1. Objects are cloned without coupling to their concrete classes.
    2. Repeated initialization code is replaced by cloning a prepared
       prototype.
    3. Complex objects are produced more conveniently.

Cons:
    1. Cloning objects with circular references can be tricky.
"""
import dataclasses
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, TypeVar

S = TypeVar("S", bound="Shape")


@dataclass
class Shape(ABC):
    """Abstract prototype."""

    x: int = 0
    y: int = 0
    color: Optional[str] = None

    def clone(self: S) -> S:
        """Return a field-wise copy of this shape."""
        return dataclasses.replace(self)

    @abstractmethod
    def area(self) -> float:
        pass


@dataclass
class Rectangle(Shape):
    length: int = 0
    breadth: int = 0

    def area(self) -> float:
        return float(self.length * self.breadth)

    def __str__(self) -> str:
        return (
            f"Rectangle: [length = {self.length}, breadth = {self.breadth}, "
            f"x = {self.x}, y = {self.y}, color = {self.color}]"
        )


@dataclass
class Circle(Shape):
    radius: int = 0

    def area(self) -> float:
        return math.pi * self.radius ** 2

    def __str__(self) -> str:
        return f"Circle: [radius = {self.radius}, x = {self.x}, y = {self.y}, color = {self.color}]"


def clone_and_compare(shapes: List[Shape]) -> List[Shape]:
    """Clone every shape through the abstract interface and report the result."""
    shapes_copy = [shape.clone() for shape in shapes]

    for i, (shape, copy) in enumerate(zip(shapes, shapes_copy)):
        if shape is not copy:
            print(f"{i}: Shapes are different objects (yay!)")
            if shape == copy:
                print(f"{i}: And they are identical (yay!)")
            else:
                print(f"{i}: But they are not identical (booo!)")
        else:
            print(f"{i}: Shape objects are the same (booo!)")

    return shapes_copy


def main() -> None:
    """Clone a mixed list of circles and rectangles."""
    shapes: List[Shape] = []

    circle = Circle(x=10, y=10, color="Red", radius=10)
    shapes.append(circle)
    shapes.append(circle.clone())

    rectangle = Rectangle(x=20, y=20, color="Blue", length=15, breadth=25)
    shapes.append(rectangle)
    shapes.append(rectangle.clone())

    clone_and_compare(shapes)


if __name__ == "__main__":
    main()
