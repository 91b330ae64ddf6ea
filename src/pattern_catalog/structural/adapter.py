"""Adapter: let objects with incompatible interfaces collaborate.

Problem:
    A stock monitoring app downloads data as XML and wants to feed a
    third-party analytics library that only accepts JSON. Changing the library
    may break code that depends on it, and often its source is not even
    available.

Solution:
    An adapter wraps one object and exposes it under the interface the other
    side expects, converting each call on the way. The wrapped object does
    not know about the adapter. An adapter could, for instance, present data
    measured in metres as feet and miles.

    In the demo a round hole accepts anything with a radius. A square peg has
    a width instead, so ``SquarePegAdapter`` holds a square peg and reports
    the radius of the smallest circle around it.

Use cases:
    1. An existing class is useful but its interface does not match the rest
       of the code.
    2. Several existing subclasses lack a common feature that cannot be added
       to their superclass.

Pros:
    1. Single Responsibility Principle: conversion code is separate from the
       business logic.
    2. Open/Closed Principle: new adapters do not break client code that
       works through the client interface.

Cons:
    1. More interfaces and classes; sometimes changing the service class is
       simpler.
"""
import math
from typing import Protocol


class RoundShaped(Protocol):
    """Anything a round hole can test."""

    def get_radius(self) -> float:
        ...


class RoundHole:
    def __init__(self, radius: float):
        self.radius = radius

    def fits(self, peg: RoundShaped) -> bool:
        return self.radius >= peg.get_radius()


class RoundPeg:
    def __init__(self, radius: float):
        self.radius = radius

    def get_radius(self) -> float:
        return self.radius


class SquarePeg:
    """Incompatible class: has a width, no radius."""

    def __init__(self, width: float):
        self.width = width

    def get_width(self) -> float:
        return self.width


class SquarePegAdapter:
    """Presents a square peg as a round one."""

    def __init__(self, square_peg: SquarePeg):
        self.square_peg = square_peg

    def get_radius(self) -> float:
        return self.square_peg.get_width() * math.sqrt(2) / 2


def main() -> None:
    """Fit a round peg and two adapted square pegs into a hole of radius 5."""
    hole = RoundHole(5)
    peg = RoundPeg(5)
    print(f"does peg fits: {hole.fits(peg)}")

    small_square_peg = SquarePeg(5)
    large_square_peg = SquarePeg(10)
    print(f"does peg fits: {hole.fits(SquarePegAdapter(small_square_peg))}")
    print(f"does peg fits: {hole.fits(SquarePegAdapter(large_square_peg))}")


if __name__ == "__main__":
    main()
