"""Template Method: fix an algorithm's skeleton, let subclasses fill in steps.

Problem:
    A strategy game has AI players for several races. Every AI plays a turn
    the same way: gather resources, build structures, build units, attack.
    Only the details differ, yet copying the whole turn into every race
    duplicates the shared parts.

Solution:
    ``GameAI.turn`` is the template method. It calls the steps in a fixed
    order. Some steps have a default implementation (collecting resources,
    choosing whether to scout or attack), others are abstract and must be
    supplied by each race. Subclasses may also override the defaults, as
    the monsters do for resource collection.

Use cases:
    1. Clients should extend only particular steps of an algorithm, not the
       whole algorithm or its structure.
    2. Several classes hold almost identical algorithms with minor
       differences.

Pros:
    1. Clients override only certain parts of a large algorithm.
    2. Duplicate code moves into the superclass.

Cons:
    1. Clients are limited by the provided skeleton.
    2. Suppressing a default step in a subclass can violate the Liskov
       Substitution Principle.
    3. Template methods get harder to maintain as the number of steps grows.
"""
from abc import ABC, abstractmethod
from typing import Optional


class GameAI(ABC):
    def turn(self) -> None:
        """Template method; subclasses must not override it."""
        self.collect_resources()
        self.build_structures()
        self.build_units()
        self.attack()

    def collect_resources(self) -> None:
        print("Collecting resources from built structures...")

    @abstractmethod
    def build_structures(self) -> None:
        pass

    @abstractmethod
    def build_units(self) -> None:
        pass

    def attack(self) -> None:
        enemy = self.closest_enemy()
        if enemy is None:
            self.send_scouts("map center")
        else:
            self.send_warriors(enemy)

    @abstractmethod
    def send_scouts(self, position: str) -> None:
        pass

    @abstractmethod
    def send_warriors(self, position: str) -> None:
        pass

    def closest_enemy(self) -> Optional[str]:
        return None


class OrcsAI(GameAI):
    def build_structures(self) -> None:
        print("Orcs are building farms, barracks, and stronghold...")

    def build_units(self) -> None:
        print("Orcs are building units...")

    def send_scouts(self, position: str) -> None:
        print(f"Orc scouts are heading to position: {position}")

    def send_warriors(self, position: str) -> None:
        print(f"Orc warriors are heading to position: {position}")


class MonstersAI(GameAI):
    def collect_resources(self) -> None:
        print("Monsters don't collect resources.")

    def build_structures(self) -> None:
        print("Monsters don't build structures.")

    def build_units(self) -> None:
        print("Monsters don't build units.")

    def send_scouts(self, position: str) -> None:
        print(f"Monster scouts are heading to position: {position}")

    def send_warriors(self, position: str) -> None:
        print(f"Monster warriors are heading to position: {position}")


def main() -> None:
    """Play one turn for each race."""
    print("Orcs AI Turn:")
    OrcsAI().turn()

    print("\nMonsters AI Turn:")
    MonstersAI().turn()


if __name__ == "__main__":
    main()
