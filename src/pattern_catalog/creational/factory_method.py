"""Factory Method: let a factory decide which concrete product to create.

Problem:
    A transport company started with road transport only and its code is
    coupled to ``RoadTransport`` everywhere. Adding air transport would mean
    touching all of that code.

Solution:
    Clients depend on the ``Transport`` interface and ask a factory for a
    transport by name. Only the factory knows the concrete classes, so adding
    ships later does not touch the clients.

    Editing the factory for every new transport would still violate the
    Open/Closed Principle, so the factory keeps a registry of constructors
    keyed by name and new transports are registered instead. Dependency
    injection containers and configuration files (JSON, YAML) are the usual
    alternatives for wiring the registrations.

Use cases:
    1. The exact types and dependencies of the objects your code works with
       are not known beforehand.
    2. Users of a library or framework need a way to extend its internal
       components.
    3. Existing objects should be reused instead of rebuilt each time.

Pros:
    1. No tight coupling between the creator and the concrete products.
    2. Single Responsibility Principle: creation code lives in one place.
    3. Open/Closed Principle: new products do not break client code.

Cons:
    1. The code may become more complicated because of the extra subclasses.

Examples:
    Cross-platform GUI widgets, notifications sent by e-mail, SMS or push,
    shapes created in a graphic editor.
"""
from abc import ABC, abstractmethod
from typing import List

from pattern_catalog.infrastructure.registry.factory_registry import FactoryRegistry


class Transport(ABC):
    """Product interface."""

    @abstractmethod
    def get_transport_cost(self) -> int:
        pass


class RoadTransport(Transport):
    def get_transport_cost(self) -> int:
        return 1000


class AirTransport(Transport):
    def get_transport_cost(self) -> int:
        return 10000


class TransportFactory:
    """Creates transports by name from registered constructors."""

    def __init__(self):
        self._registry: FactoryRegistry[Transport] = FactoryRegistry("transport")

    def register(self, transport_type: str, transport_class: type) -> None:
        self._registry.register(transport_type, transport_class)

    def get_transport(self, transport_type: str) -> Transport:
        """
        Create a transport of the given type.

        Raises:
            UnsupportedTypeError: If the type was never registered
        """
        return self._registry.create(transport_type)

    def registered_types(self) -> List[str]:
        return self._registry.get_registered_types()


def main() -> None:
    """Register the transports and quote their costs."""
    factory = TransportFactory()
    factory.register("Road", RoadTransport)
    factory.register("Air", AirTransport)

    for transport_type in ("Road", "Air"):
        transport = factory.get_transport(transport_type)
        print(f"Transport cost: {transport.get_transport_cost()}")


if __name__ == "__main__":
    main()
