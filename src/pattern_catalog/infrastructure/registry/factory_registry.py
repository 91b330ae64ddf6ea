"""Factory Registry - string keys mapped to constructor callables.

Creational demos look concrete classes up by name instead of hard-coding
conditionals, so a new variant is added by registering it rather than by
editing the code that creates it. Registrations are explicit: callers
populate the registry at startup.
"""
import threading
from typing import Callable, Dict, Generic, List, Optional, TypeVar

from pattern_catalog.infrastructure.exceptions import DuplicateRegistrationError, UnsupportedTypeError
from pattern_catalog.infrastructure.logging.logger import get_logger

T = TypeVar("T")


class FactoryRegistry(Generic[T]):
    """
    Thread-safe registry of constructor callables keyed by type name.

    Each ``create`` call invokes the registered constructor, so callers get a
    fresh product every time.
    """

    def __init__(self, name: str, allow_override: bool = False):
        """
        Initialize the registry.

        Args:
            name: Human readable registry name used in errors and logs
            allow_override: Replace existing registrations instead of raising
        """
        self.name = name
        self._allow_override = allow_override
        self._factories: Dict[str, Callable[[], T]] = {}
        self._registry_lock = threading.Lock()
        self.logger = get_logger(__name__)

    def register(self, type_name: str, factory: Callable[[], T]) -> None:
        """
        Register a constructor for a type name.

        Raises:
            DuplicateRegistrationError: If the type is registered and overriding is off
        """
        with self._registry_lock:
            if type_name in self._factories and not self._allow_override:
                raise DuplicateRegistrationError(self.name, type_name)
            self._factories[type_name] = factory
        self.logger.debug(f"Registered {self.name} type: {type_name}")

    def unregister(self, type_name: str) -> bool:
        """Remove a registration. Returns True if something was removed."""
        with self._registry_lock:
            return self._factories.pop(type_name, None) is not None

    def create(self, type_name: str) -> T:
        """
        Create a new instance of the registered type.

        Raises:
            UnsupportedTypeError: If the type is not registered
        """
        with self._registry_lock:
            factory = self._factories.get(type_name)
            available = list(self._factories.keys())
        if factory is None:
            raise UnsupportedTypeError(self.name, type_name, available)
        return factory()

    def is_registered(self, type_name: str) -> bool:
        """Check if a type name is registered."""
        with self._registry_lock:
            return type_name in self._factories

    def get_registered_types(self) -> List[str]:
        """Get registered type names in registration order."""
        with self._registry_lock:
            return list(self._factories.keys())

    def clear_registrations(self) -> None:
        """
        Clear all registrations.

        This method is primarily for testing purposes.
        """
        with self._registry_lock:
            self._factories.clear()
        self.logger.debug(f"Cleared all {self.name} registrations")

    def __contains__(self, type_name: object) -> bool:
        return isinstance(type_name, str) and self.is_registered(type_name)

    def __len__(self) -> int:
        with self._registry_lock:
            return len(self._factories)

    def __repr__(self) -> str:
        return f"FactoryRegistry(name='{self.name}', types={self.get_registered_types()})"


def build_registry(name: str, factories: Optional[Dict[str, Callable[[], T]]] = None) -> FactoryRegistry[T]:
    """Create a registry and register the given factories in order."""
    registry: FactoryRegistry[T] = FactoryRegistry(name)
    for type_name, factory in (factories or {}).items():
        registry.register(type_name, factory)
    return registry
