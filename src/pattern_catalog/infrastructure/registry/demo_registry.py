"""Demo Registry - the catalogue of runnable pattern demos.

Each pattern module registers its ``main`` entry point together with the
descriptive metadata shown by the CLI. The registry only stores and resolves
registrations; running demos is the catalogue service's job.
"""
import importlib
import inspect
import threading
from typing import Callable, Dict, List, Optional

from pattern_catalog.domain.exceptions import ConfigurationError, DemoNotFoundError
from pattern_catalog.domain.value_objects import DemoCategory, DemoInfo
from pattern_catalog.infrastructure.logging.logger import get_logger


class DemoRegistration:
    """Container for demo registration information."""

    def __init__(self, info: DemoInfo, entry_point: Callable[..., None]):
        """
        Initialize demo registration.

        Args:
            info: Descriptive metadata of the demo
            entry_point: The demo's ``main`` callable
        """
        self.info = info
        self.entry_point = entry_point

    @property
    def name(self) -> str:
        return self.info.name

    def __repr__(self) -> str:
        return f"DemoRegistration(name='{self.info.name}', category='{self.info.category.value}')"


class DemoRegistry:
    """
    Registry of pattern demos keyed by demo name.

    Thread-safe singleton implementation.
    """

    _instance: Optional["DemoRegistry"] = None
    _lock = threading.Lock()

    def __new__(cls) -> "DemoRegistry":
        """Ensure singleton instance."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize demo registry."""
        if hasattr(self, "_initialized"):
            return

        self._registrations: Dict[str, DemoRegistration] = {}
        self._registry_lock = threading.Lock()
        self.logger = get_logger(__name__)
        self._initialized = True

        self.logger.debug("Demo registry initialized")

    def register_demo(
        self,
        name: str,
        title: str,
        category: DemoCategory,
        entry_point: Callable[..., None],
        module: Optional[str] = None,
    ) -> DemoRegistration:
        """
        Register a demo with its entry point.

        The summary and notes are taken from the docstring of the module the
        entry point is defined in.

        Args:
            name: Unique demo name (e.g. 'abstract-factory')
            title: Display title (e.g. 'Abstract Factory')
            category: Pattern category
            entry_point: Callable that runs the demo
            module: Module name, defaults to the entry point's module

        Raises:
            ConfigurationError: If the demo name is already registered
        """
        module_name = module or entry_point.__module__
        notes = _module_notes(module_name)
        info = DemoInfo(
            name=name,
            title=title,
            category=category,
            module=module_name,
            summary=notes.splitlines()[0] if notes else "",
            notes=notes,
        )
        registration = DemoRegistration(info, entry_point)

        with self._registry_lock:
            if name in self._registrations:
                raise ConfigurationError(f"Demo '{name}' is already registered")
            self._registrations[name] = registration

        self.logger.debug(f"Registered demo: {name}")
        return registration

    def get(self, name: str) -> DemoRegistration:
        """
        Get a demo registration by name.

        Raises:
            DemoNotFoundError: If the demo is not registered
        """
        with self._registry_lock:
            registration = self._registrations.get(name)
            available = list(self._registrations.keys())
        if registration is None:
            raise DemoNotFoundError(name, available)
        return registration

    def get_registered_demos(self, category: Optional[DemoCategory] = None) -> List[DemoRegistration]:
        """Get registrations in registration order, optionally filtered by category."""
        with self._registry_lock:
            registrations = list(self._registrations.values())
        if category is None:
            return registrations
        return [r for r in registrations if r.info.category == category]

    def get_registered_names(self) -> List[str]:
        """Get list of registered demo names."""
        with self._registry_lock:
            return list(self._registrations.keys())

    def is_demo_registered(self, name: str) -> bool:
        """Check if a demo is registered."""
        with self._registry_lock:
            return name in self._registrations

    def clear_registrations(self) -> None:
        """
        Clear all demo registrations.

        This method is primarily for testing purposes.
        """
        with self._registry_lock:
            self._registrations.clear()
        self.logger.debug("Cleared all demo registrations")


def _module_notes(module_name: str) -> str:
    try:
        module = importlib.import_module(module_name)
    except ImportError:
        return ""
    return inspect.getdoc(module) or ""


def get_demo_registry() -> DemoRegistry:
    """
    Get the global demo registry instance.

    Returns:
        Demo registry singleton instance
    """
    return DemoRegistry()
