"""Singleton registry - one lazily created instance per class."""
import threading
from typing import Any, Dict, Optional, Type, TypeVar, cast

from pattern_catalog.infrastructure.logging.logger import get_logger

T = TypeVar("T")


class SingletonRegistry:
    """
    Registry that holds one instance per class.

    Instances are created on first request with the arguments of that first
    request; later requests return the same instance and ignore their
    arguments. Creation is guarded by a lock with a double check, so
    concurrent first access still constructs exactly one instance.
    """

    _instance: Optional["SingletonRegistry"] = None
    _class_lock = threading.Lock()

    def __init__(self):
        """Initialize the registry."""
        self._instances: Dict[Type[Any], Any] = {}
        self._lock = threading.RLock()
        self.logger = get_logger(__name__)

    @classmethod
    def get_instance(cls) -> "SingletonRegistry":
        """Get the process-wide registry."""
        if cls._instance is None:
            with cls._class_lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def get(self, singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
        """
        Get or lazily create the instance of ``singleton_class``.

        Args:
            singleton_class: The class to get an instance of
            *args: Constructor arguments, used only on first creation
            **kwargs: Constructor keyword arguments, used only on first creation

        Returns:
            The singleton instance
        """
        instance = self._instances.get(singleton_class)
        if instance is not None:
            return cast(T, instance)

        with self._lock:
            instance = self._instances.get(singleton_class)
            if instance is None:
                instance = singleton_class(*args, **kwargs)
                self._instances[singleton_class] = instance
                self.logger.debug(f"Created singleton instance of {singleton_class.__name__}")
        return cast(T, instance)

    def has(self, singleton_class: Type[Any]) -> bool:
        """Check if an instance of the class has been created."""
        with self._lock:
            return singleton_class in self._instances

    def reset(self, singleton_class: Type[Any]) -> None:
        """
        Drop the instance of one class.

        This method is primarily for testing purposes.
        """
        with self._lock:
            self._instances.pop(singleton_class, None)

    def clear(self) -> None:
        """Drop all instances."""
        with self._lock:
            self._instances.clear()
