"""Infrastructure exceptions."""
from typing import Any, List, Optional


class InfrastructureError(Exception):
    """Base exception for infrastructure-related errors."""
    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.details = details


class RegistryError(InfrastructureError):
    """Raised when a registry operation fails."""
    pass


class UnsupportedTypeError(RegistryError):
    """Raised when a type key that was never registered is requested."""
    def __init__(self, registry_name: str, type_name: str, available: Optional[List[str]] = None):
        self.registry_name = registry_name
        self.type_name = type_name
        self.available = list(available or [])
        super().__init__(
            f"{registry_name}: type '{type_name}' is not registered. "
            f"Available types: {self.available}"
        )


class DuplicateRegistrationError(RegistryError):
    """Raised when a type key is registered twice."""
    def __init__(self, registry_name: str, type_name: str):
        self.registry_name = registry_name
        self.type_name = type_name
        super().__init__(f"{registry_name}: type '{type_name}' is already registered")
