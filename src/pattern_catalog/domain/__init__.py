"""Domain layer: catalogue value objects and exceptions."""

from .exceptions import ConfigurationError, DemoNotFoundError, DomainException, ValidationError
from .value_objects import DemoCategory, DemoInfo, DemoRunResult

__all__ = [
    "DomainException",
    "ValidationError",
    "ConfigurationError",
    "DemoNotFoundError",
    "DemoCategory",
    "DemoInfo",
    "DemoRunResult",
]
