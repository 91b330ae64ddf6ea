"""Domain exceptions for the pattern catalogue."""
from typing import Any, List, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass


class ValidationError(DomainException):
    """Raised when domain validation fails."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []


class DemoNotFoundError(DomainException):
    """Raised when a requested demo is not in the catalogue."""
    def __init__(self, demo_name: str, available: Optional[List[str]] = None):
        self.demo_name = demo_name
        self.available = sorted(available or [])
        message = f"Demo '{demo_name}' not found"
        if self.available:
            message += f". Available demos: {', '.join(self.available)}"
        super().__init__(message)
