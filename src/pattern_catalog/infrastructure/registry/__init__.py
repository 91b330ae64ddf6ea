"""Registries for factories and demos."""

from .demo_registry import DemoRegistration, DemoRegistry, get_demo_registry
from .factory_registry import FactoryRegistry, build_registry

__all__ = [
    "FactoryRegistry",
    "build_registry",
    "DemoRegistry",
    "DemoRegistration",
    "get_demo_registry",
]
