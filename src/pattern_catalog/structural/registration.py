"""Structural demo registration."""
from typing import TYPE_CHECKING, Optional

from pattern_catalog.domain.value_objects import DemoCategory

if TYPE_CHECKING:
    from pattern_catalog.infrastructure.registry.demo_registry import DemoRegistry


def register_structural_demos(registry: Optional["DemoRegistry"] = None) -> None:
    """Register every structural demo with the demo registry."""
    if registry is None:
        from pattern_catalog.infrastructure.registry.demo_registry import get_demo_registry

        registry = get_demo_registry()

    from pattern_catalog.structural import adapter, composite, decorator, facade

    category = DemoCategory.STRUCTURAL
    registry.register_demo("adapter", "Adapter", category, adapter.main)
    registry.register_demo("decorator", "Decorator", category, decorator.main)
    registry.register_demo("composite", "Composite", category, composite.main)
    registry.register_demo("facade", "Facade", category, facade.main)
