"""Creational demo registration."""
from typing import TYPE_CHECKING, Optional

from pattern_catalog.domain.value_objects import DemoCategory

if TYPE_CHECKING:
    from pattern_catalog.infrastructure.registry.demo_registry import DemoRegistry


def register_creational_demos(registry: Optional["DemoRegistry"] = None) -> None:
    """Register every creational demo with the demo registry."""
    if registry is None:
        from pattern_catalog.infrastructure.registry.demo_registry import get_demo_registry

        registry = get_demo_registry()

    from pattern_catalog.creational import (
        abstract_factory,
        builder,
        combo_meals,
        factory_method,
        prototype,
        singleton,
    )

    category = DemoCategory.CREATIONAL
    registry.register_demo("abstract-factory", "Abstract Factory", category, abstract_factory.main)
    registry.register_demo("combo-meals", "Abstract Factory (combo meals)", category, combo_meals.main)
    registry.register_demo("factory-method", "Factory Method", category, factory_method.main)
    registry.register_demo("builder", "Builder", category, builder.main)
    registry.register_demo("singleton", "Singleton", category, singleton.main)
    registry.register_demo("prototype", "Prototype", category, prototype.main)
