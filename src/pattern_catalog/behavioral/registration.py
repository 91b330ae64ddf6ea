"""Behavioral demo registration."""
from typing import TYPE_CHECKING, Optional

from pattern_catalog.domain.value_objects import DemoCategory

if TYPE_CHECKING:
    from pattern_catalog.infrastructure.registry.demo_registry import DemoRegistry


def register_behavioral_demos(registry: Optional["DemoRegistry"] = None) -> None:
    """Register every behavioral demo with the demo registry."""
    if registry is None:
        from pattern_catalog.infrastructure.registry.demo_registry import get_demo_registry

        registry = get_demo_registry()

    from pattern_catalog.behavioral import (
        chain_of_responsibility,
        command,
        iterator,
        observer,
        state,
        strategy,
        template_method,
    )

    category = DemoCategory.BEHAVIORAL
    registry.register_demo(
        "chain-of-responsibility", "Chain of Responsibility", category, chain_of_responsibility.main
    )
    registry.register_demo("command", "Command", category, command.main)
    registry.register_demo("state", "State", category, state.main)
    registry.register_demo("iterator", "Iterator", category, iterator.main)
    registry.register_demo("template-method", "Template Method", category, template_method.main)
    registry.register_demo("observer", "Observer", category, observer.main)
    registry.register_demo("strategy", "Strategy", category, strategy.main)
