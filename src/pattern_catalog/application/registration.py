"""Central Demo Registration Module.

This module provides centralized registration of all pattern demos,
ensuring every category package is registered with the demo registry.
"""
from typing import Callable, List, Optional, Tuple

from pattern_catalog.domain.value_objects import DemoCategory
from pattern_catalog.infrastructure.logging.logger import get_logger
from pattern_catalog.infrastructure.registry.demo_registry import DemoRegistry, get_demo_registry


def _category_registrars() -> List[Tuple[DemoCategory, Callable[[DemoRegistry], None]]]:
    from pattern_catalog.behavioral.registration import register_behavioral_demos
    from pattern_catalog.creational.registration import register_creational_demos
    from pattern_catalog.structural.registration import register_structural_demos

    return [
        (DemoCategory.CREATIONAL, register_creational_demos),
        (DemoCategory.STRUCTURAL, register_structural_demos),
        (DemoCategory.BEHAVIORAL, register_behavioral_demos),
    ]


def register_all_demos(registry: Optional[DemoRegistry] = None) -> DemoRegistry:
    """
    Register all available demos with the demo registry.

    Categories that already have registrations are skipped, so calling this
    more than once is safe. If a category fails to register, the error is
    logged and the remaining categories are still registered.

    Returns:
        The registry the demos were registered with

    Raises:
        RuntimeError: If no category could be registered
    """
    logger = get_logger(__name__)
    registry = registry or get_demo_registry()

    registered_categories = []
    failed_categories = []

    for category, register in _category_registrars():
        if registry.get_registered_demos(category):
            logger.debug(f"{category.value} demos already registered")
            registered_categories.append(category.value)
            continue
        try:
            register(registry)
            registered_categories.append(category.value)
            logger.debug(f"{category.value} demos registered successfully")
        except Exception as e:
            failed_categories.append((category.value, str(e)))
            logger.warning(f"Failed to register {category.value} demos: {e}")

    if registered_categories:
        logger.debug(f"Registered demo categories: {', '.join(registered_categories)}")

    if failed_categories:
        failed_summary = ", ".join([f"{name} ({error})" for name, error in failed_categories])
        logger.warning(f"Failed to register demo categories: {failed_summary}")

    if not registered_categories:
        logger.error("No demo categories were successfully registered!")
        raise RuntimeError("Failed to register any demo categories")

    return registry
