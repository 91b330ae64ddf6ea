import logging
from logging.handlers import RotatingFileHandler

import pytest

from pattern_catalog.config import reset_config_manager
from pattern_catalog.creational.singleton import Product
from pattern_catalog.infrastructure.registry.demo_registry import DemoRegistry


def remove_setup_handlers(root):
    """Drop handlers installed by setup_logging; pytest's own are subclasses."""
    for handler in root.handlers[:]:
        if type(handler) in (logging.StreamHandler, RotatingFileHandler):
            root.removeHandler(handler)
            handler.close()


@pytest.fixture(autouse=True)
def clean_catalog_state(monkeypatch):
    """Reset process-wide registries, configuration and log handlers between tests."""
    for env_var in (
        "PATTERN_CATALOG_CONFIG",
        "PATTERN_CATALOG_LOG_LEVEL",
        "PATTERN_CATALOG_LOG_DESTINATION",
        "PATTERN_CATALOG_OUTPUT_FORMAT",
    ):
        monkeypatch.delenv(env_var, raising=False)

    root = logging.getLogger()
    level = root.level

    DemoRegistry().clear_registrations()
    reset_config_manager()
    Product.reset_instance()
    yield

    # Before the resets below log anything to a stream capsys has closed
    remove_setup_handlers(root)
    root.setLevel(level)

    DemoRegistry().clear_registrations()
    reset_config_manager()
    Product.reset_instance()


@pytest.fixture
def demo_registry():
    """Empty demo registry."""
    return DemoRegistry()


@pytest.fixture
def drop_setup_handlers():
    """Callable that removes setup_logging handlers from the root logger."""
    return remove_setup_handlers
