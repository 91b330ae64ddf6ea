"""Tests for the demo registry."""

import pytest

from pattern_catalog.domain.exceptions import ConfigurationError, DemoNotFoundError
from pattern_catalog.domain.value_objects import DemoCategory
from pattern_catalog.infrastructure.registry.demo_registry import DemoRegistry, get_demo_registry
from pattern_catalog.structural import facade
from pattern_catalog.behavioral import strategy


class TestDemoRegistry:
    """Test demo registry functionality."""

    def test_singleton(self):
        """Test that the registry is a process-wide singleton."""
        assert DemoRegistry() is DemoRegistry()
        assert get_demo_registry() is DemoRegistry()

    def test_register_demo_reads_module_docstring(self, demo_registry):
        """Test that summary and notes come from the module docstring."""
        registration = demo_registry.register_demo(
            "facade", "Facade", DemoCategory.STRUCTURAL, facade.main
        )

        info = registration.info
        assert registration.name == "facade"
        assert info.module == "pattern_catalog.structural.facade"
        assert info.summary == "Facade: a simple front for a complicated subsystem."
        assert "Use cases:" in info.notes
        assert "Pros:" in info.notes
        assert "Cons:" in info.notes

    def test_duplicate_name_rejected(self, demo_registry):
        """Test that a demo name can only be registered once."""
        demo_registry.register_demo("facade", "Facade", DemoCategory.STRUCTURAL, facade.main)

        with pytest.raises(ConfigurationError, match="already registered"):
            demo_registry.register_demo("facade", "Facade", DemoCategory.STRUCTURAL, facade.main)

    def test_get_unknown_demo_lists_available(self, demo_registry):
        """Test that unknown names raise with the sorted available names."""
        demo_registry.register_demo("strategy", "Strategy", DemoCategory.BEHAVIORAL, strategy.main)
        demo_registry.register_demo("facade", "Facade", DemoCategory.STRUCTURAL, facade.main)

        with pytest.raises(DemoNotFoundError) as exc_info:
            demo_registry.get("visitor")

        assert exc_info.value.demo_name == "visitor"
        assert str(exc_info.value) == "Demo 'visitor' not found. Available demos: facade, strategy"

    def test_filter_by_category(self, demo_registry):
        """Test listing registrations of one category."""
        demo_registry.register_demo("strategy", "Strategy", DemoCategory.BEHAVIORAL, strategy.main)
        demo_registry.register_demo("facade", "Facade", DemoCategory.STRUCTURAL, facade.main)

        structural = demo_registry.get_registered_demos(DemoCategory.STRUCTURAL)

        assert [r.name for r in structural] == ["facade"]
        assert demo_registry.get_registered_names() == ["strategy", "facade"]
        assert demo_registry.is_demo_registered("strategy")

    def test_clear_registrations(self, demo_registry):
        """Test clearing all registrations."""
        demo_registry.register_demo("facade", "Facade", DemoCategory.STRUCTURAL, facade.main)

        demo_registry.clear_registrations()

        assert demo_registry.get_registered_names() == []
