"""Tests for demo registration and the catalog service."""

from unittest.mock import patch

import pytest

from pattern_catalog.application import CatalogService, register_all_demos
from pattern_catalog.config import DemoConfig
from pattern_catalog.domain.exceptions import DemoNotFoundError
from pattern_catalog.domain.value_objects import DemoCategory

ALL_DEMOS = [
    "abstract-factory",
    "combo-meals",
    "factory-method",
    "builder",
    "singleton",
    "prototype",
    "adapter",
    "decorator",
    "composite",
    "facade",
    "chain-of-responsibility",
    "command",
    "state",
    "iterator",
    "template-method",
    "observer",
    "strategy",
]


@pytest.fixture
def service(demo_registry, tmp_path):
    register_all_demos(demo_registry)
    demo_config = DemoConfig(options={"observer": {"log_path": str(tmp_path / "log.txt")}})
    return CatalogService(demo_registry, demo_config)


class TestRegistration:
    """Test demo registration."""

    def test_registers_every_demo_in_order(self, demo_registry):
        register_all_demos(demo_registry)

        assert demo_registry.get_registered_names() == ALL_DEMOS

    def test_registration_is_idempotent(self, demo_registry):
        register_all_demos(demo_registry)
        register_all_demos(demo_registry)

        assert len(demo_registry.get_registered_names()) == len(ALL_DEMOS)

    def test_failed_category_does_not_stop_others(self, demo_registry):
        with patch(
            "pattern_catalog.structural.registration.register_structural_demos",
            side_effect=RuntimeError("boom"),
        ):
            register_all_demos(demo_registry)

        assert demo_registry.get_registered_demos(DemoCategory.STRUCTURAL) == []
        assert len(demo_registry.get_registered_demos(DemoCategory.BEHAVIORAL)) == 7


class TestCatalogService:
    """Test listing, describing and running demos."""

    def test_list_by_category(self, service):
        names = [info.name for info in service.list_demos(DemoCategory.STRUCTURAL)]

        assert names == ["adapter", "decorator", "composite", "facade"]

    def test_every_demo_has_commentary(self, service):
        for info in service.list_demos():
            assert info.summary, info.name
            assert "Pros:" in info.notes, info.name
            assert "Cons:" in info.notes, info.name

    def test_describe_unknown_demo(self, service):
        with pytest.raises(DemoNotFoundError):
            service.describe("visitor")

    def test_run_demo_captures_output(self, service, capsys):
        result = service.run_demo("strategy")

        assert result.success is True
        assert result.output_lines == [
            "Paid 100 using Credit Card.",
            "Paid 200 using PayPal.",
            "Paid 300 using Bank Transfer.",
        ]
        assert result.duration_ms >= 0
        assert capsys.readouterr().out == ""

    def test_run_demo_passes_configured_options(self, service, tmp_path):
        result = service.run_demo("observer")

        assert result.success is True
        assert (tmp_path / "log.txt").read_text() == "Someone has opened the file: test_file.txt\n"

    def test_failing_demo_reports_error(self, demo_registry):
        def broken():
            print("partial")
            raise ValueError("bad state")

        demo_registry.register_demo("broken", "Broken", DemoCategory.BEHAVIORAL, broken)
        service = CatalogService(demo_registry)

        result = service.run_demo("broken")

        assert result.success is False
        assert result.error == "ValueError: bad state"
        assert result.output_lines == ["partial"]

    def test_demos_are_repeatable(self, service):
        first = service.run_demo("singleton")
        second = service.run_demo("singleton")

        assert first.output_lines == second.output_lines

    def test_run_all(self, service):
        results = service.run_all()

        assert [r.name for r in results] == ALL_DEMOS
        assert all(r.success for r in results)
