"""Catalog service - list, describe and run pattern demos."""
import contextlib
import io
import time
from typing import List, Optional

from pattern_catalog.config.schemas.output_schema import DemoConfig
from pattern_catalog.domain.value_objects import DemoCategory, DemoInfo, DemoRunResult
from pattern_catalog.infrastructure.logging.logger import get_logger
from pattern_catalog.infrastructure.registry.demo_registry import DemoRegistry


class CatalogService:
    """
    Application service over the demo registry.

    Demos print to stdout; ``run_demo`` captures that output into a
    ``DemoRunResult`` so callers decide how to present it.
    """

    def __init__(self, registry: DemoRegistry, demo_config: Optional[DemoConfig] = None):
        self._registry = registry
        self._demo_config = demo_config or DemoConfig()
        self._logger = get_logger(__name__)

    def list_demos(self, category: Optional[DemoCategory] = None) -> List[DemoInfo]:
        """List demo metadata in registration order."""
        return [r.info for r in self._registry.get_registered_demos(category)]

    def describe(self, name: str) -> DemoInfo:
        """
        Get the metadata of one demo.

        Raises:
            DemoNotFoundError: If the demo is not registered
        """
        return self._registry.get(name).info

    def run_demo(self, name: str) -> DemoRunResult:
        """
        Run a demo and capture what it prints.

        A demo that raises produces an unsuccessful result carrying the
        output printed so far and the error message.

        Raises:
            DemoNotFoundError: If the demo is not registered
        """
        registration = self._registry.get(name)
        options = self._demo_config.options_for(name)
        buffer = io.StringIO()

        self._logger.debug(f"Running demo {name} with options {options}")
        start = time.perf_counter()
        error: Optional[str] = None
        try:
            with contextlib.redirect_stdout(buffer):
                registration.entry_point(**options)
        except Exception as e:
            error = f"{type(e).__name__}: {e}"
            self._logger.error(f"Demo {name} failed: {error}")
        duration_ms = (time.perf_counter() - start) * 1000

        return DemoRunResult(
            name=name,
            success=error is None,
            output_lines=buffer.getvalue().splitlines(),
            error=error,
            duration_ms=round(duration_ms, 3),
        )

    def run_all(self, category: Optional[DemoCategory] = None) -> List[DemoRunResult]:
        """Run every demo, optionally of one category, in registration order."""
        return [self.run_demo(info.name) for info in self.list_demos(category)]
