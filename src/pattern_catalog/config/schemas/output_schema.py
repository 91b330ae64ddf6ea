"""Output and demo configuration schemas."""
from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator


class OutputFormat(str, Enum):
    """Supported CLI output formats."""
    JSON = "json"
    YAML = "yaml"
    TABLE = "table"
    LIST = "list"


class OutputConfig(BaseModel):
    """CLI output configuration."""

    format: OutputFormat = Field(OutputFormat.TABLE, description="Default output format")
    show_notes: bool = Field(True, description="Include the pattern notes in 'show' output")

    @field_validator("format", mode="before")
    @classmethod
    def normalize_format(cls, v):
        """Accept output formats in any case."""
        if isinstance(v, str):
            return v.lower()
        return v


def _default_demo_options() -> Dict[str, Dict[str, Any]]:
    return {"observer": {"log_path": "log.txt"}}


class DemoConfig(BaseModel):
    """Per-demo keyword options passed to the demo entry points."""

    options: Dict[str, Dict[str, Any]] = Field(
        default_factory=_default_demo_options,
        description="Keyword arguments keyed by demo name",
    )

    def options_for(self, demo_name: str) -> Dict[str, Any]:
        """Get a copy of the options configured for a demo."""
        return dict(self.options.get(demo_name, {}))
