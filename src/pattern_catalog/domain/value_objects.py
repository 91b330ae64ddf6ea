"""Catalogue value objects."""
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class DemoCategory(str, Enum):
    """Gang-of-Four pattern category."""
    CREATIONAL = "creational"
    STRUCTURAL = "structural"
    BEHAVIORAL = "behavioral"


class DemoInfo(BaseModel):
    """Descriptive metadata of one catalogue entry."""
    model_config = ConfigDict(frozen=True)

    name: str
    title: str
    category: DemoCategory
    module: str
    summary: str = ""
    notes: str = ""


class DemoRunResult(BaseModel):
    """Outcome of running a demo entry point."""
    model_config = ConfigDict(frozen=True)

    name: str
    success: bool
    output_lines: List[str] = Field(default_factory=list)
    error: Optional[str] = None
    duration_ms: float = 0.0

    @property
    def output(self) -> str:
        """Captured output as a single string."""
        return "\n".join(self.output_lines)
