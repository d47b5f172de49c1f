"""Domain models for record rendering configuration and context."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field

# module -> function -> zero-argument generator
CapabilityGraph = dict[str, dict[str, Callable[[], Any]]]

# module -> function -> generated value, rebuilt for every record
ResolvedContext = dict[str, dict[str, Any]]


class OutputFormat(str, Enum):
    """Container format wrapped around the rendered records."""

    DEFAULT = "default"
    CSV = "csv"
    JSON = "json"


class FormatLayout(BaseModel):
    """Container framing decided for one output format."""

    model_config = ConfigDict(frozen=True)

    header: str = Field(default="", description="Written once before the records")
    footer: str = Field(default="", description="Written once after the records")
    separator: str = Field(default="\n", description="Written between records")
    record_template: str = Field(..., description="Template rendered per record")


class RenderJob(BaseModel):
    """A single generation run: one template rendered N times into one file."""

    template_path: Path = Field(..., description="Record template file path")
    output_path: Path = Field(..., description="Output file path")
    total_records: int = Field(default=1000, ge=0, description="Records to render")
    locale: str = Field(default="en", min_length=1, description="Faker locale")
    output_format: OutputFormat = Field(
        default=OutputFormat.DEFAULT, description="Container format"
    )
    seed: int | None = Field(default=None, description="Seed for reproducible data")
    file_mode: int = Field(default=0o644, description="File permissions (octal)")
