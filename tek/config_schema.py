"""config_schema.py
Schema of the optional tek.yml processor configuration.
"""
from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProcessorConfig(BaseModel):
    """One processor entry, given as a dotted ``module.ClassName`` path."""

    model_config = ConfigDict(extra="forbid")

    module: str
    enabled: bool = True

    @field_validator("module")
    @classmethod
    def _dotted_path(cls, v: str) -> str:
        if "." not in v or v.startswith(".") or v.endswith("."):
            raise ValueError(f"'{v}' is not a dotted module.ClassName path")
        return v


class TekConfig(BaseModel):
    """Top-level tek.yml contents. Processor order is dispatch order."""

    model_config = ConfigDict(extra="forbid")

    processors: List[ProcessorConfig] = Field(default_factory=list)
