"""Configuration models for recurgrid.

EngineConfig holds the settings shared by every engine instance.
VerificationConfig selects which engines the verification harness runs.
"""

from __future__ import annotations

import enum
from typing import Optional

from pydantic import BaseModel, field_validator


class EngineKind(str, enum.Enum):
    """The four evaluation strategies, in registry order."""

    MEMO = "memo"
    STACK_MACHINE = "stack_machine"
    SUSPEND = "suspend"
    TABULATION = "tabulation"

    def __repr__(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


class EngineConfig(BaseModel):
    """Per-engine configuration."""

    model_config = {"frozen": True}

    max_recursive_depth: Optional[int] = None  # None = rely on the host limit
    collect_stats: bool = True

    @field_validator("max_recursive_depth")
    @classmethod
    def _non_negative_depth(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v < 0:
            raise ValueError("max_recursive_depth must be non-negative")
        return v


class VerificationConfig(BaseModel):
    """Configuration for the cross-engine verification harness."""

    model_config = {"frozen": True}

    engines: list[EngineKind] = list(EngineKind)
    engine: EngineConfig = EngineConfig()

    @field_validator("engines")
    @classmethod
    def _at_least_one_engine(cls, v: list[EngineKind]) -> list[EngineKind]:
        if not v:
            raise ValueError("engines must name at least one engine")
        if len(set(v)) != len(v):
            raise ValueError("engines must not contain duplicates")
        return v
