"""Protocol definitions for recurgrid.

Defines the pluggable Engine interface and the frozen dataclasses every
engine returns (Evaluation, EvalStats).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class EvalStats:
    """Per-call cost accounting for one evaluation.

    Fields an engine does not track stay at 0.
    """

    cache_hits: int = 0
    cache_misses: int = 0
    cache_size: int = 0
    max_stack_depth: int = 0
    frames_executed: int = 0
    cells_filled: int = 0


@dataclass(frozen=True)
class Evaluation:
    """Result of one top-level evaluation of R(x, y)."""

    engine: str
    x: int
    y: int
    value: int
    stats: EvalStats = field(default_factory=EvalStats)

    def __str__(self) -> str:
        return f"{self.engine}: R({self.x}, {self.y}) = {self.value}"

    def pprint(self, *, file: object = None) -> None:
        """Pretty-print this evaluation using rich formatting."""
        from recurgrid.formatting import pprint_evaluation

        pprint_evaluation(self, file=file)


@runtime_checkable
class Engine(Protocol):
    """Protocol for an evaluation strategy of the recurrence."""

    name: str

    def eval(self, x: int, y: int) -> int:
        """Return R(x, y), an int in [0, 1000)."""
        ...

    def evaluate(self, x: int, y: int) -> Evaluation:
        """Return R(x, y) together with per-call statistics."""
        ...
