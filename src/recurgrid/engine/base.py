"""Shared scaffolding for the evaluation engines.

BaseEngine validates inputs, wraps each engine's raw result in an
Evaluation, and logs completed evaluations. Subclasses implement ``_run``.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from recurgrid.engine.cache import Cache
from recurgrid.exceptions import RecursionBudgetError
from recurgrid.models.config import EngineConfig
from recurgrid.protocols import EvalStats, Evaluation
from recurgrid.recurrence import validate_coordinate

logger = logging.getLogger(__name__)


class BaseEngine(ABC):
    """Base class for the four engines.

    Engines hold only their (immutable) configuration; every call builds
    its own cache and working state, so one instance can serve many threads.
    """

    name: str = ""

    def __init__(self, config: EngineConfig | None = None) -> None:
        self.config = config if config is not None else EngineConfig()

    def eval(self, x: int, y: int) -> int:
        """Return R(x, y)."""
        return self.evaluate(x, y).value

    def evaluate(self, x: int, y: int) -> Evaluation:
        """Return R(x, y) together with per-call statistics.

        Raises:
            InvalidCoordinateError: If x or y is outside the input domain.
        """
        x, y = validate_coordinate(x, y)
        value, stats = self._run(x, y)
        logger.debug("%s R(%d, %d) = %d %s", self.name, x, y, value, stats)
        return Evaluation(engine=self.name, x=x, y=y, value=value, stats=stats)

    @abstractmethod
    def _run(self, x: int, y: int) -> tuple[int, EvalStats]:
        """Compute R(x, y) for a validated coordinate."""

    def _new_cache(self) -> Cache:
        return Cache(count=self.config.collect_stats)

    def _check_recursion_budget(self, x: int, y: int) -> None:
        """Fail fast when x + y exceeds the configured recursion depth."""
        budget = self.config.max_recursive_depth
        if budget is not None and x + y > budget:
            raise RecursionBudgetError(self.name, x + y, budget)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def cache_stats(cache: Cache, **extra: int) -> EvalStats:
    """Build EvalStats from a finished cache plus engine-specific counters."""
    return EvalStats(
        cache_hits=cache.hits,
        cache_misses=cache.misses,
        cache_size=len(cache),
        **extra,
    )
