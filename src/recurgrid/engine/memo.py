"""Top-down memoized recursion: the reference engine.

Recursion depth grows to x + y native frames. Under CPython's default
recursion limit (1000) this comfortably covers x + y = 200; beyond the host
limit a RecursionError propagates to the caller.
"""

from __future__ import annotations

from recurgrid.engine.base import BaseEngine, cache_stats
from recurgrid.engine.cache import Cache
from recurgrid.models.config import EngineKind
from recurgrid.protocols import EvalStats
from recurgrid.recurrence import BASE_VALUE, combine, is_base_case


class MemoEngine(BaseEngine):
    """Recursive descent with a per-call memo cache."""

    name = EngineKind.MEMO.value

    def _run(self, x: int, y: int) -> tuple[int, EvalStats]:
        self._check_recursion_budget(x, y)
        cache = self._new_cache()
        value = self._descend(x, y, cache)
        return value, cache_stats(cache)

    def _descend(self, x: int, y: int, cache: Cache) -> int:
        if is_base_case(x, y):
            return BASE_VALUE
        cached = cache.get((x, y))
        if cached is not None:
            return cached
        # Order matters: later calls reuse entries stored by earlier ones.
        value = combine(
            self._descend(x - 1, y - 1, cache),
            self._descend(x, y - 1, cache),
            self._descend(x - 1, y, cache),
        )
        cache.put((x, y), value)
        return value
