"""Memoized recursion expressed as nested coroutines.

Each recursive step is an ``async`` call awaited by its parent, and
``asyncio.run`` drives the whole chain to completion on a fresh event loop
before ``eval`` returns. Nothing in the chain waits on I/O, so scheduling is
deterministic and single-threaded.

Every pending await holds a coroutine frame, so depth limits match
MemoEngine. ``eval`` cannot be called from inside a running event loop;
asyncio raises RuntimeError in that case.
"""

from __future__ import annotations

import asyncio

from recurgrid.engine.base import BaseEngine, cache_stats
from recurgrid.engine.cache import Cache
from recurgrid.models.config import EngineKind
from recurgrid.protocols import EvalStats
from recurgrid.recurrence import BASE_VALUE, combine, is_base_case


class SuspendEngine(BaseEngine):
    """Coroutine-based recursion with the same cache discipline as MemoEngine."""

    name = EngineKind.SUSPEND.value

    def _run(self, x: int, y: int) -> tuple[int, EvalStats]:
        self._check_recursion_budget(x, y)
        cache = self._new_cache()
        value = asyncio.run(self._descend(x, y, cache))
        return value, cache_stats(cache)

    async def _descend(self, x: int, y: int, cache: Cache) -> int:
        if is_base_case(x, y):
            return BASE_VALUE
        cached = cache.get((x, y))
        if cached is not None:
            return cached
        first = await self._descend(x - 1, y - 1, cache)
        second = await self._descend(x, y - 1, cache)
        third = await self._descend(x - 1, y, cache)
        value = combine(first, second, third)
        cache.put((x, y), value)
        return value
