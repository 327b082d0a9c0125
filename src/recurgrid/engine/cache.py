"""Result cache for the memoizing engines.

One Cache is created per top-level evaluation and discarded when that
evaluation returns. Entries are never evicted or overwritten.
"""

from __future__ import annotations

import logging

from recurgrid.exceptions import CacheConflictError
from recurgrid.recurrence import Coordinate

logger = logging.getLogger(__name__)


class Cache:
    """Monotonic Coordinate -> result mapping with hit/miss accounting.

    ``put`` on a stored coordinate is a no-op when the value matches and a
    CacheConflictError when it does not. Membership checks (``in``) are not
    counted as hits or misses.
    """

    def __init__(self, *, count: bool = True) -> None:
        self._entries: dict[Coordinate, int] = {}
        self._count = count
        self.hits = 0
        self.misses = 0

    def get(self, coord: Coordinate) -> int | None:
        """Return the stored result for ``coord``, or None on a miss."""
        value = self._entries.get(coord)
        if value is None:
            logger.debug("Cache miss: %s", coord)
            if self._count:
                self.misses += 1
        else:
            logger.debug("Cache hit: %s", coord)
            if self._count:
                self.hits += 1
        return value

    def put(self, coord: Coordinate, value: int) -> None:
        """Store ``value`` for ``coord``; stored values are final."""
        stored = self._entries.setdefault(coord, value)
        if stored != value:
            raise CacheConflictError(coord, stored, value)

    def __contains__(self, coord: object) -> bool:
        return coord in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Cache(size={len(self)}, hits={self.hits}, misses={self.misses})"
