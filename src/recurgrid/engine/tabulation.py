"""Bottom-up tabulation over a dense (x+1) x (y+1) table.

Cells are filled in increasing order of i + j (anti-diagonals), so the three
neighbours (i-1, j-1), (i, j-1) and (i-1, j) are final before (i, j) is
computed. Cells on one anti-diagonal depend only on earlier diagonals, which
lets each diagonal be filled with a single vectorised numpy assignment.

The table uses uint16: every cell is below 1000 and each three-term sum is
below 3000. Row 0 and column 0 keep their initial value of 1.
"""

from __future__ import annotations

import numpy as np

from recurgrid.engine.base import BaseEngine
from recurgrid.models.config import EngineKind
from recurgrid.protocols import EvalStats
from recurgrid.recurrence import BASE_VALUE, MODULUS, is_base_case

TABLE_DTYPE = np.uint16


def fill_table(x: int, y: int) -> np.ndarray:
    """Build the full table of R(i, j) for 0 <= i <= x, 0 <= j <= y."""
    table = np.full((x + 1, y + 1), BASE_VALUE, dtype=TABLE_DTYPE)
    for total in range(2, x + y + 1):
        lo = max(1, total - y)
        hi = min(x, total - 1)
        if lo > hi:
            continue
        i = np.arange(lo, hi + 1)
        j = total - i
        table[i, j] = (table[i - 1, j - 1] + table[i, j - 1] + table[i - 1, j]) % MODULUS
    return table


class TabulationEngine(BaseEngine):
    """Iterative dynamic programming; no recursion or explicit stack."""

    name = EngineKind.TABULATION.value

    def _run(self, x: int, y: int) -> tuple[int, EvalStats]:
        # Boundary answers need no table.
        if is_base_case(x, y):
            return BASE_VALUE, EvalStats()
        table = fill_table(x, y)
        return int(table[x, y]), EvalStats(cells_filled=x * y)
