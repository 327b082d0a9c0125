"""Tests for the anti-diagonal tabulation engine."""

from __future__ import annotations

import numpy as np
import pytest

from recurgrid.engine.stack_machine import StackMachineEngine
from recurgrid.engine.tabulation import TABLE_DTYPE, TabulationEngine, fill_table
from recurgrid.protocols import EvalStats
from recurgrid.recurrence import MAX_COORDINATE


class TestFillTable:
    def test_shape_and_dtype(self) -> None:
        table = fill_table(3, 5)
        assert table.shape == (4, 6)
        assert table.dtype == TABLE_DTYPE

    def test_boundary_is_one(self) -> None:
        table = fill_table(6, 4)
        assert np.all(table[0, :] == 1)
        assert np.all(table[:, 0] == 1)

    def test_every_cell_satisfies_recurrence(self) -> None:
        table = fill_table(12, 9).astype(np.int64)
        for i in range(1, 13):
            for j in range(1, 10):
                expected = (table[i - 1, j - 1] + table[i, j - 1] + table[i - 1, j]) % 1000
                assert table[i, j] == expected

    def test_first_row_is_odd_numbers(self) -> None:
        """R(1, j) = 2j + 1."""
        table = fill_table(1, 8)
        assert table[1].tolist() == [1, 3, 5, 7, 9, 11, 13, 15, 17]

    def test_table_is_symmetric(self) -> None:
        table = fill_table(20, 20)
        assert np.array_equal(table, table.T)

    def test_degenerate_tables(self) -> None:
        assert fill_table(0, 0).tolist() == [[1]]
        assert fill_table(0, 3).tolist() == [[1, 1, 1, 1]]
        assert fill_table(2, 0).tolist() == [[1], [1], [1]]


class TestTabulationEngine:
    def test_name(self) -> None:
        assert TabulationEngine.name == "tabulation"

    def test_returns_python_int(self) -> None:
        value = TabulationEngine().eval(5, 5)
        assert type(value) is int
        assert value == 683

    def test_cells_filled(self) -> None:
        stats = TabulationEngine().evaluate(7, 3).stats
        assert stats.cells_filled == 21
        assert stats.cache_size == 0
        assert stats.max_stack_depth == 0

    def test_immune_to_recursion_limit(self, limited_recursion) -> None:
        with limited_recursion(100):
            assert TabulationEngine().eval(150, 150) == StackMachineEngine().eval(150, 150)

    def test_asymmetric_large(self) -> None:
        engine = TabulationEngine()
        assert engine.eval(1000, 3) == engine.eval(3, 1000)

    def test_boundary_allocates_no_table(self) -> None:
        engine = TabulationEngine()
        for x, y in [(MAX_COORDINATE, 0), (0, MAX_COORDINATE), (0, 0)]:
            evaluation = engine.evaluate(x, y)
            assert evaluation.value == 1
            assert evaluation.stats == EvalStats()

    @pytest.mark.slow
    def test_five_thousand(self) -> None:
        assert TabulationEngine().eval(5000, 5000) == 609
