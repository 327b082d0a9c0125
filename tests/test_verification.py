"""Tests for the cross-engine verification harness."""

from __future__ import annotations

import logging

import pytest
from hypothesis import given, settings

from recurgrid.exceptions import EngineMismatchError, InvalidCoordinateError, RecurgridError
from recurgrid.models.config import EngineConfig, EngineKind, VerificationConfig
from recurgrid.protocols import EvalStats, Evaluation
from recurgrid.verification import VerificationReport, assert_equivalent, verify
from tests.strategies import coordinates


class OffByOneEngine:
    """Deliberately wrong engine for exercising mismatch handling."""

    name = "off_by_one"

    def eval(self, x: int, y: int) -> int:
        return self.evaluate(x, y).value

    def evaluate(self, x: int, y: int) -> Evaluation:
        from recurgrid.engine.tabulation import TabulationEngine

        value = (TabulationEngine().eval(x, y) + 1) % 1000
        return Evaluation(engine=self.name, x=x, y=y, value=value)


class TestVerify:
    def test_all_engines_by_default(self) -> None:
        report = verify(4, 4)
        assert [ev.engine for ev in report.evaluations] == [k.value for k in EngineKind]
        assert report.agreed
        assert report.value == 321

    def test_hundred(self) -> None:
        report = verify(100, 100)
        assert report.values == {
            "memo": 41,
            "stack_machine": 41,
            "suspend": 41,
            "tabulation": 41,
        }

    @given(coord=coordinates)
    @settings(max_examples=30, deadline=None)
    def test_cross_engine_equivalence(self, coord: tuple[int, int]) -> None:
        assert verify(*coord).agreed

    def test_engine_subset_by_name(self) -> None:
        report = verify(3, 3, engines=["tabulation", EngineKind.MEMO])
        assert list(report.values) == ["tabulation", "memo"]

    def test_engine_instances(self, all_engine_instances) -> None:
        report = verify(6, 2, engines=all_engine_instances)
        assert report.agreed
        assert len(report.evaluations) == 4

    def test_config_selects_engines(self) -> None:
        config = VerificationConfig(engines=["stack_machine", "suspend"])
        report = verify(2, 2, config=config)
        assert list(report.values) == ["stack_machine", "suspend"]

    def test_config_engine_settings_applied(self) -> None:
        config = VerificationConfig(engine=EngineConfig(collect_stats=False))
        report = verify(3, 3, config=config)
        assert all(ev.stats.cache_hits == 0 for ev in report.evaluations)
        assert all(ev.stats.cache_misses == 0 for ev in report.evaluations)

    def test_empty_engine_list_rejected(self) -> None:
        with pytest.raises(ValueError):
            verify(1, 1, engines=[])

    def test_invalid_coordinate(self) -> None:
        with pytest.raises(InvalidCoordinateError):
            verify(-3, 1)

    def test_mismatch_reported(self, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="recurgrid.verification"):
            report = verify(2, 2, engines=["memo", OffByOneEngine()])
        assert not report.agreed
        assert report.value is None
        assert report.values == {"memo": 13, "off_by_one": 14}
        assert "Engines disagree" in caplog.text


class TestAssertEquivalent:
    def test_returns_agreed_value(self) -> None:
        assert assert_equivalent(5, 5) == 683

    def test_raises_on_mismatch(self) -> None:
        with pytest.raises(EngineMismatchError) as exc_info:
            assert_equivalent(1, 1, engines=["suspend", OffByOneEngine()])
        err = exc_info.value
        assert isinstance(err, RecurgridError)
        assert (err.x, err.y) == (1, 1)
        assert err.values == {"suspend": 3, "off_by_one": 4}
        assert "suspend=3" in str(err)


class TestVerificationReport:
    def _report(self, *values: int) -> VerificationReport:
        evaluations = tuple(
            Evaluation(engine=f"e{i}", x=1, y=1, value=value, stats=EvalStats())
            for i, value in enumerate(values)
        )
        return VerificationReport(x=1, y=1, evaluations=evaluations)

    def test_single_engine_agrees_with_itself(self) -> None:
        assert self._report(3).agreed

    def test_str(self) -> None:
        assert str(self._report(3, 3)) == "R(1, 1) agreed: e0=3, e1=3"
        assert str(self._report(3, 4)) == "R(1, 1) MISMATCH: e0=3, e1=4"
