"""Cross-engine verification harness.

Runs several engines on the same coordinate and checks that they agree.
verify() always returns a report; assert_equivalent() raises on mismatch.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from recurgrid.exceptions import EngineMismatchError
from recurgrid.models.config import EngineKind, VerificationConfig
from recurgrid.protocols import Engine, Evaluation
from recurgrid.recurrence import validate_coordinate
from recurgrid.registry import create_engine

logger = logging.getLogger(__name__)

EngineSpec = EngineKind | str | Engine


@dataclass(frozen=True)
class VerificationReport:
    """Per-engine evaluations of one coordinate."""

    x: int
    y: int
    evaluations: tuple[Evaluation, ...]

    @property
    def values(self) -> dict[str, int]:
        """Engine name -> computed value, in run order."""
        return {ev.engine: ev.value for ev in self.evaluations}

    @property
    def agreed(self) -> bool:
        """True when every engine produced the same value."""
        return len({ev.value for ev in self.evaluations}) == 1

    @property
    def value(self) -> int | None:
        """The agreed value, or None when engines disagree."""
        if not self.agreed:
            return None
        return self.evaluations[0].value

    def __str__(self) -> str:
        status = "agreed" if self.agreed else "MISMATCH"
        detail = ", ".join(f"{name}={value}" for name, value in self.values.items())
        return f"R({self.x}, {self.y}) {status}: {detail}"

    def pprint(self, *, file: object = None) -> None:
        """Pretty-print this report using rich formatting."""
        from recurgrid.formatting import pprint_verification_report

        pprint_verification_report(self, file=file)


def _resolve_engines(
    engines: Iterable[EngineSpec] | None,
    config: VerificationConfig,
) -> list[Engine]:
    specs = list(engines) if engines is not None else list(config.engines)
    resolved: list[Engine] = []
    for spec in specs:
        if isinstance(spec, (EngineKind, str)):
            resolved.append(create_engine(spec, config.engine))
        else:
            resolved.append(spec)
    if not resolved:
        raise ValueError("verification needs at least one engine")
    return resolved


def verify(
    x: int,
    y: int,
    *,
    engines: Iterable[EngineSpec] | None = None,
    config: VerificationConfig | None = None,
) -> VerificationReport:
    """Evaluate R(x, y) on each engine and collect the results.

    Args:
        x: First coordinate.
        y: Second coordinate.
        engines: Engine kinds, names, or Engine instances to run. Defaults
            to ``config.engines``.
        config: Verification settings. Defaults to all four engines with a
            default EngineConfig.

    Returns:
        VerificationReport with one Evaluation per engine.
    """
    if config is None:
        config = VerificationConfig()
    x, y = validate_coordinate(x, y)
    evaluations = []
    for engine in _resolve_engines(engines, config):
        evaluation = engine.evaluate(x, y)
        logger.debug("verify %s", evaluation)
        evaluations.append(evaluation)

    report = VerificationReport(x=x, y=y, evaluations=tuple(evaluations))
    if not report.agreed:
        logger.warning("Engines disagree: %s", report)
    return report


def assert_equivalent(
    x: int,
    y: int,
    *,
    engines: Iterable[EngineSpec] | None = None,
    config: VerificationConfig | None = None,
) -> int:
    """Evaluate R(x, y) on each engine and return the agreed value.

    Raises:
        EngineMismatchError: If any two engines disagree.
    """
    report = verify(x, y, engines=engines, config=config)
    if not report.agreed:
        raise EngineMismatchError(report.x, report.y, report.values)
    return report.evaluations[0].value
