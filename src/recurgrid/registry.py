"""Engine registry.

Maps each EngineKind to its implementation and builds configured instances.
"""

from __future__ import annotations

from recurgrid.engine.base import BaseEngine
from recurgrid.engine.memo import MemoEngine
from recurgrid.engine.stack_machine import StackMachineEngine
from recurgrid.engine.suspend import SuspendEngine
from recurgrid.engine.tabulation import TabulationEngine
from recurgrid.exceptions import UnknownEngineError
from recurgrid.models.config import EngineConfig, EngineKind

ENGINE_CLASSES: dict[EngineKind, type[BaseEngine]] = {
    EngineKind.MEMO: MemoEngine,
    EngineKind.STACK_MACHINE: StackMachineEngine,
    EngineKind.SUSPEND: SuspendEngine,
    EngineKind.TABULATION: TabulationEngine,
}


def resolve_kind(kind: EngineKind | str) -> EngineKind:
    """Normalize an engine name to its EngineKind.

    Raises:
        UnknownEngineError: If ``kind`` names no registered engine.
    """
    if isinstance(kind, EngineKind):
        return kind
    try:
        return EngineKind(kind)
    except ValueError:
        raise UnknownEngineError(str(kind), [k.value for k in EngineKind]) from None


def create_engine(kind: EngineKind | str, config: EngineConfig | None = None) -> BaseEngine:
    """Instantiate the engine registered under ``kind``."""
    return ENGINE_CLASSES[resolve_kind(kind)](config)


def all_engines(config: EngineConfig | None = None) -> list[BaseEngine]:
    """One instance of every registered engine, in registry order."""
    return [create_engine(kind, config) for kind in ENGINE_CLASSES]
