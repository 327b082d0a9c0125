"""The four evaluation engines for the ternary grid recurrence."""

from recurgrid.engine.base import BaseEngine
from recurgrid.engine.cache import Cache
from recurgrid.engine.memo import MemoEngine
from recurgrid.engine.stack_machine import StackMachineEngine
from recurgrid.engine.suspend import SuspendEngine
from recurgrid.engine.tabulation import TabulationEngine

__all__ = [
    "BaseEngine",
    "Cache",
    "MemoEngine",
    "StackMachineEngine",
    "SuspendEngine",
    "TabulationEngine",
]
