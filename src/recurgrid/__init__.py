"""recurgrid: four interchangeable engines for one ternary grid recurrence.

    R(x, y) = 1                                              if x == 0 or y == 0
    R(x, y) = (R(x-1, y-1) + R(x, y-1) + R(x-1, y)) % 1000   otherwise

Memoized recursion, an explicit continuation-stack machine, coroutine-based
recursion, and anti-diagonal tabulation, plus a harness that checks they agree.
"""

from recurgrid._version import __version__

# Engines
from recurgrid.engine import (
    BaseEngine,
    Cache,
    MemoEngine,
    StackMachineEngine,
    SuspendEngine,
    TabulationEngine,
)

# Configuration
from recurgrid.models.config import EngineConfig, EngineKind, VerificationConfig

# Protocols and output types
from recurgrid.protocols import Engine, EvalStats, Evaluation

# Recurrence constants
from recurgrid.recurrence import BASE_VALUE, MAX_COORDINATE, MODULUS

# Registry and verification
from recurgrid.registry import all_engines, create_engine
from recurgrid.verification import VerificationReport, assert_equivalent, verify

# Exceptions
from recurgrid.exceptions import (
    CacheConflictError,
    EngineMismatchError,
    FrameDispatchError,
    InvalidCoordinateError,
    RecurgridError,
    RecursionBudgetError,
    UnknownEngineError,
)

__all__ = [
    "__version__",
    # Engines
    "BaseEngine",
    "Cache",
    "MemoEngine",
    "StackMachineEngine",
    "SuspendEngine",
    "TabulationEngine",
    # Configuration
    "EngineConfig",
    "EngineKind",
    "VerificationConfig",
    # Protocols
    "Engine",
    "EvalStats",
    "Evaluation",
    # Recurrence
    "BASE_VALUE",
    "MAX_COORDINATE",
    "MODULUS",
    # Registry and verification
    "all_engines",
    "create_engine",
    "VerificationReport",
    "assert_equivalent",
    "verify",
    # Exceptions
    "RecurgridError",
    "InvalidCoordinateError",
    "RecursionBudgetError",
    "CacheConflictError",
    "FrameDispatchError",
    "EngineMismatchError",
    "UnknownEngineError",
]
