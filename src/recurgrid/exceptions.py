"""recurgrid exception hierarchy.

All recurgrid-specific exceptions inherit from RecurgridError.
"""

from __future__ import annotations


class RecurgridError(Exception):
    """Base exception for all recurgrid errors."""


class InvalidCoordinateError(RecurgridError, ValueError):
    """Raised when an input coordinate is outside the supported domain."""

    def __init__(self, name: str, value: object) -> None:
        self.name = name
        self.value = value
        super().__init__(
            f"Invalid coordinate {name}={value!r}: "
            f"expected an int in [0, 2**32 - 1]"
        )


class RecursionBudgetError(RecurgridError):
    """Raised when a recursive engine would exceed its configured depth."""

    def __init__(self, engine: str, depth: int, budget: int) -> None:
        self.engine = engine
        self.depth = depth
        self.budget = budget
        super().__init__(
            f"{engine} needs recursion depth {depth} "
            f"(max_recursive_depth: {budget})"
        )


class CacheConflictError(RecurgridError):
    """Raised when a cache write would overwrite a stored value.

    Stored results are final; recomputing a coordinate must reproduce the
    same value, so a differing write means the engine is broken.
    """

    def __init__(self, coord: tuple[int, int], stored: int, attempted: int) -> None:
        self.coord = coord
        self.stored = stored
        self.attempted = attempted
        super().__init__(
            f"Cache conflict at {coord}: stored {stored}, attempted {attempted}"
        )


class FrameDispatchError(RecurgridError):
    """Raised when the stack machine pops a frame it cannot dispatch."""

    def __init__(self, frame: object) -> None:
        self.frame = frame
        super().__init__(f"Unknown continuation frame: {frame!r}")


class EngineMismatchError(RecurgridError):
    """Raised when engines disagree on the value of one coordinate."""

    def __init__(self, x: int, y: int, values: dict[str, int]) -> None:
        self.x = x
        self.y = y
        self.values = dict(values)
        detail = ", ".join(f"{name}={value}" for name, value in values.items())
        super().__init__(f"Engines disagree at ({x}, {y}): {detail}")


class UnknownEngineError(RecurgridError, KeyError):
    """Raised when an engine name does not match any registered engine."""

    def __init__(self, name: str, known: list[str]) -> None:
        self.engine_name = name
        self.known = known
        super().__init__(f"Unknown engine {name!r}. Known engines: {', '.join(known)}")

    def __str__(self) -> str:
        return self.args[0]
