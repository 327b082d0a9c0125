"""Explicit-stack emulation of the memoized recursion.

The host call stack is replaced by a list of continuation frames plus a
single return channel. One logical recursive call moves through four frame
types:

    Entry(x, y)                         check base case / cache, or dispatch
    AwaitingFirst(x, y)                 waiting on R(x-1, y-1)
    AwaitingSecond(x, y, first)         waiting on R(x, y-1)
    AwaitingThird(x, y, first, second)  waiting on R(x-1, y)

Dispatching a child means pushing the caller's successor frame and then the
child's Entry frame; LIFO order runs the child to completion before the
successor is popped and reads the return channel.

Invariant: the stack never holds more than x + y + 1 frames.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from recurgrid.engine.base import BaseEngine, cache_stats
from recurgrid.engine.cache import Cache
from recurgrid.exceptions import FrameDispatchError
from recurgrid.models.config import EngineKind
from recurgrid.protocols import EvalStats
from recurgrid.recurrence import BASE_VALUE, combine, is_base_case


@dataclass(frozen=True)
class Entry:
    """About to check the base case and cache for (x, y)."""

    x: int
    y: int


@dataclass(frozen=True)
class AwaitingFirst:
    """(x-1, y-1) dispatched; its result is not yet known."""

    x: int
    y: int


@dataclass(frozen=True)
class AwaitingSecond:
    """First sub-result captured; (x, y-1) dispatched."""

    x: int
    y: int
    first: int


@dataclass(frozen=True)
class AwaitingThird:
    """First and second sub-results captured; (x-1, y) dispatched."""

    x: int
    y: int
    first: int
    second: int


Frame = Union[Entry, AwaitingFirst, AwaitingSecond, AwaitingThird]


def step(frame: Frame, stack: list[Frame], cache: Cache, returned: int) -> int:
    """Execute one popped frame.

    Successor frames are pushed onto ``stack``; a frame that dispatches a
    child pushes its own continuation first and the child's Entry last.

    Args:
        frame: The frame just popped from the top of the stack.
        stack: The continuation stack.
        cache: The evaluation's result cache.
        returned: Current value of the return channel.

    Returns:
        The new value of the return channel. Unchanged when the frame only
        dispatched a child.

    Raises:
        FrameDispatchError: If ``frame`` is not one of the four frame types.
    """
    if isinstance(frame, Entry):
        if is_base_case(frame.x, frame.y):
            return BASE_VALUE
        cached = cache.get((frame.x, frame.y))
        if cached is not None:
            return cached
        stack.append(AwaitingFirst(frame.x, frame.y))
        stack.append(Entry(frame.x - 1, frame.y - 1))
        return returned

    if isinstance(frame, AwaitingFirst):
        stack.append(AwaitingSecond(frame.x, frame.y, returned))
        stack.append(Entry(frame.x, frame.y - 1))
        return returned

    if isinstance(frame, AwaitingSecond):
        stack.append(AwaitingThird(frame.x, frame.y, frame.first, returned))
        stack.append(Entry(frame.x - 1, frame.y))
        return returned

    if isinstance(frame, AwaitingThird):
        value = combine(frame.first, frame.second, returned)
        cache.put((frame.x, frame.y), value)
        return value

    raise FrameDispatchError(frame)


class StackMachineEngine(BaseEngine):
    """Memoized recursion driven by an explicit continuation stack.

    Never recurses on the host stack, so it works under any recursion limit.
    """

    name = EngineKind.STACK_MACHINE.value

    def _run(self, x: int, y: int) -> tuple[int, EvalStats]:
        cache = self._new_cache()
        stack: list[Frame] = [Entry(x, y)]
        returned = 0  # return channel
        max_depth = 1
        executed = 0

        while stack:
            returned = step(stack.pop(), stack, cache, returned)
            executed += 1
            if len(stack) > max_depth:
                max_depth = len(stack)

        return returned, cache_stats(
            cache, max_stack_depth=max_depth, frames_executed=executed,
        )
