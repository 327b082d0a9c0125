"""Shared test fixtures for recurgrid.

Provides engine fixtures and a helper that lowers the interpreter's
recursion limit relative to the caller's current depth.
"""

from __future__ import annotations

import sys
from contextlib import contextmanager

import pytest

from recurgrid.models.config import EngineKind
from recurgrid.registry import create_engine


@pytest.fixture(scope="session", params=list(EngineKind), ids=lambda kind: kind.value)
def engine(request):
    """Each of the four engines with a default configuration.

    Session-scoped: engines hold no per-call state.
    """
    return create_engine(request.param)


@pytest.fixture
def all_engine_instances():
    """One instance of every engine, in registry order."""
    return [create_engine(kind) for kind in EngineKind]


def _current_depth() -> int:
    frame = sys._getframe(1)
    depth = 0
    while frame is not None:
        depth += 1
        frame = frame.f_back
    return depth


@contextmanager
def recursion_headroom(frames: int):
    """Temporarily allow only ``frames`` more Python frames than now."""
    old_limit = sys.getrecursionlimit()
    sys.setrecursionlimit(_current_depth() + frames)
    try:
        yield
    finally:
        sys.setrecursionlimit(old_limit)


@pytest.fixture
def limited_recursion():
    """The recursion_headroom context manager, for use inside a test body."""
    return recursion_headroom
