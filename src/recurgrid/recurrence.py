"""The ternary grid recurrence shared by every engine.

    R(x, y) = 1                                              if x == 0 or y == 0
    R(x, y) = (R(x-1, y-1) + R(x, y-1) + R(x-1, y)) % 1000   otherwise

Each term is below MODULUS, so a sum of three stays below 3000 and fits in
any integer width of 16 bits or more.
"""

from __future__ import annotations

from recurgrid.exceptions import InvalidCoordinateError

MODULUS = 1000
BASE_VALUE = 1

# Inputs are bounded to the unsigned 32-bit range.
MAX_COORDINATE = 2**32 - 1

Coordinate = tuple[int, int]


def is_base_case(x: int, y: int) -> bool:
    """True when either coordinate sits on the zero boundary."""
    return x == 0 or y == 0


def combine(first: int, second: int, third: int) -> int:
    """Reduce the three sub-results of one cell modulo MODULUS."""
    return (first + second + third) % MODULUS


def validate_coordinate(x: object, y: object) -> Coordinate:
    """Check that (x, y) is a pair of non-negative ints in range.

    Returns:
        The validated coordinate as a tuple.

    Raises:
        InvalidCoordinateError: If either value is not an int (bool is
            rejected), is negative, or exceeds MAX_COORDINATE.
    """
    for name, value in (("x", x), ("y", y)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidCoordinateError(name, value)
        if value < 0 or value > MAX_COORDINATE:
            raise InvalidCoordinateError(name, value)
    return x, y  # type: ignore[return-value]
