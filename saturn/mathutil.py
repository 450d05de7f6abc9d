"""Small numeric helpers."""

from __future__ import annotations

import random

_I32_SIGN = 1 << 31
_I32_RANGE = 1 << 32


def _next_i32() -> int:
    value = random.getrandbits(32)
    return value - _I32_RANGE if value >= _I32_SIGN else value


def random_constrained_positive(max_value: int) -> int:
    """Return a pseudorandom non-negative integer below ``abs(max_value)``.

    A random signed 32-bit value is reduced with a truncating remainder and
    its magnitude taken. ``max_value`` of zero raises ``ZeroDivisionError``.
    """
    if max_value == 0:
        raise ZeroDivisionError("max_value must be non-zero")
    return abs(_next_i32()) % abs(max_value)