"""Packing of (x, z) world coordinates into single 64-bit map keys."""

from __future__ import annotations

_MASK32 = 0xFFFFFFFF
_INT32_MIN = -(1 << 31)
_INT32_MAX = (1 << 31) - 1


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def round_down(n: int, m: int) -> int:
    """Round n down to a multiple of m, also for negative n."""
    if n >= 0:
        return _trunc_div(n, m) * m
    return _trunc_div(n - m + 1, m) * m


def to_key(x: int, z: int) -> int:
    """Combine two 32-bit ints into one signed 64-bit key: x high, z low."""
    for value in (x, z):
        if not _INT32_MIN <= value <= _INT32_MAX:
            raise OverflowError(f"{value} does not fit in 32 bits")
    key = ((x & _MASK32) << 32) | (z & _MASK32)
    if key >= 1 << 63:
        key -= 1 << 64
    return key


def to_coords(key: int) -> tuple[int, int]:
    """Split a key made by to_key back into (x, z)."""
    z = key & _MASK32
    if z & 0x80000000:
        z -= 1 << 32
    return key >> 32, z