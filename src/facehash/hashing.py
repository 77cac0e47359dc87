"""Stable 32-bit string hash.

The hash must give the same value on every platform and in every
implementation of facehash, so the arithmetic reproduces signed 32-bit
wraparound rather than relying on Python's unbounded integers.
"""

from __future__ import annotations

import struct

_HASH_MULTIPLIER = 31
_UINT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000


def _to_int32(value: int) -> int:
    """Wrap *value* into the signed 32-bit range."""
    value &= _UINT32_MASK
    if value & _INT32_SIGN:
        value -= 1 << 32
    return value


def _utf16_units(value: str) -> tuple[int, ...]:
    """Return the UTF-16 code units of *value*.

    Characters outside the Basic Multilingual Plane contribute two
    units (a surrogate pair), matching how browsers index strings.
    """
    data = value.encode("utf-16-le", "surrogatepass")
    return struct.unpack(f"<{len(data) // 2}H", data)


def string_hash(value: str) -> int:
    """Hash a string to a non-negative integer.

    Each UTF-16 code unit is folded in with ``h = h * 31 + unit``,
    truncated to a signed 32-bit integer after every step.  The
    absolute value of the final accumulator is returned, so the result
    lies in ``[0, 2**31]``.

    Args:
        value: The string to hash.  The empty string hashes to ``0``.

    Returns:
        A non-negative integer.
    """
    h = 0
    for unit in _utf16_units(value):
        h = _to_int32(h * _HASH_MULTIPLIER + unit)
    return abs(h)
