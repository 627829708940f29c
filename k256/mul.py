"""Scalar multiplication using the secp256k1 GLV endomorphism.

The curve has an endomorphism ``lambda * (x, y) = (beta * x, y)``.  A scalar
``k`` is split into ``r1 + r2 * lambda == k (mod n)`` with ``r1`` and ``r2``
of about 128 bits each.  Both halves are then multiplied with a signed
radix-16 window over precomputed tables.

Scalars are plain integers taken modulo the group order ``ORDER``.  Points
only need to provide ``identity()`` on their type, ``+``, unary ``-``,
``double()`` and ``endomorphism()``.
"""

from __future__ import annotations

from typing import Any, Sequence

ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
SCALAR_BYTES = 32

MINUS_LAMBDA = 0xAC9C52B33FA3CF1F5AD9E3FD77ED9BA4A880B9FC8EC739C2E0CFC810B51283CF
MINUS_B1 = 0x00000000000000000000000000000000E4437ED6010E88286F547FA90ABFE4C3
MINUS_B2 = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFE8A280AC50774346DD765CDA83DB1562C
G1 = 0x00000000000000000000000000003086D221A7D46BCDE86C90E49284EB153DAB
G2 = 0x0000000000000000000000000000E4437ED6010E88286F547FA90ABFE4C42212

LAMBDA = (-MINUS_LAMBDA) % ORDER

_DECOMPOSITION_SHIFT = 272
_HALF_BITS = 128
_WINDOW_DIGITS = 33
_TABLE_SIZE = 8


def _check_int(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int")
    return value


def _is_high(s: int) -> bool:
    return s > ORDER // 2


class LookupTable:
    """Precomputed multiples ``[p, 2p, ..., 8p]`` of a point."""

    __slots__ = ("_points", "_identity")

    def __init__(self, point: Any) -> None:
        points = [point]
        while len(points) < _TABLE_SIZE:
            points.append(point + points[-1])
        self._points: tuple[Any, ...] = tuple(points)
        self._identity = type(point).identity()

    def select(self, x: int) -> Any:
        """Return ``x * p`` for ``-8 <= x <= 8``."""
        x = _check_int(x, "x")
        if not -_TABLE_SIZE <= x <= _TABLE_SIZE:
            raise ValueError("table index must be in [-8, 8]")
        if x == 0:
            return self._identity
        point = self._points[abs(x) - 1]
        return -point if x < 0 else point


def mul_shift(a: int, b: int, shift: int) -> int:
    """Return ``a * b / 2^shift`` rounded to the nearest integer (halves up)."""
    a = _check_int(a, "a")
    b = _check_int(b, "b")
    shift = _check_int(shift, "shift")
    if a < 0 or b < 0:
        raise ValueError("operands must be non-negative")
    if shift < 1:
        raise ValueError("shift must be positive")
    product = a * b
    return (product >> shift) + ((product >> (shift - 1)) & 1)


def decompose_scalar(k: int) -> tuple[int, int]:
    """Return ``(r1, r2)`` with ``r1 + r2 * lambda == k (mod n)``."""
    k = _check_int(k, "k") % ORDER
    c1 = mul_shift(k, G1, _DECOMPOSITION_SHIFT) % ORDER
    c2 = mul_shift(k, G2, _DECOMPOSITION_SHIFT) % ORDER
    r2 = (c1 * MINUS_B1 + c2 * MINUS_B2) % ORDER
    r1 = (k + r2 * MINUS_LAMBDA) % ORDER
    return r1, r2


def to_radix_16_half(x: int) -> list[int]:
    """Return 33 signed digits ``a_j`` with ``sum(a_j * 16^j) == x``.

    The first 32 digits lie in ``[-8, 7]``; ``x`` must be below ``2^128``.
    """
    x = _check_int(x, "x")
    if not 0 <= x < 1 << _HALF_BITS:
        raise ValueError("value must be in [0, 2^128)")
    digits = [(x >> (4 * j)) & 0xF for j in range(_WINDOW_DIGITS - 1)]
    digits.append(0)
    for j in range(_WINDOW_DIGITS - 1):
        carry = (digits[j] + 8) >> 4
        digits[j] -= carry << 4
        digits[j + 1] += carry
    return digits


def _signed_half(r: int) -> tuple[int, bool]:
    negative = _is_high(r)
    return ((-r) % ORDER if negative else r), negative


def _windowed_sum(
    table1: LookupTable,
    digits1: Sequence[int],
    table2: LookupTable,
    digits2: Sequence[int],
) -> Any:
    acc = table1.select(digits1[-1]) + table2.select(digits2[-1])
    for d1, d2 in zip(reversed(digits1[:-1]), reversed(digits2[:-1])):
        for _ in range(4):
            acc = acc.double()
        acc = acc + table1.select(d1)
        acc = acc + table2.select(d2)
    return acc


def mul_windowed(point: Any, k: int) -> Any:
    """Return ``k * point`` using the endomorphism decomposition."""
    r1, r2 = decompose_scalar(k)
    x_beta = point.endomorphism()

    r1_abs, r1_negative = _signed_half(r1)
    r2_abs, r2_negative = _signed_half(r2)

    table1 = LookupTable(-point if r1_negative else point)
    table2 = LookupTable(-x_beta if r2_negative else x_beta)

    return _windowed_sum(
        table1, to_radix_16_half(r1_abs), table2, to_radix_16_half(r2_abs)
    )