"""Arithmetic in the secp256k1 base field.

The field modulus is p = 2^256 - 2^32 - 2^9 - 2^8 - 2^7 - 2^6 - 2^4 - 1.
Elements are kept fully reduced, so ``normalize`` and ``normalize_weak``
return the element unchanged and the ``magnitude`` argument of ``negate``
only has to be a valid, non-negative bound.
"""

from __future__ import annotations

from dataclasses import dataclass

MODULUS = 2**256 - 2**32 - 2**9 - 2**8 - 2**7 - 2**6 - 2**4 - 1
FIELD_BYTES = 32
CURVE_EQUATION_B_SINGLE = 7

_U32_LIMIT = 2**32


@dataclass(frozen=True, slots=True)
class FieldElement:
    """An element of the finite field used for curve coordinates."""

    value: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError("field element value must be an int")
        if not 0 <= self.value < MODULUS:
            raise ValueError("field element value out of range [0, p)")

    @classmethod
    def zero(cls) -> FieldElement:
        """Return the additive identity."""
        return cls(0)

    @classmethod
    def one(cls) -> FieldElement:
        """Return the multiplicative identity."""
        return cls(1)

    @classmethod
    def from_bytes(cls, data: bytes) -> FieldElement:
        """Parse a 32-byte big-endian SEC1 field element.

        Raises ValueError if the length is wrong or the integer is not below p.
        """
        data = bytes(data)
        if len(data) != FIELD_BYTES:
            raise ValueError(f"expected {FIELD_BYTES} bytes, got {len(data)}")
        value = int.from_bytes(data, "big")
        if value >= MODULUS:
            raise ValueError("encoded field element is not below the modulus")
        return cls(value)

    @classmethod
    def _from_bytes_reduced(cls, data: bytes) -> FieldElement:
        return cls(int.from_bytes(bytes(data), "big") % MODULUS)

    def to_bytes(self) -> bytes:
        """Return the 32-byte big-endian SEC1 encoding."""
        return self.value.to_bytes(FIELD_BYTES, "big")

    def is_zero(self) -> bool:
        """Return True if this element is zero."""
        return self.value == 0

    def is_odd(self) -> bool:
        """Return True if this element is odd in the SEC1 sense."""
        return self.value & 1 == 1

    def negate(self, magnitude: int) -> FieldElement:
        """Return -self; ``magnitude`` must be a non-negative bound."""
        if isinstance(magnitude, bool) or not isinstance(magnitude, int):
            raise TypeError("magnitude must be an int")
        if magnitude < 0:
            raise ValueError("magnitude must be non-negative")
        return FieldElement((-self.value) % MODULUS)

    def normalize(self) -> FieldElement:
        """Return the fully reduced element."""
        return self

    def normalize_weak(self) -> FieldElement:
        """Return the element with magnitude 1."""
        return self

    def normalizes_to_zero(self) -> bool:
        """Return True if the element reduces to zero."""
        return self.value == 0

    def mul_single(self, rhs: int) -> FieldElement:
        """Multiply by a small (32-bit) integer."""
        if isinstance(rhs, bool) or not isinstance(rhs, int):
            raise TypeError("multiplier must be an int")
        if not 0 <= rhs < _U32_LIMIT:
            raise ValueError("multiplier must fit in 32 bits")
        return FieldElement(self.value * rhs % MODULUS)

    def double(self) -> FieldElement:
        """Return 2 * self."""
        return self + self

    def mul(self, rhs: FieldElement) -> FieldElement:
        """Return self * rhs mod p."""
        return FieldElement(self.value * rhs.value % MODULUS)

    def square(self) -> FieldElement:
        """Return self * self mod p."""
        return FieldElement(self.value * self.value % MODULUS)

    def pow2k(self, k: int) -> FieldElement:
        """Raise the element to the power 2^k by repeated squaring."""
        if k < 0:
            raise ValueError("k must be non-negative")
        x = self
        for _ in range(k):
            x = x.square()
        return x

    def _chain_223(self) -> tuple[FieldElement, FieldElement, FieldElement, FieldElement]:
        # Computes self^(2^n - 1) for n in {2, 3, 22, 223} via an addition chain.
        x2 = self.pow2k(1).mul(self)
        x3 = x2.pow2k(1).mul(self)
        x6 = x3.pow2k(3).mul(x3)
        x9 = x6.pow2k(3).mul(x3)
        x11 = x9.pow2k(2).mul(x2)
        x22 = x11.pow2k(11).mul(x11)
        x44 = x22.pow2k(22).mul(x22)
        x88 = x44.pow2k(44).mul(x44)
        x176 = x88.pow2k(88).mul(x88)
        x220 = x176.pow2k(44).mul(x44)
        x223 = x220.pow2k(3).mul(x3)
        return x2, x3, x22, x223

    def invert(self) -> FieldElement:
        """Return the multiplicative inverse; raises ZeroDivisionError for zero."""
        if self.normalizes_to_zero():
            raise ZeroDivisionError("zero has no multiplicative inverse")
        x2, _, x22, x223 = self._chain_223()
        return (
            x223.pow2k(23)
            .mul(x22)
            .pow2k(5)
            .mul(self)
            .pow2k(3)
            .mul(x2)
            .pow2k(2)
            .mul(self)
        )

    def sqrt(self) -> FieldElement:
        """Return a square root of self; raises ValueError if none exists."""
        x2, _, x22, x223 = self._chain_223()
        res = x223.pow2k(23).mul(x22).pow2k(6).mul(x2).pow2k(2)
        if not (res.square().negate(1) + self).normalizes_to_zero():
            raise ValueError("element has no square root")
        return res

    def __add__(self, other: object) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return FieldElement((self.value + other.value) % MODULUS)

    def __sub__(self, other: object) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return FieldElement((self.value - other.value) % MODULUS)

    def __mul__(self, other: object) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self.mul(other)

    def __neg__(self) -> FieldElement:
        return self.negate(1)

    def __int__(self) -> int:
        return self.value


CURVE_EQUATION_B = FieldElement._from_bytes_reduced(
    bytes(31) + bytes([CURVE_EQUATION_B_SINGLE])
)