"""Points on secp256k1 in affine coordinates, with SEC1 encoding."""

from __future__ import annotations

from dataclasses import dataclass, field

from k256.field import CURVE_EQUATION_B, FIELD_BYTES, FieldElement

TAG_IDENTITY = 0x00
TAG_COMPRESSED_EVEN_Y = 0x02
TAG_COMPRESSED_ODD_Y = 0x03
TAG_UNCOMPRESSED = 0x04
TAG_COMPACT = 0x05

COMPRESSED_POINT_SIZE = 1 + FIELD_BYTES
UNCOMPRESSED_POINT_SIZE = 1 + 2 * FIELD_BYTES

_GENERATOR_X = bytes.fromhex(
    "79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
)
_GENERATOR_Y = bytes.fromhex(
    "483ada7726a3c4655da4fbfc0e1108a8fd17b448a68554199c47d08ffb10d4b8"
)


def _on_curve(x: FieldElement, y: FieldElement) -> bool:
    lhs = y.square().negate(1)
    rhs = x * x * x + CURVE_EQUATION_B
    return (lhs + rhs).normalizes_to_zero()


@dataclass(frozen=True, slots=True, eq=False)
class AffinePoint:
    """A point on the secp256k1 curve in affine coordinates."""

    x: FieldElement = field(default_factory=FieldElement.zero)
    y: FieldElement = field(default_factory=FieldElement.zero)
    infinity: bool = True

    @classmethod
    def identity(cls) -> AffinePoint:
        """Return the point at infinity."""
        return cls(FieldElement.zero(), FieldElement.zero(), True)

    @classmethod
    def generator(cls) -> AffinePoint:
        """Return the secp256k1 base point."""
        return cls(
            FieldElement.from_bytes(_GENERATOR_X),
            FieldElement.from_bytes(_GENERATOR_Y),
            False,
        )

    def is_identity(self) -> bool:
        """Return True if this is the point at infinity."""
        return self.infinity

    @classmethod
    def decompress(cls, x_bytes: bytes, y_is_odd: bool) -> AffinePoint:
        """Recover a point from its x coordinate and the parity of y.

        Raises ValueError if x is not a valid field element or not on the curve.
        """
        x = FieldElement.from_bytes(x_bytes)
        alpha = x * x * x + CURVE_EQUATION_B
        try:
            beta = alpha.sqrt().normalize()
        except ValueError:
            raise ValueError("x coordinate is not on the curve") from None
        y = beta if beta.is_odd() == bool(y_is_odd) else beta.negate(1)
        return cls(x, y.normalize(), False)

    @classmethod
    def from_encoded_point(cls, data: bytes) -> AffinePoint:
        """Parse a SEC1-encoded point (identity, compressed or uncompressed).

        Raises ValueError for malformed encodings and points not on the curve.
        """
        data = bytes(data)
        if not data:
            raise ValueError("empty point encoding")
        tag = data[0]
        if tag == TAG_IDENTITY:
            if len(data) != 1:
                raise ValueError("identity encoding must be a single byte")
            return cls.identity()
        if tag in (TAG_COMPRESSED_EVEN_Y, TAG_COMPRESSED_ODD_Y):
            if len(data) != COMPRESSED_POINT_SIZE:
                raise ValueError("compressed point must be 33 bytes")
            return cls.decompress(data[1:], tag == TAG_COMPRESSED_ODD_Y)
        if tag == TAG_COMPACT:
            if len(data) != COMPRESSED_POINT_SIZE:
                raise ValueError("compact point must be 33 bytes")
            raise ValueError("compact point encoding is not supported")
        if tag == TAG_UNCOMPRESSED:
            if len(data) != UNCOMPRESSED_POINT_SIZE:
                raise ValueError("uncompressed point must be 65 bytes")
            x = FieldElement.from_bytes(data[1 : 1 + FIELD_BYTES])
            y = FieldElement.from_bytes(data[1 + FIELD_BYTES :])
            if not _on_curve(x, y):
                raise ValueError("point is not on the curve")
            return cls(x, y, False)
        raise ValueError(f"invalid SEC1 tag 0x{tag:02x}")

    def to_encoded_point(self, compress: bool) -> bytes:
        """Return the SEC1 encoding, compressed or uncompressed."""
        if self.infinity:
            return bytes([TAG_IDENTITY])
        x_bytes = self.x.to_bytes()
        if compress:
            tag = TAG_COMPRESSED_ODD_Y if self.y.normalize().is_odd() else TAG_COMPRESSED_EVEN_Y
            return bytes([tag]) + x_bytes
        return bytes([TAG_UNCOMPRESSED]) + x_bytes + self.y.to_bytes()

    @classmethod
    def from_bytes(cls, data: bytes) -> AffinePoint:
        """Parse a 33-byte compressed point; raises ValueError otherwise."""
        data = bytes(data)
        if len(data) != COMPRESSED_POINT_SIZE:
            raise ValueError("compressed point must be 33 bytes")
        tag = data[0]
        if tag not in (TAG_COMPRESSED_EVEN_Y, TAG_COMPRESSED_ODD_Y):
            raise ValueError("not a compressed point encoding")
        return cls.decompress(data[1:], tag == TAG_COMPRESSED_ODD_Y)

    def to_bytes(self) -> bytes:
        """Return the 33-byte compressed encoding.

        Raises ValueError for the identity, which has no compressed form.
        """
        if self.infinity:
            raise ValueError("the identity has no compressed encoding")
        return self.to_encoded_point(True)

    def __neg__(self) -> AffinePoint:
        return AffinePoint(self.x, self.y.negate(1).normalize_weak(), self.infinity)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AffinePoint):
            return NotImplemented
        return (
            (self.x.negate(1) + other.x).normalizes_to_zero()
            and (self.y.negate(1) + other.y).normalizes_to_zero()
            and self.infinity == other.infinity
        )

    def __hash__(self) -> int:
        return hash((self.x.normalize().to_bytes(), self.y.normalize().to_bytes(), self.infinity))


def decompress_point(data: bytes) -> bytes:
    """Return the uncompressed SEC1 encoding of any valid SEC1 point encoding."""
    return AffinePoint.from_encoded_point(data).to_encoded_point(False)