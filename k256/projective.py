"""Points on secp256k1 in projective coordinates.

Addition and doubling use the complete formulas of Renes, Costello and
Batina (2015), algorithms 7, 8 and 9, specialised to ``a = 0``, ``b = 7``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import reduce
from typing import Iterable

from k256.affine import AffinePoint
from k256.field import CURVE_EQUATION_B_SINGLE, FieldElement
from k256.mul import mul_windowed

_B = CURVE_EQUATION_B_SINGLE

ENDOMORPHISM_BETA = FieldElement.from_bytes(
    bytes.fromhex("7ae96a2b657c07106e64479eac3434e99cf0497512f58995c1396c28719501ee")
)


@dataclass(frozen=True, slots=True, eq=False)
class ProjectivePoint:
    """A point on the secp256k1 curve in projective coordinates."""

    x: FieldElement = field(default_factory=FieldElement.zero)
    y: FieldElement = field(default_factory=FieldElement.one)
    z: FieldElement = field(default_factory=FieldElement.zero)

    @classmethod
    def from_affine(cls, point: AffinePoint) -> ProjectivePoint:
        """Lift an affine point into projective coordinates."""
        if point.is_identity():
            return cls.identity()
        return cls(point.x, point.y, FieldElement.one())

    @classmethod
    def identity(cls) -> ProjectivePoint:
        """Return the point at infinity."""
        return cls(FieldElement.zero(), FieldElement.one(), FieldElement.zero())

    @classmethod
    def generator(cls) -> ProjectivePoint:
        """Return the secp256k1 base point."""
        return cls.from_affine(AffinePoint.generator())

    def to_affine(self) -> AffinePoint:
        """Return the affine representation; the identity maps to the affine identity."""
        try:
            zinv = self.z.invert()
        except ZeroDivisionError:
            return AffinePoint.identity()
        return AffinePoint(self.x * zinv, self.y * zinv, False)

    def is_identity(self) -> bool:
        """Return True if this is the point at infinity."""
        return self.to_affine().is_identity()

    def _add(self, other: ProjectivePoint) -> ProjectivePoint:
        xx = self.x * other.x
        yy = self.y * other.y
        zz = self.z * other.z

        n_xx_yy = (xx + yy).negate(2)
        n_yy_zz = (yy + zz).negate(2)
        n_xx_zz = (xx + zz).negate(2)
        xy_pairs = (self.x + self.y) * (other.x + other.y) + n_xx_yy
        yz_pairs = (self.y + self.z) * (other.y + other.z) + n_yy_zz
        xz_pairs = (self.x + self.z) * (other.x + other.z) + n_xx_zz

        bzz = zz.mul_single(_B)
        bzz3 = (bzz.double() + bzz).normalize_weak()
        yy_m_bzz3 = yy + bzz3.negate(1)
        yy_p_bzz3 = yy + bzz3

        byz = yz_pairs.mul_single(_B).normalize_weak()
        byz3 = (byz.double() + byz).normalize_weak()

        xx3 = xx.double() + xx
        bxx9 = (xx3.double() + xx3).normalize_weak().mul_single(_B).normalize_weak()

        return ProjectivePoint(
            (xy_pairs * yy_m_bzz3 + (byz3 * xz_pairs).negate(1)).normalize_weak(),
            (yy_p_bzz3 * yy_m_bzz3 + bxx9 * xz_pairs).normalize_weak(),
            (yz_pairs * yy_p_bzz3 + xx3 * xy_pairs).normalize_weak(),
        )

    def _add_mixed(self, other: AffinePoint) -> ProjectivePoint:
        if other.is_identity():
            return self
        xx = self.x * other.x
        yy = self.y * other.y
        xy_pairs = (self.x + self.y) * (other.x + other.y) + (xx + yy).negate(2)
        yz_pairs = other.y * self.z + self.y
        xz_pairs = other.x * self.z + self.x

        bzz = self.z.mul_single(_B)
        bzz3 = (bzz.double() + bzz).normalize_weak()
        yy_m_bzz3 = yy + bzz3.negate(1)
        yy_p_bzz3 = yy + bzz3

        byz = yz_pairs.mul_single(_B).normalize_weak()
        byz3 = (byz.double() + byz).normalize_weak()

        xx3 = xx.double() + xx
        bxx9 = (xx3.double() + xx3).normalize_weak().mul_single(_B).normalize_weak()

        return ProjectivePoint(
            (xy_pairs * yy_m_bzz3 + (byz3 * xz_pairs).negate(1)).normalize_weak(),
            (yy_p_bzz3 * yy_m_bzz3 + bxx9 * xz_pairs).normalize_weak(),
            (yz_pairs * yy_p_bzz3 + xx3 * xy_pairs).normalize_weak(),
        )

    def double(self) -> ProjectivePoint:
        """Return 2 * self."""
        yy = self.y.square()
        zz = self.z.square()
        xy2 = (self.x * self.y).double()

        bzz = zz.mul_single(_B)
        bzz3 = (bzz.double() + bzz).normalize_weak()
        bzz9 = (bzz3.double() + bzz3).normalize_weak()

        yy_m_bzz9 = yy + bzz9.negate(1)
        yy_p_bzz3 = yy + bzz3

        yy_zz = yy * zz
        yy_zz8 = yy_zz.double().double().double()
        t = (yy_zz8.double() + yy_zz8).normalize_weak().mul_single(_B)

        return ProjectivePoint(
            xy2 * yy_m_bzz9,
            (yy_m_bzz9 * yy_p_bzz3 + t).normalize_weak(),
            (yy * self.y * self.z).double().double().double().normalize_weak(),
        )

    def endomorphism(self) -> ProjectivePoint:
        """Return ``lambda * self``, computed as ``(beta * x, y, z)``."""
        return ProjectivePoint(self.x * ENDOMORPHISM_BETA, self.y, self.z)

    @classmethod
    def from_encoded_point(cls, data: bytes) -> ProjectivePoint:
        """Parse a SEC1-encoded point; raises ValueError if invalid."""
        return cls.from_affine(AffinePoint.from_encoded_point(data))

    def to_encoded_point(self, compress: bool) -> bytes:
        """Return the SEC1 encoding, compressed or uncompressed."""
        return self.to_affine().to_encoded_point(compress)

    @classmethod
    def from_bytes(cls, data: bytes) -> ProjectivePoint:
        """Parse a 33-byte compressed point; raises ValueError otherwise."""
        return cls.from_affine(AffinePoint.from_bytes(data))

    def to_bytes(self) -> bytes:
        """Return the 33-byte compressed encoding; the identity raises ValueError."""
        return self.to_affine().to_bytes()

    def __add__(self, other: object) -> ProjectivePoint:
        if isinstance(other, ProjectivePoint):
            return self._add(other)
        if isinstance(other, AffinePoint):
            return self._add_mixed(other)
        return NotImplemented

    def __sub__(self, other: object) -> ProjectivePoint:
        if isinstance(other, ProjectivePoint):
            return self._add(-other)
        if isinstance(other, AffinePoint):
            return self._add_mixed(-other)
        return NotImplemented

    def __neg__(self) -> ProjectivePoint:
        return ProjectivePoint(self.x, self.y.negate(1).normalize_weak(), self.z)

    def __mul__(self, scalar: object) -> ProjectivePoint:
        if isinstance(scalar, bool) or not isinstance(scalar, int):
            return NotImplemented
        return mul_windowed(self, scalar)

    def __rmul__(self, scalar: object) -> ProjectivePoint:
        return self.__mul__(scalar)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProjectivePoint):
            return NotImplemented
        return self.to_affine() == other.to_affine()

    def __hash__(self) -> int:
        return hash(self.to_affine())


def sum_points(points: Iterable[ProjectivePoint]) -> ProjectivePoint:
    """Return the sum of the points, starting from the identity."""
    return reduce(lambda acc, p: acc + p, points, ProjectivePoint.identity())