"""Group arithmetic on the secp256k1 elliptic curve: field elements, affine and projective points, and scalar multiplication."""

__version__ = "0.1.0"
__all__ = ["affine", "field", "mul", "projective"]