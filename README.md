# k256

Group arithmetic on the secp256k1 elliptic curve, in plain Python with no
dependencies outside the standard library.

## Modules

- `k256.field` — `FieldElement`, an element of the base field modulo
  p = 2^256 − 2^32 − 977 (`MODULUS`). Supports `+`, `-`, `*`, unary `-`,
  `double()`, `square()`, `mul_single()`, `pow2k()`, `invert()` and
  `sqrt()`, plus 32-byte big-endian encoding with `from_bytes()` and
  `to_bytes()`. Elements are always fully reduced, so `normalize()` and
  `normalize_weak()` return the element unchanged.
- `k256.affine` — `AffinePoint`, a curve point in affine coordinates, with
  SEC1 encoding and decoding: `from_encoded_point()` accepts the identity
  (`00`), compressed (`02`/`03`) and uncompressed (`04`) forms, and
  `to_encoded_point(compress)` writes them. `from_bytes()` / `to_bytes()`
  handle the 33-byte compressed form only. `decompress_point(data)` turns
  any valid SEC1 encoding into its uncompressed form.
- `k256.projective` — `ProjectivePoint`, a curve point in projective
  coordinates with complete addition, mixed addition with `AffinePoint`,
  subtraction, negation, `double()`, `endomorphism()` and multiplication by
  an integer scalar (`p * k` or `k * p`). `sum_points(points)` adds an
  iterable of points starting from the identity.
- `k256.mul` — the scalar multiplication behind `ProjectivePoint`: scalar
  decomposition with the curve endomorphism (`decompose_scalar`), signed
  radix-16 digits (`to_radix_16_half`), precomputed multiples
  (`LookupTable`) and `mul_windowed(point, k)`. The group order is `ORDER`.

## Installation

```
pip install .
```

## Usage

```python
from k256.affine import AffinePoint
from k256.projective import ProjectivePoint, sum_points

g = ProjectivePoint.generator()

# Point arithmetic
two_g = g.double()
assert two_g == g + g
assert two_g - g == g
assert sum_points([g, g, g]) == g * 3

# Scalar multiplication (scalars are plain ints, taken modulo the group order)
p = g * 12345
encoded = p.to_encoded_point(True)   # 33-byte compressed SEC1 encoding

# Decoding
q = AffinePoint.from_encoded_point(encoded)
assert ProjectivePoint.from_affine(q) == p
```

Field elements can be used directly too:

```python
from k256.field import FieldElement

two = FieldElement.one().double()
assert (two * two.invert()).normalize() == FieldElement.one()
```

## Errors

- Malformed encodings, values not below the modulus and points not on the
  curve raise `ValueError`.
- `FieldElement.invert()` on zero raises `ZeroDivisionError`;
  `FieldElement.sqrt()` on a non-square raises `ValueError`.
- `AffinePoint.to_bytes()` and `ProjectivePoint.to_bytes()` raise
  `ValueError` for the identity, which has no compressed form; use
  `to_encoded_point()` to get its one-byte encoding.

## What it does not do

This package is curve arithmetic only. It has no scalar field type, no key
generation, no ECDSA signing or verification, no hashing and no key file
formats. The compact SEC1 encoding (tag `05`) is recognised but rejected.

The code is not constant-time and is meant for experimentation, testing and
teaching rather than for handling secrets.

## Running the tests

```
pip install .[test]
pytest
```