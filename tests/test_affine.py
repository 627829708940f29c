import pytest

from k256.affine import AffinePoint, decompress_point
from k256.field import CURVE_EQUATION_B, FieldElement

UNCOMPRESSED_BASEPOINT = bytes.fromhex(
    "0479BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798"
    "483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8"
)
COMPRESSED_BASEPOINT = bytes.fromhex(
    "0279BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798"
)


def test_uncompressed_round_trip():
    point = AffinePoint.from_encoded_point(UNCOMPRESSED_BASEPOINT)
    assert point.to_encoded_point(False) == UNCOMPRESSED_BASEPOINT


def test_compressed_round_trip():
    point = AffinePoint.from_encoded_point(COMPRESSED_BASEPOINT)
    assert point.to_encoded_point(True) == COMPRESSED_BASEPOINT


def test_uncompressed_to_compressed():
    point = AffinePoint.from_encoded_point(UNCOMPRESSED_BASEPOINT)
    assert point.to_encoded_point(True) == COMPRESSED_BASEPOINT


def test_compressed_to_uncompressed():
    point = AffinePoint.from_encoded_point(COMPRESSED_BASEPOINT)
    assert point.to_encoded_point(False) == UNCOMPRESSED_BASEPOINT


def test_decompress():
    assert decompress_point(COMPRESSED_BASEPOINT) == UNCOMPRESSED_BASEPOINT


def test_affine_negation():
    basepoint = AffinePoint.generator()
    assert -(-basepoint) == basepoint


def test_negated_generator_has_odd_tag():
    neg = -AffinePoint.generator()
    assert neg.to_bytes() == b"\x03" + COMPRESSED_BASEPOINT[1:]
    assert neg != AffinePoint.generator()


def test_generator_matches_encoding():
    assert AffinePoint.from_encoded_point(UNCOMPRESSED_BASEPOINT) == AffinePoint.generator()
    assert not AffinePoint.generator().is_identity()


def test_identity_encoding():
    identity = AffinePoint.identity()
    assert identity.is_identity()
    assert identity.to_encoded_point(True) == b"\x00"
    assert identity.to_encoded_point(False) == b"\x00"
    assert AffinePoint.from_encoded_point(b"\x00") == identity
    assert AffinePoint() == identity


def test_identity_has_no_compressed_bytes():
    with pytest.raises(ValueError):
        AffinePoint.identity().to_bytes()


def test_from_bytes_round_trip():
    point = AffinePoint.from_bytes(COMPRESSED_BASEPOINT)
    assert point == AffinePoint.generator()
    assert point.to_bytes() == COMPRESSED_BASEPOINT


def test_from_bytes_rejects_uncompressed_tag():
    with pytest.raises(ValueError):
        AffinePoint.from_bytes(b"\x04" + COMPRESSED_BASEPOINT[1:])


def test_from_bytes_rejects_wrong_length():
    with pytest.raises(ValueError):
        AffinePoint.from_bytes(COMPRESSED_BASEPOINT[:-1])


def test_off_curve_point_rejected():
    bad = bytearray(UNCOMPRESSED_BASEPOINT)
    bad[-1] ^= 1
    with pytest.raises(ValueError):
        AffinePoint.from_encoded_point(bytes(bad))


def test_invalid_tag_rejected():
    with pytest.raises(ValueError):
        AffinePoint.from_encoded_point(b"\x07" + COMPRESSED_BASEPOINT[1:])


def test_compact_not_supported():
    with pytest.raises(ValueError):
        AffinePoint.from_encoded_point(b"\x05" + COMPRESSED_BASEPOINT[1:])


def test_empty_encoding_rejected():
    with pytest.raises(ValueError):
        AffinePoint.from_encoded_point(b"")


def test_x_out_of_range_rejected():
    with pytest.raises(ValueError):
        AffinePoint.decompress(b"\xff" * 32, False)


@pytest.mark.parametrize("x", range(1, 30))
@pytest.mark.parametrize("odd", [False, True])
def test_decompress_result_is_on_curve(x, odd):
    x_bytes = x.to_bytes(32, "big")
    try:
        point = AffinePoint.decompress(x_bytes, odd)
    except ValueError:
        alpha = FieldElement(x) * FieldElement(x) * FieldElement(x) + CURVE_EQUATION_B
        with pytest.raises(ValueError):
            alpha.sqrt()
    else:
        assert point.y.is_odd() == odd
        assert point.y.square() == point.x * point.x * point.x + CURVE_EQUATION_B
        encoded = point.to_encoded_point(False)
        assert AffinePoint.from_encoded_point(encoded) == point


def test_hash_consistent_with_equality():
    a = AffinePoint.from_encoded_point(COMPRESSED_BASEPOINT)
    b = AffinePoint.generator()
    assert {a, b} == {b}