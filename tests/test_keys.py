import pytest

from apistamp.crypto.keys import PrivateKey, PublicKey, generate_key_pair
from apistamp.exceptions import InvalidKeyMaterial, RandomnessUnavailable, SigningFailure
from apistamp.types import KeyPair

# Compressed P-256 generator point
GENERATOR_HEX = "036b17d1f2e12c4247f8bce6e563a440f277037d812deb33a0f4a13945d898c296"

# RFC 6979 A.2.5 key
RFC6979_PRIVATE = "c9afa9d845ba75166b5c215767b1d6934e50c3db36e89b127b8a622b120f6721"
RFC6979_PUBLIC = "0360fed4ba255a9d31c961eb74c6356d68c049b8923b61fa6ce669622e60f29fb6"


def test_scalar_one_derives_generator():
    key = PrivateKey("00" * 31 + "01")
    assert key.public_key().hex() == GENERATOR_HEX


def test_known_public_key_derivation():
    assert PrivateKey(RFC6979_PRIVATE).public_key().hex() == RFC6979_PUBLIC


def test_generated_pairs_are_consistent():
    for _ in range(10):
        pair = generate_key_pair()
        assert isinstance(pair, KeyPair)
        assert len(pair.public_key) == 66
        assert len(pair.private_key) == 64
        assert pair.public_key[:2] in ("02", "03")
        assert PrivateKey(pair.private_key).public_key().hex() == pair.public_key


def test_generated_pairs_are_independent():
    keys = {generate_key_pair().private_key for _ in range(20)}
    assert len(keys) == 20


def test_private_key_is_zero_padded():
    pair = generate_key_pair(rng=lambda n: b"\x00" * (n - 1) + b"\x05")
    assert pair.private_key == "00" * 31 + "05"
    assert len(pair.private_key) == 64


def test_create_redraws_out_of_range_scalars():
    draws = iter([b"\x00" * 32, b"\xff" * 32, b"\x11" * 32])
    key = PrivateKey.create(rng=lambda n: next(draws))
    assert key.hex() == "11" * 32


def test_failing_random_source():
    def broken(n):
        raise OSError("no entropy")

    with pytest.raises(RandomnessUnavailable):
        generate_key_pair(rng=broken)
    with pytest.raises(RandomnessUnavailable):
        generate_key_pair(rng=lambda n: b"\x01" * (n - 1))


def test_invalid_private_keys():
    for bad in ["", "00" * 32, "xyz", "ff" * 32]:
        with pytest.raises(InvalidKeyMaterial):
            PrivateKey(bad)


def test_public_key_must_be_on_curve():
    # x is larger than the field prime
    with pytest.raises(InvalidKeyMaterial):
        PublicKey("02" + "ff" * 32)
    assert PublicKey(GENERATOR_HEX) == PrivateKey("00" * 31 + "01").public_key()


def test_public_key_uncompressed_form():
    pub = PublicKey(GENERATOR_HEX)
    uncompressed = pub.uncompressed_hex()
    assert uncompressed.startswith("04")
    assert len(uncompressed) == 130
    assert uncompressed[2:66] == GENERATOR_HEX[2:]


def test_private_key_repr_is_masked():
    key = PrivateKey(RFC6979_PRIVATE)
    assert RFC6979_PRIVATE not in repr(key)
    assert RFC6979_PRIVATE not in repr(KeyPair(public_key=RFC6979_PUBLIC, private_key=RFC6979_PRIVATE))


def test_sign_requires_32_byte_hash():
    key = PrivateKey(RFC6979_PRIVATE)
    with pytest.raises(SigningFailure):
        key.sign(b"\x00" * 31)
