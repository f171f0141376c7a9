import pytest

from apistamp.constants import P256_ORDER
from apistamp.exceptions import InvalidKeyMaterial, ValidationError
from apistamp.utils import validation as v


def test_private_key_validation():
    key = "11" * 32
    assert v.is_valid_private_key(key)
    assert v.validate_private_key(key) == bytes.fromhex(key)
    assert not v.is_valid_private_key("0x" + key)
    assert not v.is_valid_public_key("0x02" + "ab" * 32)

    for bad in ["", "zz" * 32, "11" * 31, "11" * 33, "1" * 63, "00" * 32, "11" * 32 + "\n", " " + "11" * 32]:
        assert not v.is_valid_private_key(bad)
        with pytest.raises(InvalidKeyMaterial):
            v.validate_private_key(bad)


def test_private_key_range():
    assert v.is_valid_private_key((P256_ORDER - 1).to_bytes(32, "big"))
    with pytest.raises(InvalidKeyMaterial):
        v.validate_private_key(P256_ORDER.to_bytes(32, "big"))


def test_public_key_validation():
    key = "02" + "ab" * 32
    assert v.is_valid_public_key(key)
    assert v.validate_public_key(key) == bytes.fromhex(key)

    for bad in ["", "04" + "ab" * 32, "02" + "ab" * 31, "02" + "xy" * 32, "04" + "ab" * 64]:
        assert not v.is_valid_public_key(bad)
        with pytest.raises(InvalidKeyMaterial):
            v.validate_public_key(bad)


def test_invalid_key_material_is_validation_error():
    with pytest.raises(ValidationError):
        v.validate_public_key(None)


def test_payload_hash_validation():
    h = "ab" * 32
    assert v.is_valid_payload_hash(h)
    assert v.validate_payload_hash(h) == bytes.fromhex(h)
    assert v.validate_payload_hash(b"\x00" * 32) == b"\x00" * 32
    assert not v.is_valid_payload_hash("AB" * 32)
    with pytest.raises(ValidationError):
        v.validate_payload_hash("ab" * 31)
    with pytest.raises(ValidationError):
        v.validate_payload_hash(b"\x00" * 31)
