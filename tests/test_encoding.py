import pytest
from apistamp.exceptions import SerializationError, ValidationError
from apistamp.utils.encoding import (
    hex_to_bytes, bytes_to_hex, text_to_bytes, canonical_json,
    encode_base64url, encode_base64url_text, decode_base64url, decode_base64url_text,
)


def test_hex_bytes_roundtrip():
    data = b"\x00\x01deadbeef"
    hex_str = bytes_to_hex(data, prefix=True)
    assert hex_str.startswith("0x")
    assert hex_to_bytes(hex_str) == data
    with pytest.raises(ValidationError):
        hex_to_bytes("zzzz")


def test_base64url_roundtrip():
    for size in range(0, 40):
        data = bytes(range(256))[size:size * 5]
        encoded = encode_base64url(data)
        assert decode_base64url(encoded) == data
        assert "+" not in encoded and "/" not in encoded and "=" not in encoded


def test_base64url_alphabet_substitution():
    # 0xfb 0xff encodes to "+/8=" in standard base64
    assert encode_base64url(b"\xfb\xff") == "-_8"
    assert decode_base64url("-_8") == b"\xfb\xff"


def test_base64url_tolerates_padding():
    assert decode_base64url("aGk=") == b"hi"
    assert decode_base64url("aGk") == b"hi"


def test_base64url_rejects_invalid_input():
    with pytest.raises(SerializationError):
        decode_base64url("+/8")
    with pytest.raises(SerializationError):
        decode_base64url("a")
    with pytest.raises(SerializationError):
        decode_base64url("aGl")  # non-zero trailing bits


def test_text_and_bytes_entry_points_agree():
    text = "héllo wörld ✓"
    assert encode_base64url_text(text) == encode_base64url(text.encode("utf-8"))
    assert decode_base64url_text(encode_base64url_text(text)) == text


def test_text_to_bytes_requires_text():
    assert text_to_bytes("é") == b"\xc3\xa9"
    with pytest.raises(ValidationError):
        text_to_bytes(b"raw")


def test_canonical_json_sorts_keys():
    obj = {"signature": "ab", "publicKey": "02", "scheme": "S"}
    assert canonical_json(obj) == '{"publicKey":"02","scheme":"S","signature":"ab"}'
    with pytest.raises(SerializationError):
        canonical_json({"x": object()})
