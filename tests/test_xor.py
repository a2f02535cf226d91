import pytest

from cbc_padding_oracle import LengthMismatch, xor


def test_xor_length_mismatch():
    with pytest.raises(LengthMismatch):
        xor(b"abc", b"ab")


def test_xor_self_is_zero():
    a = b"example key 1234"
    assert xor(a, a) == bytes(16)


def test_xor_twice_restores():
    a = bytes(range(32))
    b = bytes(range(100, 132))
    assert xor(xor(a, b), b) == a


def test_xor_mixed_inputs():
    assert xor(bytearray(b"\x0f\xf0"), [0xFF, 0xFF]) == b"\xf0\x0f"
    assert xor(b"", b"") == b""
