import pytest
from Crypto.Util import Padding

from cbc_padding_oracle import InvalidPadding
from cbc_padding_oracle.__main__ import main
from cbc_padding_oracle.oracle import BLOCKSIZE, Oracle

KEY = b"example key 1234"


def test_encrypt_decrypt():
    oracle = Oracle(key=KEY)
    ct = oracle.encrypt(b"ay lmao")
    assert len(ct) == BLOCKSIZE
    assert oracle.decrypt(ct) == b"ay lmao"


def test_random_key_and_iv():
    a, b = Oracle(), Oracle()
    assert len(a.key) == len(a.iv) == BLOCKSIZE
    assert a.key != b.key
    assert a.encrypt(b"Secret") != b.encrypt(b"Secret")


def test_iv_length_checked():
    with pytest.raises(ValueError):
        Oracle(key=KEY, iv=b"short")


def test_decrypt_check():
    oracle = Oracle(key=KEY, iv=bytes(BLOCKSIZE))
    ct = oracle.encrypt(b"Secret")
    raw, valid = oracle.decrypt_check(ct)
    assert raw == b"Secret" + b"\x0a" * 10
    assert valid


def test_call_answers_padding_question():
    oracle = Oracle(key=KEY, iv=bytes(BLOCKSIZE))
    ct = oracle.encrypt(b"A" * 20)
    assert oracle(ct)

    tampered = bytearray(ct)
    # flipping the last byte of block 0 turns the final 0x0c padding byte
    # of block 1 into 0x0d, which no longer matches its neighbours
    tampered[BLOCKSIZE - 1] ^= 0x01
    assert not oracle(bytes(tampered))


@pytest.mark.parametrize("ct", [b"", b"x" * 15, b"x" * 17])
def test_call_rejects_misaligned(ct):
    assert not Oracle(key=KEY)(ct)


def test_injected_padding_scheme():
    oracle = Oracle(key=KEY, padding=Padding.pad, unpadding=Padding.unpad)
    ct = oracle.encrypt(b"injected")
    assert oracle.decrypt(ct) == b"injected"
    assert oracle(ct)


def test_decrypt_bad_padding():
    oracle = Oracle(key=KEY, iv=bytes(BLOCKSIZE))
    ct = bytearray(oracle.encrypt(b"A" * 16))
    ct[-BLOCKSIZE - 1] ^= 0xFF  # last byte of the padding block becomes 0xef
    with pytest.raises(InvalidPadding):
        oracle.decrypt(bytes(ct))


def test_main(capsys):
    assert main(["-k", KEY.hex()]) == 0
    out = capsys.readouterr().out
    assert "Long Secret Msg." in out


def test_main_only_padding_recovered(capsys):
    # a one-block message leaves just the padding block to recover
    assert main(["0123456789abcdef", "-k", KEY.hex()]) == 1
    out = capsys.readouterr().out
    assert repr(b"\x10" * 16) in out
    assert "Could not strip padding" in out


def test_main_too_short(capsys):
    assert main(["short"]) == 1
    assert "Attack failed" in capsys.readouterr().out
