import pytest

from cbc_padding_oracle import is_valid, merge_blocks, pad, split_blocks, xor

BS = 8
TOY_KEY = bytes.fromhex("3a91c4075ee2b86d")
TOY_IV = bytes.fromhex("0f1e2d3c4b5a6978")


# Toy block cipher: XOR with the key. Insecure, but the attack never looks at
# the cipher, only at the padding verdict.
def toy_encrypt(plaintext: bytes, iv: bytes = TOY_IV) -> bytes:
    prev = iv
    out = []
    for block in split_blocks(pad(plaintext, BS), BS):
        prev = xor(xor(block, prev), TOY_KEY)
        out.append(prev)
    return merge_blocks(out)


def toy_decrypt_raw(ciphertext: bytes, iv: bytes = TOY_IV) -> bytes:
    prev = iv
    out = []
    for block in split_blocks(ciphertext, BS):
        out.append(xor(xor(block, TOY_KEY), prev))
        prev = block
    return merge_blocks(out)


def toy_oracle(ciphertext: bytes) -> bool:
    return is_valid(toy_decrypt_raw(ciphertext), BS)


@pytest.fixture
def oracle():
    return toy_oracle
