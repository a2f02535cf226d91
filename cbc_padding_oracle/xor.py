from .errors import LengthMismatch


def xor(a, b) -> bytes:
    """Return the byte-wise XOR of two equal-length byte sequences."""
    if len(a) != len(b):
        raise LengthMismatch(
            f"cannot xor sequences of different lengths ({len(a)} != {len(b)})"
        )
    return bytes(x ^ y for x, y in zip(a, b))
