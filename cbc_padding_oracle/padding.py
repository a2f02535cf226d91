"""
PKCS#7-style padding: ``k`` trailing bytes of value ``k``, with
``1 <= k <= block_size``.

``validate`` is the strict check a real padding oracle performs. ``unpad``
only range-checks the length byte before stripping; it does not verify that
every padding byte matches.
"""

from typing import Callable

from .errors import InvalidPadding

# Signatures of ``pad`` and ``unpad``, for injecting an alternative scheme.
PaddingFunc = Callable[[bytes, int], bytes]
UnpaddingFunc = Callable[[bytes, int], bytes]


def pad(data: bytes, block_size: int) -> bytes:
    """
    Pad ``data`` up to a multiple of ``block_size``.

    Aligned input still gets a full block of padding, so the result is always
    strictly longer than ``data``.

    Raises
    ------
    ValueError
        If ``block_size`` is outside 1..255, where the length fits in a byte.
    """
    if not 1 <= block_size <= 0xFF:
        raise ValueError(f"block size must be in 1..255, got {block_size}")
    pad_len = block_size - (len(data) % block_size)
    return bytes(data) + bytes([pad_len]) * pad_len


def unpad(data: bytes, block_size: int) -> bytes:
    """
    Strip the padding length named by the last byte of ``data``.

    Raises
    ------
    InvalidPadding
        If ``data`` is empty, or the length byte is not smaller than
        ``len(data)``, or it exceeds ``block_size``.
    """
    if not data:
        raise InvalidPadding("cannot unpad empty input")
    pad_len = data[-1]
    if pad_len >= len(data) or pad_len > block_size:
        raise InvalidPadding(f"padding size error (length byte {pad_len})")
    return bytes(data[: len(data) - pad_len])


def validate(data: bytes, block_size: int) -> None:
    """
    Check that ``data`` is block aligned and ends in well-formed padding.

    Returns ``None`` on success.

    Raises
    ------
    InvalidPadding
        If the input is empty or misaligned, the last byte is 0 or larger than
        ``block_size``, or any of the last ``data[-1]`` bytes differs from it.
    """
    if not data or len(data) % block_size != 0:
        raise InvalidPadding("input is not a whole number of blocks")

    last = data[-1]
    if last == 0 or last > block_size:
        raise InvalidPadding(f"invalid padding length byte {last}")

    if data[-last:] != bytes([last]) * last:
        raise InvalidPadding("padding bytes are not uniform")


def is_valid(data: bytes, block_size: int) -> bool:
    """Boolean form of :func:`validate`."""
    try:
        validate(data, block_size)
    except InvalidPadding:
        return False
    return True
