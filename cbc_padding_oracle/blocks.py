"""Splitting byte strings into fixed-size blocks and joining them back."""

from typing import Iterable, List

from .errors import NotBlockAligned


def split_blocks(data: bytes, block_size: int) -> List[bytes]:
    """
    Split ``data`` into contiguous ``block_size``-byte blocks, in order.

    Each block is an independent ``bytes`` object, so mutating a copy of one
    block can never affect another.

    Raises
    ------
    NotBlockAligned
        If ``len(data)`` is not a multiple of ``block_size``.
    """
    if block_size <= 0:
        raise ValueError(f"block size must be positive, got {block_size}")
    if len(data) % block_size != 0:
        raise NotBlockAligned(
            f"input of {len(data)} bytes is not a multiple of the block size {block_size}"
        )
    return [bytes(data[i : i + block_size]) for i in range(0, len(data), block_size)]


def merge_blocks(blocks: Iterable[bytes]) -> bytes:
    """Concatenate ``blocks`` in order."""
    return b"".join(bytes(b) for b in blocks)
