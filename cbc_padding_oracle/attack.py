"""
CBC padding oracle attack.

Given ciphertext blocks and an oracle that only says whether a candidate
ciphertext decrypts to valid PKCS#7 padding, recover the plaintext without the
key.

Algorithm overview (per target block ``C[t]``):
1. Keep an untouched copy of the preceding block ``C[t-1]``. Work on a private
   modifier copy whose bytes are all shifted by one, so none of them matches
   the original.
2. For each byte position from the end of the block to the start, try every
   value 0..255 for that byte of the modifier and send
   ``C[0] .. C[t-2] || modifier || C[t]`` to the oracle. The first accepted
   value ``g`` means the decrypted byte equals the padding length ``k`` being
   aimed for, so the intermediate byte ``D_K(C[t])`` is ``g ^ k``.
3. Rewrite the known tail of the modifier so it decrypts to ``k + 1`` and move
   one byte to the left.
4. XOR the recovered intermediate state with the original ``C[t-1]``.

Known limitation: at the last byte of a block, a modifier that happens to make
the decrypted tail read ``02 02`` (or any longer valid padding) is accepted as
a padding of length 1. The byte scrambling in step 1 makes this unlikely but
does not rule it out, and no confirmation probe is sent.
"""

import logging
from multiprocessing.pool import ThreadPool
from typing import Callable, List, Optional, Sequence

from .blocks import merge_blocks, split_blocks
from .errors import (
    InvalidPadding,
    InvalidTargetIndex,
    OracleExhausted,
    PaddingOracleError,
)
from .xor import xor

log = logging.getLogger(__name__)

# True when the candidate ciphertext decrypts to valid padding. An oracle may
# also report bad padding by raising InvalidPadding.
OracleFunc = Callable[[bytes], bool]


def _ask(oracle: OracleFunc, ciphertext: bytes) -> bool:
    try:
        return bool(oracle(ciphertext))
    except InvalidPadding:
        return False


def _find_byte(
    oracle: OracleFunc,
    prefix: bytes,
    modifier: bytearray,
    target: bytes,
    position: int,
    pool: Optional[ThreadPool] = None,
) -> int:
    """Return the lowest byte value at ``position`` the oracle accepts."""
    head = bytes(modifier[:position])
    tail = bytes(modifier[position + 1 :]) + target

    def probe(guess: int) -> bool:
        return _ask(oracle, prefix + head + bytes([guess]) + tail)

    if pool is None:
        for guess in range(0x100):
            if probe(guess):
                return guess
    else:
        # map keeps candidate order, so the lowest accepted value still wins
        for guess, ok in enumerate(pool.map(probe, range(0x100))):
            if ok:
                return guess

    raise OracleExhausted(position)


def reveal_block(
    blocks: Sequence[bytes],
    target_index: int,
    oracle: OracleFunc,
    pool: Optional[ThreadPool] = None,
) -> bytes:
    """
    Recover the plaintext of ``blocks[target_index]``.

    ``blocks`` is never modified. Only ``blocks[:target_index + 1]`` is ever
    sent to the oracle.

    Parameters
    ----------
    blocks : Sequence[bytes]
        Ciphertext blocks, all the same length.
    target_index : int
        Block to attack; must have a preceding block in ``blocks``.
    oracle : OracleFunc
        Padding oracle.
    pool : ThreadPool, optional
        If given, the 256 candidates for each byte are probed concurrently.

    Returns
    -------
    bytes
        The plaintext block, padding included.

    Raises
    ------
    InvalidTargetIndex
        If ``target_index < 1`` or ``target_index >= len(blocks)``.
    OracleExhausted
        If no value is accepted for some byte.
    """
    if target_index < 1 or target_index >= len(blocks):
        raise InvalidTargetIndex(
            f"target block index {target_index} is out of range 1..{len(blocks) - 1}"
        )

    original = bytes(blocks[target_index - 1])
    target = bytes(blocks[target_index])
    prefix = merge_blocks(blocks[: target_index - 1])
    block_size = len(target)

    modifier = bytearray((b + 1) % 0x100 for b in original)
    expected_padding = 1
    intermediate = bytearray(block_size)

    for position in reversed(range(block_size)):
        guess = _find_byte(oracle, prefix, modifier, target, position, pool)
        intermediate[position] = guess ^ expected_padding
        log.debug(
            "block %d byte %d: guess %#04x, intermediate %#04x",
            target_index,
            position,
            guess,
            intermediate[position],
        )

        expected_padding += 1
        if expected_padding > block_size:
            break

        # make the known tail decrypt to the next padding length
        for j in range(block_size - 1, position - 1, -1):
            modifier[j] = expected_padding ^ intermediate[j]

    return xor(original, intermediate)


def decrypt(
    ciphertext: bytes,
    block_size: int,
    oracle: OracleFunc,
    workers: int = 1,
) -> bytes:
    """
    Recover every block of ``ciphertext`` except the first.

    Block 0 is chained to an IV that is not part of ``ciphertext``, so the
    result is one block shorter than the input.

    If a block fails, the error is re-raised with ``partial_plaintext`` set to
    the blocks recovered so far and ``block_index`` set to the failing block.

    Raises
    ------
    NotBlockAligned
        If ``len(ciphertext)`` is not a multiple of ``block_size``.
    InvalidTargetIndex
        If ``ciphertext`` holds fewer than two blocks.
    OracleExhausted
        If some block cannot be recovered.
    """
    blocks = split_blocks(ciphertext, block_size)
    if len(blocks) < 2:
        raise InvalidTargetIndex(
            f"need at least 2 blocks to recover anything, got {len(blocks)}"
        )

    recovered: List[bytes] = []
    pool = ThreadPool(workers) if workers > 1 else None
    try:
        for i in range(1, len(blocks)):
            try:
                plain = reveal_block(blocks, i, oracle, pool=pool)
            except PaddingOracleError as err:
                err.partial_plaintext = merge_blocks(recovered)
                err.block_index = i
                log.warning(
                    "block %d/%d failed after %d bytes recovered: %s",
                    i,
                    len(blocks) - 1,
                    len(err.partial_plaintext),
                    err,
                )
                raise
            log.info("recovered block %d/%d: %r", i, len(blocks) - 1, plain)
            recovered.append(plain)
    finally:
        if pool is not None:
            pool.close()
            pool.join()

    return merge_blocks(recovered)
