"""CBC padding oracle attack: recover CBC plaintext from padding errors alone."""

from .attack import OracleFunc, decrypt, reveal_block
from .blocks import merge_blocks, split_blocks
from .errors import (
    InvalidPadding,
    InvalidTargetIndex,
    LengthMismatch,
    NotBlockAligned,
    OracleExhausted,
    PaddingOracleError,
)
from .padding import PaddingFunc, UnpaddingFunc, is_valid, pad, unpad, validate
from .xor import xor

__all__ = [
    "OracleFunc",
    "PaddingFunc",
    "UnpaddingFunc",
    "decrypt",
    "reveal_block",
    "split_blocks",
    "merge_blocks",
    "pad",
    "unpad",
    "validate",
    "is_valid",
    "xor",
    "PaddingOracleError",
    "NotBlockAligned",
    "InvalidPadding",
    "LengthMismatch",
    "InvalidTargetIndex",
    "OracleExhausted",
]
