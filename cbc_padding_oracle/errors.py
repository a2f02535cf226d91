"""
Exception types raised by the block, padding, XOR and attack helpers.

None of these are retried internally.
"""


class PaddingOracleError(Exception):
    """Base class for every error raised by this package."""

    # Set by ``decrypt`` on the error it re-raises: the plaintext of the
    # blocks recovered before the failure, and the index of the failing block.
    partial_plaintext: bytes = b""
    block_index = None


class NotBlockAligned(PaddingOracleError, ValueError):
    """Input length is not a multiple of the block size."""


class InvalidPadding(PaddingOracleError, ValueError):
    """Data does not carry well-formed PKCS#7 padding."""


class LengthMismatch(PaddingOracleError, ValueError):
    """Two byte sequences that must be the same length are not."""


class InvalidTargetIndex(PaddingOracleError, IndexError):
    """Target block has no preceding block, or lies past the end."""


class OracleExhausted(PaddingOracleError):
    """No byte value made the oracle accept the padding at some position."""

    def __init__(self, position: int) -> None:
        super().__init__(
            f"no candidate in 0..255 produced valid padding at byte {position}"
        )
        self.position = position
