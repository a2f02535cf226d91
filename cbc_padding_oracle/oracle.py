"""
AES-CBC padding oracle, for demonstrations and tests.

This module stands in for a vulnerable server: it holds a secret key and IV,
and answers only one question about a ciphertext, namely whether it decrypts
to validly padded data. That answer alone is enough for
:func:`cbc_padding_oracle.attack.decrypt` to recover the plaintext.

This file exposes:
- BLOCKSIZE: the block size used by the cipher (16 bytes for AES).
- Oracle: a keyed AES-CBC helper whose instances are callable oracles.

Notes / Security:
- This module is intentionally vulnerable. Use it only for education and
  testing; never expose padding check results to untrusted callers, and use
  authenticated encryption (e.g. AES-GCM) or encrypt-then-MAC for real data.
"""

from typing import Optional, Tuple

from Crypto.Cipher import AES
from Crypto.Random import get_random_bytes

from .padding import PaddingFunc, UnpaddingFunc, is_valid, pad, unpad

# AES block size in bytes (16 bytes for AES)
BLOCKSIZE: int = AES.block_size


class Oracle:
    """
    A keyed AES-CBC padding oracle.

    Attributes
    ----------
    key : bytes
        The secret AES key (16, 24 or 32 bytes).
    iv : bytes
        The initialization vector used for every encryption and decryption
        (BLOCKSIZE bytes). It is never part of the ciphertext.
    """

    def __init__(
        self,
        key: Optional[bytes] = None,
        iv: Optional[bytes] = None,
        padding: PaddingFunc = pad,
        unpadding: UnpaddingFunc = unpad,
    ) -> None:
        """
        Create an Oracle, generating a random key and/or IV when not given.

        Both stay fixed for the lifetime of the instance, so the oracle gives
        the same answer for the same ciphertext every time.

        Parameters
        ----------
        key : bytes, optional
            AES key. Defaults to BLOCKSIZE random bytes.
        iv : bytes, optional
            Initialization vector. Defaults to BLOCKSIZE random bytes.
        padding, unpadding : callable, optional
            Padding scheme applied by ``encrypt`` and removed by ``decrypt``.
        """
        self.key: bytes = key if key is not None else get_random_bytes(BLOCKSIZE)
        self.iv: bytes = iv if iv is not None else get_random_bytes(BLOCKSIZE)
        if len(self.iv) != BLOCKSIZE:
            raise ValueError(f"IV must be {BLOCKSIZE} bytes, got {len(self.iv)}")
        self.padding = padding
        self.unpadding = unpadding

    def _cipher(self):
        # CBC cipher objects are stateful, so every operation gets a fresh one
        return AES.new(self.key, AES.MODE_CBC, iv=self.iv)

    def encrypt(self, message: bytes) -> bytes:
        """
        Pad ``message`` and encrypt it under AES-CBC.

        Returns
        -------
        bytes
            The ciphertext, without the IV.
        """
        return self._cipher().encrypt(self.padding(message, BLOCKSIZE))

    def decrypt(self, ciphertext: bytes) -> bytes:
        """
        Decrypt ``ciphertext`` with the key and strip its padding.

        This is the legitimate, keyed path the attack never uses.
        """
        return self.unpadding(self._cipher().decrypt(ciphertext), BLOCKSIZE)

    def decrypt_check(self, ciphertext: bytes) -> Tuple[bytes, bool]:
        """
        Decrypt ``ciphertext`` and check its padding.

        Returns
        -------
        (raw, valid) : Tuple[bytes, bool]
            raw: the decrypted bytes, padding still attached.
            valid: True if the padding is well formed.

        Raises
        ------
        ValueError
            If ``ciphertext`` is not a whole number of blocks (from
            pycryptodome); ``__call__`` reports such input as invalid instead.
        """
        raw = self._cipher().decrypt(ciphertext)
        return raw, is_valid(raw, BLOCKSIZE)

    def __call__(self, ciphertext: bytes) -> bool:
        """Answer the oracle question: does ``ciphertext`` have valid padding?"""
        if not ciphertext or len(ciphertext) % BLOCKSIZE != 0:
            return False
        _, valid = self.decrypt_check(ciphertext)
        return valid
