"""
Demonstrate the attack against a local AES-CBC oracle.

    python -m cbc_padding_oracle "Long Secret Message" -v

The message is encrypted under a random key and a zero IV. The attacker is
given only the ciphertext and the oracle's yes/no answers. Block 0 cannot be
recovered because the IV is not part of the ciphertext.
"""

import argparse
import logging
import sys

from .attack import decrypt
from .errors import InvalidPadding, PaddingOracleError
from .oracle import BLOCKSIZE, Oracle
from .padding import unpad

DEFAULT_MESSAGE = "Block zero stays behind the IV. Long Secret Msg."


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="cbc_padding_oracle",
        description="Recover AES-CBC plaintext through a padding oracle.",
    )
    parser.add_argument("message", nargs="?", default=DEFAULT_MESSAGE)
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="log every recovered byte"
    )
    parser.add_argument(
        "-w", "--workers", type=int, default=1, help="threads probing candidates"
    )
    parser.add_argument(
        "-k", "--key", type=bytes.fromhex, help="hex AES key (random if omitted)"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    oracle = Oracle(key=args.key, iv=bytes(BLOCKSIZE))
    ct = oracle.encrypt(args.message.encode("utf-8"))
    print(f"CT  {ct.hex()}")

    try:
        plain = decrypt(ct, BLOCKSIZE, oracle, workers=args.workers)
    except PaddingOracleError as err:
        print(f"Attack failed: {err}")
        if err.block_index is not None:
            print(f"Partial (before block {err.block_index}) {err.partial_plaintext!r}")
        return 1

    print(f"Plain (with padding) {plain!r}")
    print(f"First {BLOCKSIZE} bytes stay hidden behind the IV")
    try:
        text = unpad(plain, BLOCKSIZE)
    except InvalidPadding as err:
        # only the padding block was recovered
        print(f"Could not strip padding: {err}")
        return 1
    print(text.decode("utf-8", errors="replace"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
