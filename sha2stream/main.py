from __future__ import annotations

import logging
import sys

from sha2stream.context import init
from sha2stream.finalizer import final
from sha2stream.hasher import hexdigest
from sha2stream.stream import update

logger = logging.getLogger(__name__)

# (variant, message, expected hex digest) from FIPS 180-4 examples
KNOWN_VECTORS = [
    (256, b"", "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"),
    (256, b"abc", "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"),
    (256, b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq",
     "248d6a61d20638b8e5c026930c3e6039a33ce45964ff2167f6ecedd419db06c1"),
    (224, b"", "d14a028c2a3a2bc9476102bb288234c415a2b01f828ea62ac5b3e42f"),
    (224, b"abc", "23097d223405d8228642a477bda255b32aadbce4bda0b3f7e36c9da7"),
    (224, b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq",
     "75388b16512776cc5dba5da1fd890150b0c6455cb4f58b1952522525"),
]


def check_chunked(variant: int, message: bytes, chunk_size: int) -> str:
    ctx = init(variant)
    for i in range(0, len(message), chunk_size):
        update(ctx, message[i:i + chunk_size])
    return final(ctx).hex()


def main() -> int:
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    logger.info("Running SHA-224/SHA-256 known vector checks.")

    failures = 0
    for variant, message, expected in KNOWN_VECTORS:
        one_shot = hexdigest(variant, message)
        chunked = check_chunked(variant, message, 7)
        if one_shot == expected and chunked == expected:
            logger.info(f"SHA-{variant}({message!r}) = {one_shot}")
        else:
            failures += 1
            logger.error(
                f"SHA-{variant}({message!r}) mismatch: "
                f"one-shot={one_shot}, chunked={chunked}, expected={expected}"
            )

    if failures:
        logger.error(f"{failures} of {len(KNOWN_VECTORS)} checks failed.")
        return 1
    logger.info("All checks passed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
