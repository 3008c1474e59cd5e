# finalizer.py
# Padding, length encoding and digest serialization

from __future__ import annotations

import logging
import struct

from sha2stream.compression import compress
from sha2stream.constants import BLOCK_SIZE, LENGTH_FIELD_SIZE, LENGTH_MASK
from sha2stream.context import HashContext
from sha2stream.errors import UseAfterFinalizeError

logger = logging.getLogger(__name__)

_LENGTH_OFFSET = BLOCK_SIZE - LENGTH_FIELD_SIZE


def final(ctx: HashContext) -> bytes:
    """
    Pad the message, run the last compression(s) and return the digest.

    The context is consumed: buffer and state are overwritten, and further
    update()/final() calls raise UseAfterFinalizeError until reset().
    """
    if ctx.finalized:
        logger.error("final() called twice on the same context.")
        raise UseAfterFinalizeError("context already finalized; call reset() first")

    buf = ctx.buffer
    index = ctx.total_length % BLOCK_SIZE

    # append the 0x80 byte right after the last message byte
    buf[index] = 0x80
    index += 1

    # no room left for the 64-bit message length
    if index > _LENGTH_OFFSET:
        buf[index:] = bytes(BLOCK_SIZE - index)
        ctx.state = compress(ctx.state, buf)
        index = 0
        logger.debug("Length field did not fit, compressed an extra padding block.")

    buf[index:_LENGTH_OFFSET] = bytes(_LENGTH_OFFSET - index)
    buf[_LENGTH_OFFSET:] = struct.pack('>Q', (ctx.total_length * 8) & LENGTH_MASK)
    ctx.state = compress(ctx.state, buf)
    ctx.finalized = True

    digest = b''.join(struct.pack('>I', h) for h in ctx.state)
    logger.debug(f"Finalized after {ctx.total_length} bytes.")
    return digest[:ctx.digest_width]
