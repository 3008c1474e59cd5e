from __future__ import annotations

import logging

from sha2stream.compression import compress
from sha2stream.constants import BLOCK_SIZE
from sha2stream.context import HashContext
from sha2stream.errors import UseAfterFinalizeError

logger = logging.getLogger(__name__)


def update(ctx: HashContext, data) -> None:
    """
    Feed a chunk of the message into the context.

    Chunks may have any length, including zero. Full blocks are compressed
    as soon as they are available; the leftover tail stays in ctx.buffer.
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        logger.error(f"Unsupported data type {type(data).__name__}, expected a bytes-like object.")
        raise TypeError("data must be bytes")
    if ctx.finalized:
        logger.error("update() called on a finalized context.")
        raise UseAfterFinalizeError("context already finalized; call reset() first")

    msg = memoryview(data).cast('B')
    size = len(msg)
    index = ctx.total_length % BLOCK_SIZE
    ctx.total_length += size
    pos = 0

    # fill partial block
    if index:
        left = BLOCK_SIZE - index
        if size < left:
            ctx.buffer[index:index + size] = msg
            return
        ctx.buffer[index:] = msg[:left]
        ctx.state = compress(ctx.state, ctx.buffer)
        pos = left

    blocks = (size - pos) // BLOCK_SIZE
    for _ in range(blocks):
        ctx.state = compress(ctx.state, msg[pos:pos + BLOCK_SIZE])
        pos += BLOCK_SIZE

    # save leftovers
    tail = size - pos
    if tail:
        ctx.buffer[:tail] = msg[pos:]
    logger.debug(f"Consumed {size} bytes, {blocks} direct blocks, {tail} bytes buffered.")
