from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Tuple

from sha2stream.constants import BLOCK_SIZE, VARIANTS

logger = logging.getLogger(__name__)


@dataclass
class HashContext:
    """
    Running state of one SHA-224/SHA-256 computation.

    total_length % BLOCK_SIZE bytes at the start of buffer are pending data
    that has not been compressed yet; the rest of buffer is stale.
    """
    state: Tuple[int, ...]
    digest_width: int
    total_length: int = 0
    buffer: bytearray = field(default_factory=lambda: bytearray(BLOCK_SIZE))
    finalized: bool = False

    @property
    def pending(self) -> int:
        return self.total_length % BLOCK_SIZE


def _lookup(variant: int):
    if variant not in VARIANTS:
        logger.error(f"Unsupported variant {variant!r}, expected one of {sorted(VARIANTS)}.")
        raise ValueError("variant must be 224 or 256")
    return VARIANTS[variant]


def init(variant: int = 256) -> HashContext:
    iv, width, name = _lookup(variant)
    logger.debug(f"Initialized {name} context.")
    return HashContext(state=iv, digest_width=width)


def reset(ctx: HashContext, variant: int = 256) -> None:
    iv, width, name = _lookup(variant)
    ctx.state = iv
    ctx.digest_width = width
    ctx.total_length = 0
    ctx.buffer[:] = bytes(BLOCK_SIZE)
    ctx.finalized = False
    logger.debug(f"Reset context to {name}.")
