# compression.py
# SHA-256 compression function and its bit helpers (FIPS 180-4, 4.1.2 and 6.2.2)

from __future__ import annotations

import logging
import struct
from typing import List, Sequence, Tuple

from sha2stream.constants import BLOCK_SIZE, K256, WORD_MASK

logger = logging.getLogger(__name__)


def rotr32(x: int, n: int) -> int:
    return (x >> n) | ((x << (32 - n)) & WORD_MASK)


def big_sigma0(x: int) -> int:
    return rotr32(x, 2) ^ rotr32(x, 13) ^ rotr32(x, 22)


def big_sigma1(x: int) -> int:
    return rotr32(x, 6) ^ rotr32(x, 11) ^ rotr32(x, 25)


def small_sigma0(x: int) -> int:
    return rotr32(x, 7) ^ rotr32(x, 18) ^ (x >> 3)


def small_sigma1(x: int) -> int:
    return rotr32(x, 17) ^ rotr32(x, 19) ^ (x >> 10)


def ch(x: int, y: int, z: int) -> int:
    return (x & y) ^ (~x & z & WORD_MASK)


def maj(x: int, y: int, z: int) -> int:
    return (x & y) ^ (x & z) ^ (y & z)


def message_schedule(block) -> List[int]:
    """Expand a 64-byte block into the 64-word message schedule."""
    if len(block) != BLOCK_SIZE:
        logger.error(f"Invalid block length {len(block)}, expected {BLOCK_SIZE} bytes.")
        raise ValueError(f"block must be {BLOCK_SIZE} bytes")
    w = list(struct.unpack('>16I', block))
    for t in range(16, 64):
        val = small_sigma1(w[t - 2]) + w[t - 7] + small_sigma0(w[t - 15]) + w[t - 16]
        w.append(val & WORD_MASK)
    return w


def compress(state: Sequence[int], block) -> Tuple[int, ...]:
    """
    SHA-256 compression function (FIPS 180-4, 6.2.2).
    Takes the eight-word chaining value and one 64-byte block, returns the new
    chaining value. Inputs are never modified.
    """
    w = message_schedule(block)
    a, b, c, d, e, f, g, h = state
    for t in range(64):
        t1 = (h + big_sigma1(e) + ch(e, f, g) + K256[t] + w[t]) & WORD_MASK
        t2 = (big_sigma0(a) + maj(a, b, c)) & WORD_MASK
        h = g
        g = f
        f = e
        e = (d + t1) & WORD_MASK
        d = c
        c = b
        b = a
        a = (t1 + t2) & WORD_MASK
    return tuple(
        (x + y) & WORD_MASK for x, y in zip(state, (a, b, c, d, e, f, g, h))
    )
