"""
tests/test_compression.py – unit tests for sha2stream/compression.py
"""
from __future__ import annotations

import hashlib
import struct

import pytest

from sha2stream.compression import (
    big_sigma0,
    big_sigma1,
    ch,
    compress,
    maj,
    message_schedule,
    rotr32,
    small_sigma0,
    small_sigma1,
)
from sha2stream.constants import IV224, IV256


def _padded_abc_block() -> bytes:
    return b"abc" + b"\x80" + bytes(52) + struct.pack(">Q", 24)


# ---------------------------------------------------------------------------
# bit helpers
# ---------------------------------------------------------------------------

def test_rotr32_wraps_low_bits():
    assert rotr32(1, 1) == 0x80000000
    assert rotr32(0x80000000, 31) == 1
    assert rotr32(0x12345678, 8) == 0x78123456


def test_sigma_functions_stay_in_32_bits():
    for fn in (big_sigma0, big_sigma1, small_sigma0, small_sigma1):
        assert 0 <= fn(0xFFFFFFFF) <= 0xFFFFFFFF
        assert fn(0) == 0


def test_small_sigma1_known_value():
    # W[17] of the "abc" schedule depends only on sigma1(0x18)
    assert small_sigma1(0x18) == 0x000F0000


def test_ch_selects_by_first_argument():
    assert ch(0xFFFFFFFF, 0x12345678, 0x9ABCDEF0) == 0x12345678
    assert ch(0, 0x12345678, 0x9ABCDEF0) == 0x9ABCDEF0
    assert ch(0xFFFF0000, 0x12345678, 0x9ABCDEF0) == 0x1234DEF0


def test_maj_is_bitwise_majority():
    assert maj(0xF0F0F0F0, 0xF0F0F0F0, 0x0F0F0F0F) == 0xF0F0F0F0
    assert maj(0xFFFF0000, 0x00FFFF00, 0x0000FFFF) == 0x00FFFF00


# ---------------------------------------------------------------------------
# message schedule
# ---------------------------------------------------------------------------

def test_message_schedule_abc():
    w = message_schedule(_padded_abc_block())
    assert len(w) == 64
    assert w[0] == 0x61626380
    assert w[15] == 0x00000018
    assert w[16] == 0x61626380
    assert w[17] == 0x000F0000
    assert all(0 <= x <= 0xFFFFFFFF for x in w)


@pytest.mark.parametrize("size", [0, 63, 65, 128])
def test_message_schedule_rejects_wrong_block_size(size):
    with pytest.raises(ValueError):
        message_schedule(bytes(size))


# ---------------------------------------------------------------------------
# compress
# ---------------------------------------------------------------------------

def test_compress_single_block_matches_abc_digest():
    state = compress(IV256, _padded_abc_block())
    assert b"".join(struct.pack(">I", x) for x in state) == hashlib.sha256(b"abc").digest()


def test_compress_sha224_iv_matches_abc_digest():
    state = compress(IV224, _padded_abc_block())
    out = b"".join(struct.pack(">I", x) for x in state)[:28]
    assert out == hashlib.sha224(b"abc").digest()


def test_compress_does_not_mutate_inputs():
    state = list(IV256)
    block = bytearray(_padded_abc_block())
    snapshot = bytes(block)
    result = compress(state, block)
    assert state == list(IV256)
    assert bytes(block) == snapshot
    assert isinstance(result, tuple)
    assert len(result) == 8


def test_compress_accepts_memoryview():
    block = _padded_abc_block()
    assert compress(IV256, memoryview(block)) == compress(IV256, block)
