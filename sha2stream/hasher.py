# hasher.py
# One-shot digests and hashlib-style SHA256 / SHA224 objects

from __future__ import annotations

import copy
import logging

from sha2stream.constants import BLOCK_SIZE, VARIANTS
from sha2stream.context import init
from sha2stream.finalizer import final
from sha2stream.stream import update

logger = logging.getLogger(__name__)


def digest(variant: int, message: bytes) -> bytes:
    ctx = init(variant)
    update(ctx, message)
    return final(ctx)


def hexdigest(variant: int, message: bytes) -> str:
    return digest(variant, message).hex()


class _SHA2:
    """
    hashlib-style wrapper around a HashContext.
    Methods: update(data), digest(), hexdigest(), copy()
    """
    variant = 256
    block_size = BLOCK_SIZE

    def __init__(self, data: bytes = b""):
        self._ctx = init(self.variant)
        self.update(data)

    @property
    def name(self) -> str:
        return VARIANTS[self.variant][2]

    @property
    def digest_size(self) -> int:
        return self._ctx.digest_width

    def update(self, data: bytes):
        update(self._ctx, data)

    def copy(self):
        h = copy.copy(self)
        h._ctx = copy.deepcopy(self._ctx)
        return h

    def digest(self) -> bytes:
        # finalize a copy so this object can keep absorbing data
        return final(copy.deepcopy(self._ctx))

    def hexdigest(self) -> str:
        return self.digest().hex()


class SHA256(_SHA2):
    variant = 256


class SHA224(_SHA2):
    variant = 224


_CONSTRUCTORS = {"sha256": SHA256, "sha224": SHA224}


def new(name: str, data: bytes = b"") -> _SHA2:
    key = name.lower().replace("-", "").replace("_", "")
    if key not in _CONSTRUCTORS:
        logger.error(f"Unsupported hash name {name!r}.")
        raise ValueError(f"unsupported hash type {name}")
    return _CONSTRUCTORS[key](data)
