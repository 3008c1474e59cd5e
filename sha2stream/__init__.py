from sha2stream.context import HashContext, init, reset
from sha2stream.errors import UseAfterFinalizeError
from sha2stream.finalizer import final
from sha2stream.hasher import SHA224, SHA256, digest, hexdigest, new
from sha2stream.stream import update

__all__ = [
    "HashContext",
    "SHA224",
    "SHA256",
    "UseAfterFinalizeError",
    "digest",
    "final",
    "hexdigest",
    "init",
    "new",
    "reset",
    "update",
]
