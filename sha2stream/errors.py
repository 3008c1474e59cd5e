class UseAfterFinalizeError(RuntimeError):
    """Raised when a context is updated or finalized after final() ran on it."""
