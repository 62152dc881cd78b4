"""Caller-supplied deadlines for graph and filesystem calls.

A deadline is opened around an operation with ``deadline(seconds)``. Every
graph query and filesystem call made inside the block is bounded by the
time left until it expires, so one slow call cannot push the operation
past what the caller allowed. Exceeding it aborts the call; nothing is
retried.

    with deadline(2.0):
        await post_service.create_post(user_id, text, images)
"""

import time
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

# Absolute expiry on the monotonic clock, None when no deadline is open
_expires_at: ContextVar[Optional[float]] = ContextVar("deadline", default=None)


@contextmanager
def deadline(seconds: float) -> Iterator[None]:
    """Bound every graph and filesystem call made inside the block.

    A nested deadline can only shorten the enclosing one.

    Args:
        seconds: Time allowed for the whole block

    Raises:
        ValueError: If seconds is not positive
    """
    if seconds <= 0:
        raise ValueError("Deadline must be positive")
    expires_at = time.monotonic() + seconds
    enclosing = _expires_at.get()
    if enclosing is not None:
        expires_at = min(expires_at, enclosing)
    token = _expires_at.set(expires_at)
    try:
        yield
    finally:
        _expires_at.reset(token)


def time_left(default: float) -> float:
    """Seconds left before the open deadline, or ``default`` without one.

    The result is zero or negative once the deadline has passed.
    """
    expires_at = _expires_at.get()
    if expires_at is None:
        return default
    return expires_at - time.monotonic()
