"""Filesystem media store.

Blocking file I/O runs in a worker thread so it never stalls the event loop.
Each call is bounded by the time left on the caller's open deadline, or by
the configured I/O timeout when none is open.
"""

import asyncio
from pathlib import Path
from typing import Callable, TypeVar

import logfire

from social.domain.error import OperationTimeoutError, StorageError
from social.domain.repository import MediaStore
from social.domain.value import UserId
from social.util.deadline import time_left

T = TypeVar("T")


class FilesystemMediaStore(MediaStore):
    """Media store writing image files under a root directory.

    Paths handed out and accepted by this store are relative to ``root``;
    the relative form is what gets persisted on graph nodes.
    """

    def __init__(self, root: Path, io_timeout: float) -> None:
        """Initialize filesystem media store.

        Args:
            root: Directory the relative media paths resolve against
            io_timeout: Deadline in seconds for each filesystem call
        """
        self.root = root
        self.io_timeout = io_timeout

    def _resolve(self, path: str) -> Path:
        resolved = (self.root / path).resolve()
        if not resolved.is_relative_to(self.root.resolve()):
            raise StorageError(f"Media path escapes the media root: {path}")
        return resolved

    async def _io(self, operation: str, fn: Callable[[], T]) -> T:
        budget = time_left(self.io_timeout)
        if budget <= 0:
            logfire.warn(
                "Media operation skipped, deadline passed", operation=operation
            )
            raise OperationTimeoutError(operation, 0)
        try:
            return await asyncio.wait_for(asyncio.to_thread(fn), timeout=budget)
        except asyncio.TimeoutError as e:
            logfire.warn(
                "Media operation timed out",
                operation=operation,
                timeout=budget,
            )
            raise OperationTimeoutError(operation, budget) from e
        except OSError as e:
            logfire.warn("Media operation failed", operation=operation, error=str(e))
            raise StorageError(f"{operation} failed: {e}") from e

    async def provision(self, owner_id: UserId, sub_scope: str) -> None:
        """Create the scope directory if it does not exist."""
        directory = self._resolve(self.scope_dir(owner_id, sub_scope))
        await self._io(
            "media.provision",
            lambda: directory.mkdir(mode=0o755, parents=True, exist_ok=True),
        )

    async def write(self, path: str, data: bytes) -> None:
        """Write bytes to a path, replacing any previous file."""
        target = self._resolve(path)
        with logfire.span("media.write", path=path, size=len(data)):
            await self._io("media.write", lambda: target.write_bytes(data))

    async def read(self, path: str) -> bytes:
        """Read bytes back from a path."""
        source = self._resolve(path)
        return await self._io("media.read", source.read_bytes)
