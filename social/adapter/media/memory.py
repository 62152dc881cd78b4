"""In-memory media store for testing."""

from typing import Dict, Set

from social.domain.error import StorageError
from social.domain.repository import MediaStore
from social.domain.value import UserId


class InMemoryMediaStore(MediaStore):
    """Media store keeping blobs in a dict.

    ``fail_writes`` and ``unreadable`` let tests simulate a broken disk
    after the graph write has already happened.
    """

    def __init__(self) -> None:
        self.blobs: Dict[str, bytes] = {}
        self.scopes: Set[str] = set()
        self.fail_writes = False
        self.unreadable: Set[str] = set()

    async def provision(self, owner_id: UserId, sub_scope: str) -> None:
        if self.fail_writes:
            raise StorageError("Simulated media provisioning failure")
        self.scopes.add(self.scope_dir(owner_id, sub_scope))

    async def write(self, path: str, data: bytes) -> None:
        if self.fail_writes:
            raise StorageError(f"Simulated media write failure: {path}")
        self.blobs[path] = bytes(data)

    async def read(self, path: str) -> bytes:
        if path in self.unreadable or path not in self.blobs:
            raise StorageError(f"Media not readable: {path}")
        return self.blobs[path]
