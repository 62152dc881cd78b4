"""Mock media providers for testing."""

from dishka import Scope, provide

from social.adapter.media import InMemoryMediaStore
from social.domain.repository import MediaStore
from social.util.di.infrastructure.media import MediaProvider


class MockMediaProvider(MediaProvider):
    """Mock media provider keeping blobs in memory.

    The concrete store is exposed too so tests can inject failures.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_in_memory_media_store(self) -> InMemoryMediaStore:
        """Provide the in-memory store."""
        return InMemoryMediaStore()

    @provide(scope=Scope.APP)
    def get_media_store(self, store: InMemoryMediaStore) -> MediaStore:
        """Provide the in-memory store as the media store."""
        return store
