"""Media store infrastructure providers."""

import logfire
from dishka import Scope, provide

from social.adapter.media import FilesystemMediaStore
from social.config import MediaSettings
from social.domain.repository import MediaStore
from social.util.di.base import ProviderBase


class MediaProvider(ProviderBase):
    """Media store component base."""

    __mock_component__ = "media"


class ProdMediaProvider(MediaProvider):
    """Production media provider writing to the local filesystem."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_media_store(self, settings: MediaSettings) -> MediaStore:
        """Provide filesystem media store rooted at the configured directory."""
        logfire.info("Media store configured", root=str(settings.root))
        return FilesystemMediaStore(settings.root, io_timeout=settings.io_timeout)
