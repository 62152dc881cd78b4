"""Media attachment domain service."""

from base64 import b64encode
from typing import List, Optional, Sequence

import logfire

from social.config import MediaSettings
from social.domain.error import InvalidInputError, StorageError
from social.domain.repository import MediaStore
from social.domain.service.base import Service
from social.domain.value import MediaScope, UserId


class MediaService(Service):
    """Domain service coupling image batches to the media store.

    A batch is validated as a whole before anything is written, then written
    in upload order. Paths, not bytes, are what callers persist on nodes;
    rendering reads each path back and base64-encodes it on demand.
    """

    def __init__(self, media_store: MediaStore, media_settings: MediaSettings) -> None:
        """Initialize media service.

        Args:
            media_store: Blob storage for image payloads
            media_settings: Count and size limits
        """
        self.media_store = media_store
        self.media_settings = media_settings

    def max_images(self, scope: MediaScope) -> int:
        if scope == MediaScope.PROFILE:
            return self.media_settings.max_profile_images
        return self.media_settings.max_post_images

    def validate(self, payloads: Sequence[bytes], scope: MediaScope) -> None:
        """Reject an over-quota batch or any oversized or empty payload.

        Args:
            payloads: Image bytes in upload order
            scope: Whether the batch belongs to a post or a profile

        Raises:
            InvalidInputError: If the batch violates a limit
        """
        limit = self.max_images(scope)
        if len(payloads) > limit:
            raise InvalidInputError(
                f"Too many images: {len(payloads)} given, at most {limit} allowed"
            )
        for index, data in enumerate(payloads):
            if not data:
                raise InvalidInputError(f"Image {index} is empty")
            if len(data) > self.media_settings.max_image_bytes:
                raise InvalidInputError(
                    f"Image {index} is {len(data)} bytes, "
                    f"at most {self.media_settings.max_image_bytes} allowed"
                )

    async def attach(
        self, owner_id: UserId, sub_scope: str, payloads: Sequence[bytes]
    ) -> List[str]:
        """Write a validated batch and return the allocated paths in order.

        Args:
            owner_id: User owning the media
            sub_scope: Directory under the owner (post or profile picture)
            payloads: Image bytes in upload order

        Returns:
            Relative media paths, one per payload

        Raises:
            StorageError: If provisioning or any write fails; payloads
                written before the failure are left in place
        """
        with logfire.span(
            "media_service.attach",
            owner_id=owner_id,
            sub_scope=sub_scope,
            count=len(payloads),
        ):
            await self.media_store.provision(owner_id, sub_scope)
            paths = []
            for index, data in enumerate(payloads):
                path = self.media_store.allocate_path(owner_id, sub_scope, index)
                await self.media_store.write(path, data)
                paths.append(path)
            logfire.info("Media attached", owner_id=owner_id, paths=paths)
            return paths

    async def render_images(self, paths: Sequence[str]) -> List[str]:
        """Read post images back as base64, skipping unreadable ones."""
        rendered = []
        for path in paths:
            try:
                data = await self.media_store.read(path)
            except StorageError as e:
                logfire.warn("Skipping unreadable image", path=path, error=str(e))
                continue
            rendered.append(b64encode(data).decode("ascii"))
        return rendered

    async def render_profile_image(self, path: Optional[str]) -> Optional[str]:
        """Read a profile image back as base64.

        Raises:
            StorageError: If the image is referenced but cannot be read
        """
        if path is None:
            return None
        data = await self.media_store.read(path)
        return b64encode(data).decode("ascii")
