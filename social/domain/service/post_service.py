"""Post domain service."""

from typing import Sequence

import logfire

from social.domain.error import NotFoundError, StorageError
from social.domain.model import Post
from social.domain.repository import PostRepository
from social.domain.repository.media import post_scope
from social.domain.service.base import Service
from social.domain.service.media_service import MediaService
from social.domain.value import MediaScope, PostId, UserId, utc_now


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self, post_repository: PostRepository, media_service: MediaService
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            media_service: Media attachment service
        """
        self.post_repository = post_repository
        self.media_service = media_service

    async def create_post(
        self, user_id: UserId, description: str, images: Sequence[bytes] = ()
    ) -> Post:
        """Create a post with its POSTED edge, then attach its images.

        Three separate writes: the post node and edge, the image files, and
        the image paths on the node. A failure after the first write leaves
        the post in place with ``has_incomplete_media`` set.

        Args:
            user_id: Author's user ID
            description: Post text
            images: Image bytes in upload order

        Returns:
            Created post

        Raises:
            InvalidInputError: If the image batch violates a limit
            NotFoundError: If the author does not exist
        """
        payloads = list(images)
        self.media_service.validate(payloads, MediaScope.POST)

        with logfire.span(
            "post_service.create_post", user_id=user_id, images=len(payloads)
        ):
            post_id = await self.post_repository.create(
                user_id, description, utc_now(), media_pending=bool(payloads)
            )
            if post_id is None:
                logfire.warn("Post author not found", user_id=user_id)
                raise NotFoundError("User", str(user_id))
            logfire.info("Post created", post_id=post_id, user_id=user_id)

            if payloads:
                try:
                    paths = await self.media_service.attach(
                        user_id, post_scope(post_id), payloads
                    )
                    await self.post_repository.set_images(post_id, paths)
                except StorageError as e:
                    logfire.warn(
                        "Post images not attached, post kept with incomplete media",
                        post_id=post_id,
                        error=str(e),
                    )

            return await self.get_post(post_id)

    async def get_post(self, post_id: PostId) -> Post:
        """Get post by ID.

        Raises:
            NotFoundError: If post not found
        """
        with logfire.span("post_service.get_post", post_id=post_id):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Post not found", post_id=post_id)
                raise NotFoundError("Post", str(post_id))
            return post

    async def delete_post(self, user_id: UserId, post_id: PostId) -> None:
        """Delete a post owned by a user, with its POSTED and LIKED edges.

        Raises:
            NotFoundError: If the user has no such post
        """
        with logfire.span("post_service.delete_post", user_id=user_id, post_id=post_id):
            if not await self.post_repository.delete(user_id, post_id):
                logfire.warn("Owned post not found", user_id=user_id, post_id=post_id)
                raise NotFoundError("Post", str(post_id))
            logfire.info("Post deleted", user_id=user_id, post_id=post_id)

