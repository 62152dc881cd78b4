"""Profile and feed composition service."""

from typing import List, Optional

import logfire

from social.domain.error import NotFoundError
from social.domain.model import Post, User
from social.domain.repository import PostRepository, UserRepository
from social.domain.service.base import Service
from social.domain.value import UserId


class ProfileService(Service):
    """Read-side service joining entities with their aggregates.

    Each read is a single graph query; aggregates are never assembled from
    follow-up queries per entity.
    """

    def __init__(
        self, user_repository: UserRepository, post_repository: PostRepository
    ) -> None:
        self.user_repository = user_repository
        self.post_repository = post_repository

    async def get_profile(
        self, profile_id: UserId, viewer_id: Optional[UserId] = None
    ) -> User:
        """Get a user's profile as seen by a viewer.

        Args:
            profile_id: Profile owner's user ID
            viewer_id: Requesting user's ID; a missing or unknown viewer
                yields false follow flags, never an error

        Returns:
            User with post count, follower and following counts, and the
            follow flags between viewer and profile

        Raises:
            NotFoundError: If the profile owner does not exist
        """
        with logfire.span(
            "profile_service.get_profile", profile_id=profile_id, viewer_id=viewer_id
        ):
            user = await self.user_repository.find_profile(profile_id, viewer_id)
            if not user:
                logfire.warn("Profile not found", profile_id=profile_id)
                raise NotFoundError("User", str(profile_id))
            return user

    async def list_feed(self) -> List[Post]:
        """List every post with author and likers, newest first."""
        with logfire.span("profile_service.list_feed"):
            posts = await self.post_repository.find_all()
            logfire.info("Feed listed", count=len(posts))
            return posts

    async def list_posts_by_author(self, user_id: UserId) -> List[Post]:
        """List a user's posts, newest first.

        Raises:
            NotFoundError: If the user does not exist
        """
        with logfire.span("profile_service.list_posts_by_author", user_id=user_id):
            if not await self.user_repository.find_by_id(user_id):
                raise NotFoundError("User", str(user_id))
            return await self.post_repository.find_by_author(user_id)
