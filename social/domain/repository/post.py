"""Post repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from social.domain.model.post import Post
from social.domain.value import PostId, UserId


class PostRepository(ABC):
    """Repository for Post nodes.

    Defines the contract for post graph operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def create(
        self,
        user_id: UserId,
        description: str,
        created_at: datetime,
        media_pending: bool = False,
    ) -> Optional[PostId]:
        """Create a post node and its POSTED edge in one write.

        Args:
            user_id: Author's user ID
            description: Post text
            created_at: Creation time (UTC)
            media_pending: Whether an image write will follow

        Returns:
            The store-assigned post ID, None if the author does not exist
        """
        pass

    @abstractmethod
    async def set_images(self, post_id: PostId, paths: List[str]) -> None:
        """Set the ordered image paths and clear the pending-media flag.

        Args:
            post_id: The post's ID
            paths: Media store paths in upload order

        Raises:
            NotFoundError: If the post does not exist
        """
        pass

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID, joined with its author and likers.

        Args:
            post_id: The post's ID

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Post]:
        """Find every post, joined with author and likers.

        Returns:
            All posts, newest first
        """
        pass

    @abstractmethod
    async def find_by_author(self, user_id: UserId) -> List[Post]:
        """Find posts by a specific author.

        Args:
            user_id: The author's user ID

        Returns:
            The author's posts, newest first
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId, post_id: PostId) -> bool:
        """Delete a post owned by a user, with every edge touching it.

        Args:
            user_id: The author's user ID
            post_id: The post's ID

        Returns:
            True if the post was deleted, False if no such owned post
        """
        pass
