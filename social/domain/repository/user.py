"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from social.domain.model.user import User
from social.domain.value import UserId


class UserRepository(ABC):
    """Repository for User nodes.

    Defines the contract for user graph operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def email_exists(self, email: str) -> bool:
        """Check whether any user already uses an email.

        This is a pre-check, not a store constraint: two concurrent
        creations with the same email can both observe False.

        Args:
            email: Normalised email address

        Returns:
            True if a user with this email exists
        """
        pass

    @abstractmethod
    async def create(
        self,
        name: str,
        email: str,
        password_hash: str,
        media_pending: bool = False,
    ) -> UserId:
        """Create a user node.

        Args:
            name: Display name
            email: Normalised email address
            password_hash: Hashed credential, stored opaquely
            media_pending: Whether a profile image write will follow

        Returns:
            The store-assigned user ID
        """
        pass

    @abstractmethod
    async def set_image(self, user_id: UserId, path: str) -> None:
        """Set the profile image path and clear the pending-media flag.

        Args:
            user_id: The user's ID
            path: Media store path of the written image

        Raises:
            NotFoundError: If the user does not exist
        """
        pass

    @abstractmethod
    async def find_by_id(
        self, user_id: UserId, with_counts: bool = False
    ) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's ID
            with_counts: Whether to project follower, following and post
                counts in the same query

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email.

        Args:
            email: Normalised email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[User]:
        """Find all users with their aggregate counts.

        Returns:
            All users, each with followers, following and post_count set
        """
        pass

    @abstractmethod
    async def find_profile(
        self, profile_id: UserId, viewer_id: Optional[UserId]
    ) -> Optional[User]:
        """Find a user with all aggregates and the viewer's follow flag.

        Args:
            profile_id: The profile owner's ID
            viewer_id: The requesting user's ID, if any

        Returns:
            The user with counts and is_follower set, None if not found
        """
        pass

    @abstractmethod
    async def find_followers(self, user_id: UserId) -> Optional[List[User]]:
        """Find users following a user.

        Args:
            user_id: The followed user's ID

        Returns:
            Followers (possibly empty), None if the user does not exist
        """
        pass

    @abstractmethod
    async def find_following(self, user_id: UserId) -> Optional[List[User]]:
        """Find users a user follows.

        Args:
            user_id: The following user's ID

        Returns:
            Followed users (possibly empty), None if the user does not exist
        """
        pass

    @abstractmethod
    async def update(self, user_id: UserId, name: str, email: str) -> Optional[User]:
        """Update a user's name and email.

        Args:
            user_id: The user's ID
            name: New display name
            email: New normalised email address

        Returns:
            Updated user, or None if the user does not exist
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId) -> bool:
        """Delete a user node without cascading to posts or edges.

        Args:
            user_id: The user's ID

        Returns:
            True if a node was deleted, False if none matched

        Raises:
            ConflictError: If the store refuses because edges remain
        """
        pass
