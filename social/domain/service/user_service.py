"""User domain service."""

from typing import List, Optional

import logfire
from pydantic import ValidationError

from social.domain.error import (
    ConflictError,
    InvalidCredentialsError,
    InvalidInputError,
    NotFoundError,
    StorageError,
)
from social.domain.model import User
from social.domain.repository import UserRepository
from social.domain.repository.media import PROFILE_SCOPE
from social.domain.service.base import Service
from social.domain.service.media_service import MediaService
from social.domain.value import Email, MediaScope, UserId
from social.util.password import PasswordHasher


def normalize_email(email: str) -> str:
    """Trim and validate an email address, raising InvalidInputError if malformed."""
    try:
        return Email(email).root
    except ValidationError as e:
        raise InvalidInputError(f"Invalid email: {email!r}") from e


def require_name(name: str) -> str:
    name = name.strip()
    if not name:
        raise InvalidInputError("Name must not be empty")
    return name


class UserService(Service):
    """Domain service for user operations."""

    def __init__(
        self,
        user_repository: UserRepository,
        media_service: MediaService,
        password_hasher: PasswordHasher,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            media_service: Media attachment service
            password_hasher: Hasher used to check credentials
        """
        self.user_repository = user_repository
        self.media_service = media_service
        self.password_hasher = password_hasher

    async def create_user(
        self,
        name: str,
        email: str,
        password_hash: str,
        image: Optional[bytes] = None,
    ) -> User:
        """Create a user, then attach the optional profile image.

        The image is validated before the node exists. Once the node is
        created it is never rolled back: if the image write fails the user
        is returned with ``has_incomplete_media`` set.

        Args:
            name: Display name
            email: Email address, trimmed and stored with its case
            password_hash: Hashed credential
            image: Optional profile image bytes

        Returns:
            Created user

        Raises:
            InvalidInputError: If a field or the image is invalid
            ConflictError: If the email is already taken
        """
        name = require_name(name)
        email = normalize_email(email)
        payloads = [image] if image is not None else []
        self.media_service.validate(payloads, MediaScope.PROFILE)

        with logfire.span("user_service.create_user", email=email):
            # Pre-check only; concurrent creations can still both pass
            if await self.user_repository.email_exists(email):
                logfire.warn("Email already in use", email=email)
                raise ConflictError(f"Email already in use: {email}")

            user_id = await self.user_repository.create(
                name, email, password_hash, media_pending=bool(payloads)
            )
            logfire.info("User created", user_id=user_id)

            if payloads:
                try:
                    paths = await self.media_service.attach(
                        user_id, PROFILE_SCOPE, payloads
                    )
                    await self.user_repository.set_image(user_id, paths[0])
                except StorageError as e:
                    logfire.warn(
                        "Profile image not attached, user kept with incomplete media",
                        user_id=user_id,
                        error=str(e),
                    )

            return await self.get_by_id(user_id)

    async def get_by_id(self, user_id: UserId, with_counts: bool = False) -> User:
        """Get user by ID.

        Args:
            user_id: User ID
            with_counts: Whether to include follower, following and post counts

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=user_id):
            user = await self.user_repository.find_by_id(user_id, with_counts)
            if not user:
                logfire.warn("User not found", user_id=user_id)
                raise NotFoundError("User", str(user_id))
            return user

    async def get_by_email(self, email: str) -> User:
        """Get user by email.

        Raises:
            NotFoundError: If no user has this email
        """
        email = normalize_email(email)
        with logfire.span("user_service.get_by_email", email=email):
            user = await self.user_repository.find_by_email(email)
            if not user:
                logfire.warn("User not found", email=email)
                raise NotFoundError("User", email)
            return user

    async def list_users(self) -> List[User]:
        """List all users with their aggregate counts."""
        with logfire.span("user_service.list_users"):
            return await self.user_repository.find_all()

    async def update_user(self, user_id: UserId, name: str, email: str) -> User:
        """Update a user's name and email.

        Args:
            user_id: User ID
            name: New display name
            email: New email address

        Returns:
            Updated user

        Raises:
            InvalidInputError: If name or email is invalid
            ConflictError: If the email belongs to another user
            NotFoundError: If user not found
        """
        name = require_name(name)
        email = normalize_email(email)
        with logfire.span("user_service.update_user", user_id=user_id):
            owner = await self.user_repository.find_by_email(email)
            if owner is not None and owner.id != user_id:
                logfire.warn("Email already in use", email=email, user_id=user_id)
                raise ConflictError(f"Email already in use: {email}")

            user = await self.user_repository.update(user_id, name, email)
            if not user:
                raise NotFoundError("User", str(user_id))
            logfire.info("User updated", user_id=user_id)
            return user

    async def delete_user(self, user_id: UserId) -> None:
        """Delete a user node.

        Posts and edges are not cascaded.

        Raises:
            NotFoundError: If user not found
            ConflictError: If the user still has relationships
        """
        with logfire.span("user_service.delete_user", user_id=user_id):
            if not await self.user_repository.delete(user_id):
                raise NotFoundError("User", str(user_id))
            logfire.info("User deleted", user_id=user_id)

    async def list_followers(self, user_id: UserId) -> List[User]:
        """List users following a user.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.list_followers", user_id=user_id):
            followers = await self.user_repository.find_followers(user_id)
            if followers is None:
                raise NotFoundError("User", str(user_id))
            return followers

    async def list_following(self, user_id: UserId) -> List[User]:
        """List users a user follows.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.list_following", user_id=user_id):
            following = await self.user_repository.find_following(user_id)
            if following is None:
                raise NotFoundError("User", str(user_id))
            return following

    async def authenticate(self, email: str, password: str) -> User:
        """Check an email/password pair.

        Unknown email and wrong password fail the same way.

        Raises:
            InvalidCredentialsError: If the pair does not authenticate
        """
        try:
            email = normalize_email(email)
        except InvalidInputError as e:
            raise InvalidCredentialsError() from e

        with logfire.span("user_service.authenticate", email=email):
            user = await self.user_repository.find_by_email(email)
            if user is None or not self.password_hasher.verify(
                password, user.password_hash
            ):
                logfire.warn("Authentication failed", email=email)
                raise InvalidCredentialsError()
            logfire.info("User authenticated", user_id=user.id)
            return user
