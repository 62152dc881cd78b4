"""Domain layer DI providers."""

from dishka import Scope, provide

from social.config import MediaSettings
from social.domain.repository import (
    MediaStore,
    PostRepository,
    RelationshipRepository,
    UserRepository,
)
from social.domain.service import (
    MediaService,
    PostService,
    ProfileService,
    RelationshipService,
    UserService,
)
from social.util.di.base import ProviderBase
from social.util.password import PasswordHasher


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with the repository lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_media_service(
        self, media_store: MediaStore, media_settings: MediaSettings
    ) -> MediaService:
        """Provide media attachment domain service."""
        return MediaService(media_store=media_store, media_settings=media_settings)

    @provide
    def get_user_service(
        self,
        user_repository: UserRepository,
        media_service: MediaService,
        password_hasher: PasswordHasher,
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository,
            media_service=media_service,
            password_hasher=password_hasher,
        )

    @provide
    def get_post_service(
        self, post_repository: PostRepository, media_service: MediaService
    ) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository, media_service=media_service)

    @provide
    def get_relationship_service(
        self, relationship_repository: RelationshipRepository
    ) -> RelationshipService:
        """Provide relationship domain service."""
        return RelationshipService(relationship_repository=relationship_repository)

    @provide
    def get_profile_service(
        self, user_repository: UserRepository, post_repository: PostRepository
    ) -> ProfileService:
        """Provide profile/feed composition service."""
        return ProfileService(
            user_repository=user_repository, post_repository=post_repository
        )
