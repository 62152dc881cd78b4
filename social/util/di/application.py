"""Application layer DI providers."""

from dishka import Scope, provide

from social.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
)
from social.application.usecase.relationship import (
    DislikePostUseCase,
    FollowUserUseCase,
    LikePostUseCase,
    UnfollowUserUseCase,
)
from social.application.usecase.user import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetProfileUseCase,
    GetUserUseCase,
    ListConnectionsUseCase,
    ListUsersUseCase,
    LoginUseCase,
    UpdateUserUseCase,
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


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_create_user_use_case(
        self,
        user_service: UserService,
        media_service: MediaService,
        password_hasher: PasswordHasher,
    ) -> CreateUserUseCase:
        """Provide create user use case."""
        return CreateUserUseCase(
            user_service=user_service,
            media_service=media_service,
            password_hasher=password_hasher,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_user_use_case(
        self, user_service: UserService, media_service: MediaService
    ) -> GetUserUseCase:
        """Provide get user use case."""
        return GetUserUseCase(user_service=user_service, media_service=media_service)

    @provide(scope=Scope.REQUEST)
    def get_list_users_use_case(
        self, user_service: UserService, media_service: MediaService
    ) -> ListUsersUseCase:
        """Provide list users use case."""
        return ListUsersUseCase(user_service=user_service, media_service=media_service)

    @provide(scope=Scope.REQUEST)
    def get_get_profile_use_case(
        self, profile_service: ProfileService, media_service: MediaService
    ) -> GetProfileUseCase:
        """Provide get profile use case."""
        return GetProfileUseCase(
            profile_service=profile_service, media_service=media_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_user_use_case(
        self, user_service: UserService, media_service: MediaService
    ) -> UpdateUserUseCase:
        """Provide update user use case."""
        return UpdateUserUseCase(user_service=user_service, media_service=media_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_user_use_case(self, user_service: UserService) -> DeleteUserUseCase:
        """Provide delete user use case."""
        return DeleteUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_list_connections_use_case(
        self, user_service: UserService, media_service: MediaService
    ) -> ListConnectionsUseCase:
        """Provide list followers/following use case."""
        return ListConnectionsUseCase(
            user_service=user_service, media_service=media_service
        )

    @provide(scope=Scope.REQUEST)
    def get_login_use_case(self, user_service: UserService) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(user_service=user_service)

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(
        self, post_service: PostService, media_service: MediaService
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service, media_service=media_service)

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(
        self, post_service: PostService, media_service: MediaService
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service, media_service=media_service)

    @provide(scope=Scope.REQUEST)
    def get_list_posts_use_case(
        self, profile_service: ProfileService, media_service: MediaService
    ) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(
            profile_service=profile_service, media_service=media_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service)

    # Relationship use cases
    @provide(scope=Scope.REQUEST)
    def get_follow_user_use_case(
        self, relationship_service: RelationshipService
    ) -> FollowUserUseCase:
        """Provide follow user use case."""
        return FollowUserUseCase(relationship_service=relationship_service)

    @provide(scope=Scope.REQUEST)
    def get_unfollow_user_use_case(
        self, relationship_service: RelationshipService
    ) -> UnfollowUserUseCase:
        """Provide unfollow user use case."""
        return UnfollowUserUseCase(relationship_service=relationship_service)

    @provide(scope=Scope.REQUEST)
    def get_like_post_use_case(
        self, relationship_service: RelationshipService
    ) -> LikePostUseCase:
        """Provide like post use case."""
        return LikePostUseCase(relationship_service=relationship_service)

    @provide(scope=Scope.REQUEST)
    def get_dislike_post_use_case(
        self, relationship_service: RelationshipService
    ) -> DislikePostUseCase:
        """Provide dislike post use case."""
        return DislikePostUseCase(relationship_service=relationship_service)
