"""List users use case."""

from pydantic import BaseModel

from social.application.usecase.base import BaseUseCase
from social.application.usecase.view import UserView, render_user
from social.domain.service import MediaService, UserService


class ListUsersRequest(BaseModel):
    """List users request."""


class ListUsersResponse(BaseModel):
    """List users response."""

    users: list[UserView]


class ListUsersUseCase(BaseUseCase):
    """Use case for listing every user with aggregate counts."""

    def __init__(self, user_service: UserService, media_service: MediaService) -> None:
        self.user_service = user_service
        self.media_service = media_service

    async def execute(self, request: ListUsersRequest) -> ListUsersResponse:
        users = await self.user_service.list_users()
        return ListUsersResponse(
            users=[await render_user(user, self.media_service) for user in users]
        )
