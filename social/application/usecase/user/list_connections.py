"""List followers / following use case."""

from enum import Enum

from pydantic import BaseModel

from social.application.usecase.base import BaseUseCase
from social.application.usecase.view import UserView, render_user
from social.domain.service import MediaService, UserService
from social.domain.value import UserId


class ConnectionDirection(str, Enum):
    """Which side of the FOLLOWS edges to list."""

    FOLLOWERS = "followers"
    FOLLOWING = "following"


class ListConnectionsRequest(BaseModel):
    """List connections request."""

    user_id: int
    direction: ConnectionDirection


class ListConnectionsResponse(BaseModel):
    """List connections response."""

    users: list[UserView]


class ListConnectionsUseCase(BaseUseCase):
    """Use case for listing a user's followers or followed users."""

    def __init__(self, user_service: UserService, media_service: MediaService) -> None:
        self.user_service = user_service
        self.media_service = media_service

    async def execute(self, request: ListConnectionsRequest) -> ListConnectionsResponse:
        """Execute list connections flow.

        Raises:
            NotFoundError: If the user does not exist
        """
        user_id = UserId(request.user_id)
        if request.direction == ConnectionDirection.FOLLOWERS:
            users = await self.user_service.list_followers(user_id)
        else:
            users = await self.user_service.list_following(user_id)

        return ListConnectionsResponse(
            users=[await render_user(user, self.media_service) for user in users]
        )
