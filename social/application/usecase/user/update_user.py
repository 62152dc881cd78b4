"""Update user use case."""

from pydantic import BaseModel

from social.application.usecase.base import BaseUseCase
from social.application.usecase.view import UserView, render_user
from social.domain.service import MediaService, UserService
from social.domain.value import UserId


class UpdateUserRequest(BaseModel):
    """Update user request."""

    user_id: int
    name: str
    email: str


class UpdateUserResponse(UserView):
    """Update user response."""


class UpdateUserUseCase(BaseUseCase):
    """Use case for changing a user's name and email."""

    def __init__(self, user_service: UserService, media_service: MediaService) -> None:
        self.user_service = user_service
        self.media_service = media_service

    async def execute(self, request: UpdateUserRequest) -> UpdateUserResponse:
        """Execute update user flow.

        Raises:
            InvalidInputError: If name or email is invalid
            ConflictError: If the email belongs to another user
            NotFoundError: If the user does not exist
        """
        user = await self.user_service.update_user(
            UserId(request.user_id), request.name, request.email
        )
        view = await render_user(user, self.media_service)
        return UpdateUserResponse(**view.model_dump())
