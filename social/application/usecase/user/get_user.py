"""Get user use case."""

from typing import Optional

from pydantic import BaseModel, model_validator

from social.application.usecase.base import BaseUseCase
from social.application.usecase.view import UserView, render_user
from social.domain.service import MediaService, UserService
from social.domain.value import UserId


class GetUserRequest(BaseModel):
    """Get user request, by ID or by email."""

    user_id: Optional[int] = None
    email: Optional[str] = None
    with_counts: bool = False  # Only applies to lookups by ID

    @model_validator(mode="after")
    def exactly_one_key(self) -> "GetUserRequest":
        if (self.user_id is None) == (self.email is None):
            raise ValueError("Provide exactly one of user_id or email")
        return self


class GetUserResponse(UserView):
    """Get user response."""


class GetUserUseCase(BaseUseCase):
    """Use case for point lookups of a user."""

    def __init__(self, user_service: UserService, media_service: MediaService) -> None:
        self.user_service = user_service
        self.media_service = media_service

    async def execute(self, request: GetUserRequest) -> GetUserResponse:
        """Execute get user flow.

        Raises:
            NotFoundError: If no user matches
        """
        if request.user_id is not None:
            user = await self.user_service.get_by_id(
                UserId(request.user_id), with_counts=request.with_counts
            )
        else:
            user = await self.user_service.get_by_email(request.email)

        view = await render_user(user, self.media_service)
        return GetUserResponse(**view.model_dump())
