"""Delete user use case."""

from pydantic import BaseModel

from social.application.usecase.base import BaseUseCase
from social.domain.service import UserService
from social.domain.value import UserId


class DeleteUserRequest(BaseModel):
    """Delete user request."""

    user_id: int


class DeleteUserResponse(BaseModel):
    """Delete user response."""

    user_id: int


class DeleteUserUseCase(BaseUseCase):
    """Use case for deleting a user node (no cascade)."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: DeleteUserRequest) -> DeleteUserResponse:
        """Execute delete user flow.

        Raises:
            NotFoundError: If the user does not exist
            ConflictError: If the user still has posts or edges
        """
        await self.user_service.delete_user(UserId(request.user_id))
        return DeleteUserResponse(user_id=request.user_id)
