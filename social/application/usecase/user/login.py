"""Login use case."""

from pydantic import BaseModel

from social.application.usecase.base import BaseUseCase
from social.application.usecase.view import UserView
from social.domain.service import UserService


class LoginRequest(BaseModel):
    """Login request."""

    email: str
    password: str


class LoginResponse(UserView):
    """Login response (identity only, no image or counts)."""


class LoginUseCase(BaseUseCase):
    """Use case for checking credentials."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Raises:
            InvalidCredentialsError: If the email/password pair is wrong
        """
        user = await self.user_service.authenticate(request.email, request.password)
        return LoginResponse(id=user.id, name=user.name, email=user.email)
