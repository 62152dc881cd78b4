"""Create user use case."""

from typing import Optional

from pydantic import BaseModel

from social.application.usecase.base import BaseUseCase
from social.application.usecase.view import UserView, render_user
from social.domain.error import InvalidInputError
from social.domain.service import MediaService, UserService
from social.util.password import PasswordHasher


class CreateUserRequest(BaseModel):
    """Create user request."""

    name: str
    email: str
    password: str
    image: Optional[bytes] = None  # Profile picture, at most one


class CreateUserResponse(UserView):
    """Create user response."""


class CreateUserUseCase(BaseUseCase):
    """Use case for registering a user with an optional profile image."""

    def __init__(
        self,
        user_service: UserService,
        media_service: MediaService,
        password_hasher: PasswordHasher,
    ) -> None:
        """Initialize create user use case.

        Args:
            user_service: User domain service
            media_service: Media service used to render the image back
            password_hasher: Hasher for the submitted password
        """
        self.user_service = user_service
        self.media_service = media_service
        self.password_hasher = password_hasher

    async def execute(self, request: CreateUserRequest) -> CreateUserResponse:
        """Execute create user flow.

        Steps:
        1. Hash the password
        2. Create the user node, then attach the image (via UserService)
        3. Render the stored user

        Raises:
            InvalidInputError: If a field or the image is invalid
            ConflictError: If the email is already taken
        """
        if not request.password:
            raise InvalidInputError("Password must not be empty")
        try:
            password_hash = self.password_hasher.hash(request.password)
        except ValueError as e:
            raise InvalidInputError(str(e)) from e

        user = await self.user_service.create_user(
            name=request.name,
            email=request.email,
            password_hash=password_hash,
            image=request.image,
        )
        view = await render_user(user, self.media_service)
        return CreateUserResponse(**view.model_dump())
