"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from social.application.usecase.user import LoginRequest, LoginResponse, LoginUseCase

router = APIRouter(prefix="/auth", tags=["auth"], route_class=DishkaRoute)


@router.post(
    "/login",
    response_model=LoginResponse,
    response_model_by_alias=True,
    response_model_exclude_none=True,
)
async def login(
    request: LoginRequest, login_use_case: FromDishka[LoginUseCase]
) -> LoginResponse:
    """Check an email/password pair.

    Returns:
        The authenticated user's id, name and email

    Raises:
        InvalidCredentialsError: Mapped to 401
    """
    return await login_use_case.execute(request)
