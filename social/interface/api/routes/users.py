"""User routes.

Covers user nodes and the edges a user originates: follows, likes and
owned posts.
"""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, File, Form, Response, UploadFile, status
from pydantic import BaseModel

from social.application.usecase.post import (
    DeletePostRequest,
    DeletePostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
)
from social.application.usecase.relationship import (
    DislikePostRequest,
    DislikePostUseCase,
    FollowUserRequest,
    FollowUserResponse,
    FollowUserUseCase,
    LikePostRequest,
    LikePostResponse,
    LikePostUseCase,
    UnfollowUserRequest,
    UnfollowUserUseCase,
)
from social.application.usecase.user import (
    ConnectionDirection,
    CreateUserRequest,
    CreateUserResponse,
    CreateUserUseCase,
    DeleteUserRequest,
    DeleteUserUseCase,
    GetProfileRequest,
    GetProfileResponse,
    GetProfileUseCase,
    GetUserRequest,
    GetUserResponse,
    GetUserUseCase,
    ListConnectionsRequest,
    ListConnectionsUseCase,
    ListUsersRequest,
    ListUsersUseCase,
    UpdateUserRequest,
    UpdateUserResponse,
    UpdateUserUseCase,
)
from social.application.usecase.view import PostView, UserView
from social.config import MediaSettings
from social.interface.api.uploads import read_upload

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)

# Emitted shapes omit unset optional fields (image, counts, follow flags)
_SHAPE = {"response_model_by_alias": True, "response_model_exclude_none": True}


class UpdateUserAPIRequest(BaseModel):
    """API request for updating a user."""

    name: str
    email: str


@router.post(
    "",
    response_model=CreateUserResponse,
    status_code=status.HTTP_201_CREATED,
    **_SHAPE,
)
async def create_user(
    create_user_use_case: FromDishka[CreateUserUseCase],
    media_settings: FromDishka[MediaSettings],
    name: str = Form(),
    email: str = Form(),
    password: str = Form(),
    image: Optional[UploadFile] = File(default=None),
) -> CreateUserResponse:
    """Register a user from a multipart form with an optional profile image.

    Raises:
        InvalidInputError: Mapped to 400
        ConflictError: Mapped to 409 when the email is taken
    """
    data = None
    if image is not None:
        data = await read_upload(image, media_settings.max_image_bytes)

    return await create_user_use_case.execute(
        CreateUserRequest(name=name, email=email, password=password, image=data)
    )


@router.get("", response_model=list[UserView], **_SHAPE)
async def list_users(
    list_users_use_case: FromDishka[ListUsersUseCase],
) -> list[UserView]:
    """List all users with follower, following and post counts."""
    result = await list_users_use_case.execute(ListUsersRequest())
    return result.users


@router.get("/by-email", response_model=GetUserResponse, **_SHAPE)
async def get_user_by_email(
    email: str, get_user_use_case: FromDishka[GetUserUseCase]
) -> GetUserResponse:
    """Look a user up by email."""
    return await get_user_use_case.execute(GetUserRequest(email=email))


@router.get("/{user_id}", response_model=GetUserResponse, **_SHAPE)
async def get_user(
    user_id: int,
    get_user_use_case: FromDishka[GetUserUseCase],
    with_counts: bool = False,
) -> GetUserResponse:
    """Look a user up by ID, optionally with aggregate counts."""
    return await get_user_use_case.execute(
        GetUserRequest(user_id=user_id, with_counts=with_counts)
    )


@router.get("/{user_id}/profile", response_model=GetProfileResponse, **_SHAPE)
async def get_profile(
    user_id: int,
    get_profile_use_case: FromDishka[GetProfileUseCase],
    viewer_id: Optional[int] = None,
) -> GetProfileResponse:
    """Get a profile with counts and the follow flags relative to the viewer."""
    return await get_profile_use_case.execute(
        GetProfileRequest(profile_id=user_id, viewer_id=viewer_id)
    )


@router.put("/{user_id}", response_model=UpdateUserResponse, **_SHAPE)
async def update_user(
    user_id: int,
    request: UpdateUserAPIRequest,
    update_user_use_case: FromDishka[UpdateUserUseCase],
) -> UpdateUserResponse:
    """Change a user's name and email."""
    return await update_user_use_case.execute(
        UpdateUserRequest(user_id=user_id, name=request.name, email=request.email)
    )


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: int, delete_user_use_case: FromDishka[DeleteUserUseCase]
) -> Response:
    """Delete a user node. Fails with 409 while the user still has edges."""
    await delete_user_use_case.execute(DeleteUserRequest(user_id=user_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{user_id}/followers", response_model=list[UserView], **_SHAPE)
async def list_followers(
    user_id: int, list_connections_use_case: FromDishka[ListConnectionsUseCase]
) -> list[UserView]:
    """List users following this user."""
    result = await list_connections_use_case.execute(
        ListConnectionsRequest(user_id=user_id, direction=ConnectionDirection.FOLLOWERS)
    )
    return result.users


@router.get("/{user_id}/following", response_model=list[UserView], **_SHAPE)
async def list_following(
    user_id: int, list_connections_use_case: FromDishka[ListConnectionsUseCase]
) -> list[UserView]:
    """List users this user follows."""
    result = await list_connections_use_case.execute(
        ListConnectionsRequest(user_id=user_id, direction=ConnectionDirection.FOLLOWING)
    )
    return result.users


@router.put("/{user_id}/following/{target_id}", response_model=FollowUserResponse)
async def follow_user(
    user_id: int,
    target_id: int,
    follow_user_use_case: FromDishka[FollowUserUseCase],
) -> FollowUserResponse:
    """Follow another user. Repeating the call is a no-op."""
    return await follow_user_use_case.execute(
        FollowUserRequest(source_id=user_id, target_id=target_id)
    )


@router.delete(
    "/{user_id}/following/{target_id}", status_code=status.HTTP_204_NO_CONTENT
)
async def unfollow_user(
    user_id: int,
    target_id: int,
    unfollow_user_use_case: FromDishka[UnfollowUserUseCase],
) -> Response:
    """Stop following a user. 404 if there was no follow."""
    await unfollow_user_use_case.execute(
        UnfollowUserRequest(source_id=user_id, target_id=target_id)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/{user_id}/likes/{post_id}", response_model=LikePostResponse)
async def like_post(
    user_id: int,
    post_id: int,
    like_post_use_case: FromDishka[LikePostUseCase],
) -> LikePostResponse:
    """Like a post. Repeating the call is a no-op."""
    return await like_post_use_case.execute(
        LikePostRequest(user_id=user_id, post_id=post_id)
    )


@router.delete("/{user_id}/likes/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def dislike_post(
    user_id: int,
    post_id: int,
    dislike_post_use_case: FromDishka[DislikePostUseCase],
) -> Response:
    """Remove a like. 404 if the user had not liked the post."""
    await dislike_post_use_case.execute(
        DislikePostRequest(user_id=user_id, post_id=post_id)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{user_id}/posts", response_model=list[PostView], **_SHAPE)
async def list_user_posts(
    user_id: int, list_posts_use_case: FromDishka[ListPostsUseCase]
) -> list[PostView]:
    """List a user's posts, newest first."""
    result = await list_posts_use_case.execute(ListPostsRequest(author_id=user_id))
    return result.posts


@router.delete("/{user_id}/posts/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    user_id: int,
    post_id: int,
    delete_post_use_case: FromDishka[DeletePostUseCase],
) -> Response:
    """Delete a post owned by this user, with all its likes."""
    await delete_post_use_case.execute(
        DeletePostRequest(user_id=user_id, post_id=post_id)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
