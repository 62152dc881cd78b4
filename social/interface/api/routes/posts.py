"""Post routes."""

from typing import Optional

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, File, Form, UploadFile, status

from social.application.usecase.post import (
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
)
from social.application.usecase.view import PostView
from social.config import MediaSettings
from social.domain.error import InvalidInputError
from social.interface.api.uploads import read_upload

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


@router.post(
    "",
    response_model=CreatePostResponse,
    status_code=status.HTTP_201_CREATED,
    response_model_by_alias=True,
)
async def create_post(
    create_post_use_case: FromDishka[CreatePostUseCase],
    media_settings: FromDishka[MediaSettings],
    user_id: int = Form(),
    description: str = Form(default=""),
    images: Optional[list[UploadFile]] = File(default=None),
) -> CreatePostResponse:
    """Create a post from a multipart form with up to 20 images.

    Raises:
        InvalidInputError: Mapped to 400 for an over-quota or oversized batch
        NotFoundError: Mapped to 404 when the author does not exist
    """
    uploads = images or []
    # Refuse over-quota batches before buffering any of them
    if len(uploads) > media_settings.max_post_images:
        raise InvalidInputError(
            f"Too many images: {len(uploads)} given, "
            f"at most {media_settings.max_post_images} allowed"
        )
    payloads = [
        await read_upload(upload, media_settings.max_image_bytes) for upload in uploads
    ]
    logfire.info("Post upload received", user_id=user_id, images=len(payloads))

    return await create_post_use_case.execute(
        CreatePostRequest(user_id=user_id, description=description, images=payloads)
    )


@router.get("", response_model=list[PostView], response_model_by_alias=True)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
) -> list[PostView]:
    """List every post with author and likers, newest first."""
    result = await list_posts_use_case.execute(ListPostsRequest())
    return result.posts


@router.get("/{post_id}", response_model=GetPostResponse, response_model_by_alias=True)
async def get_post(
    post_id: int, get_post_use_case: FromDishka[GetPostUseCase]
) -> GetPostResponse:
    """Get a single post with author and likers."""
    return await get_post_use_case.execute(GetPostRequest(post_id=post_id))
