"""Relationship use cases."""

from .dislike_post import DislikePostRequest, DislikePostResponse, DislikePostUseCase
from .follow_user import FollowUserRequest, FollowUserResponse, FollowUserUseCase
from .like_post import LikePostRequest, LikePostResponse, LikePostUseCase
from .unfollow_user import UnfollowUserRequest, UnfollowUserResponse, UnfollowUserUseCase

__all__ = [
    "DislikePostRequest",
    "DislikePostResponse",
    "DislikePostUseCase",
    "FollowUserRequest",
    "FollowUserResponse",
    "FollowUserUseCase",
    "LikePostRequest",
    "LikePostResponse",
    "LikePostUseCase",
    "UnfollowUserRequest",
    "UnfollowUserResponse",
    "UnfollowUserUseCase",
]
