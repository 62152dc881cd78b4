"""Domain services."""

from .base import Service
from .media_service import MediaService
from .post_service import PostService
from .profile_service import ProfileService
from .relationship_service import RelationshipService
from .user_service import UserService

__all__ = [
    "MediaService",
    "PostService",
    "ProfileService",
    "RelationshipService",
    "Service",
    "UserService",
]
