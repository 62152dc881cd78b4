"""Repository interfaces for the social graph.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from social.domain.repository.media import MediaStore
from social.domain.repository.post import PostRepository
from social.domain.repository.relationship import EdgeMutation, RelationshipRepository
from social.domain.repository.user import UserRepository

__all__ = [
    "EdgeMutation",
    "MediaStore",
    "PostRepository",
    "RelationshipRepository",
    "UserRepository",
]
