"""In-memory repository implementations for testing."""

from .graph import InMemoryGraph
from .post import InMemoryPostRepository
from .relationship import InMemoryRelationshipRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryGraph",
    "InMemoryPostRepository",
    "InMemoryRelationshipRepository",
    "InMemoryUserRepository",
]
