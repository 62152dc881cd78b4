"""Neo4j repository implementations."""

from social.persistence.repository.post import Neo4jPostRepository
from social.persistence.repository.relationship import Neo4jRelationshipRepository
from social.persistence.repository.user import Neo4jUserRepository

__all__ = [
    "Neo4jUserRepository",
    "Neo4jPostRepository",
    "Neo4jRelationshipRepository",
]
