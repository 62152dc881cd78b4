"""Relationship repository interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from social.domain.value import PostId, UserId


@dataclass(frozen=True)
class EdgeMutation:
    """Outcome of merging or deleting a FOLLOWS or LIKED edge.

    Endpoint existence is reported separately from the edge count so callers
    can tell a missing node from a missing relationship.
    """

    source_exists: bool
    target_exists: bool
    edges: int  # Edges present after a merge, or removed by a delete

    @property
    def endpoints_exist(self) -> bool:
        return self.source_exists and self.target_exists


class RelationshipRepository(ABC):
    """Repository for FOLLOWS and LIKED edges.

    Merges are idempotent: repeating one leaves exactly one edge.
    """

    @abstractmethod
    async def merge_follow(self, source_id: UserId, target_id: UserId) -> EdgeMutation:
        """Create (source)-[:FOLLOWS]->(target) if absent."""
        pass

    @abstractmethod
    async def delete_follow(
        self, source_id: UserId, target_id: UserId
    ) -> EdgeMutation:
        """Delete (source)-[:FOLLOWS]->(target) if present."""
        pass

    @abstractmethod
    async def merge_like(self, user_id: UserId, post_id: PostId) -> EdgeMutation:
        """Create (user)-[:LIKED]->(post) if absent."""
        pass

    @abstractmethod
    async def delete_like(self, user_id: UserId, post_id: PostId) -> EdgeMutation:
        """Delete (user)-[:LIKED]->(post) if present."""
        pass
