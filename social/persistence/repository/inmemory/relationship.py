"""In-memory relationship repository for testing."""

from typing import Dict

from social.domain.repository import EdgeMutation, RelationshipRepository
from social.domain.value import EdgeKind, PostId, UserId

from .graph import InMemoryGraph


class InMemoryRelationshipRepository(RelationshipRepository):
    """In-memory implementation of RelationshipRepository for testing."""

    def __init__(self, graph: InMemoryGraph) -> None:
        self.graph = graph

    def _merge(
        self, kind: EdgeKind, source: int, target: int, targets: Dict[int, dict]
    ) -> EdgeMutation:
        source_exists = source in self.graph.users
        target_exists = target in targets
        if source_exists and target_exists and not self.graph.has_edge(kind, source, target):
            self.graph.edges.append((kind, source, target))
        return EdgeMutation(
            source_exists=source_exists,
            target_exists=target_exists,
            edges=int(self.graph.has_edge(kind, source, target)),
        )

    def _delete(
        self, kind: EdgeKind, source: int, target: int, targets: Dict[int, dict]
    ) -> EdgeMutation:
        before = len(self.graph.edges)
        self.graph.edges = [e for e in self.graph.edges if e != (kind, source, target)]
        return EdgeMutation(
            source_exists=source in self.graph.users,
            target_exists=target in targets,
            edges=before - len(self.graph.edges),
        )

    async def merge_follow(self, source_id: UserId, target_id: UserId) -> EdgeMutation:
        """Create (source)-[:FOLLOWS]->(target) if absent."""
        return self._merge(EdgeKind.FOLLOWS, source_id, target_id, self.graph.users)

    async def delete_follow(
        self, source_id: UserId, target_id: UserId
    ) -> EdgeMutation:
        """Delete (source)-[:FOLLOWS]->(target) if present."""
        return self._delete(EdgeKind.FOLLOWS, source_id, target_id, self.graph.users)

    async def merge_like(self, user_id: UserId, post_id: PostId) -> EdgeMutation:
        """Create (user)-[:LIKED]->(post) if absent."""
        return self._merge(EdgeKind.LIKED, user_id, post_id, self.graph.posts)

    async def delete_like(self, user_id: UserId, post_id: PostId) -> EdgeMutation:
        """Delete (user)-[:LIKED]->(post) if present."""
        return self._delete(EdgeKind.LIKED, user_id, post_id, self.graph.posts)
