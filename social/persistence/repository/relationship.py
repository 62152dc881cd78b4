"""Neo4j implementation of Relationship repository.

Both endpoints are matched optionally so a single query reports which
endpoint is missing separately from whether the edge exists.
"""

from social.domain.error import StorageError
from social.domain.repository import EdgeMutation, RelationshipRepository
from social.domain.value import EdgeKind, NodeLabel, PostId, UserId
from social.persistence.codec import record_to_edge_mutation
from social.persistence.graph import GraphClient


def _endpoints(source: NodeLabel, target: NodeLabel) -> str:
    return f"""
        OPTIONAL MATCH (a:{source.value}) WHERE id(a) = $sourceId
        OPTIONAL MATCH (b:{target.value}) WHERE id(b) = $targetId
    """


def merge_edge_query(source: NodeLabel, edge: EdgeKind, target: NodeLabel) -> str:
    """Cypher merging an edge only when both endpoints matched."""
    return _endpoints(source, target) + f"""
        FOREACH (_ IN CASE WHEN a IS NOT NULL AND b IS NOT NULL THEN [1] ELSE [] END |
            MERGE (a)-[:{edge.value}]->(b))
        WITH a, b
        OPTIONAL MATCH (a)-[r:{edge.value}]->(b)
        RETURN a IS NOT NULL AS sourceExists, b IS NOT NULL AS targetExists,
               count(r) AS edges
    """


def delete_edge_query(source: NodeLabel, edge: EdgeKind, target: NodeLabel) -> str:
    """Cypher deleting an edge and counting how many were removed."""
    return _endpoints(source, target) + f"""
        OPTIONAL MATCH (a)-[r:{edge.value}]->(b)
        DELETE r
        RETURN a IS NOT NULL AS sourceExists, b IS NOT NULL AS targetExists,
               count(r) AS edges
    """


_MERGE_FOLLOW = merge_edge_query(NodeLabel.USER, EdgeKind.FOLLOWS, NodeLabel.USER)
_DELETE_FOLLOW = delete_edge_query(NodeLabel.USER, EdgeKind.FOLLOWS, NodeLabel.USER)
_MERGE_LIKE = merge_edge_query(NodeLabel.USER, EdgeKind.LIKED, NodeLabel.POST)
_DELETE_LIKE = delete_edge_query(NodeLabel.USER, EdgeKind.LIKED, NodeLabel.POST)


class Neo4jRelationshipRepository(RelationshipRepository):
    """Neo4j implementation of RelationshipRepository."""

    def __init__(self, graph: GraphClient) -> None:
        """Initialize repository with a graph client.

        Args:
            graph: Shared graph client
        """
        self.graph = graph

    async def _mutate(self, query: str, source_id: int, target_id: int) -> EdgeMutation:
        records = await self.graph.execute(
            query, {"sourceId": source_id, "targetId": target_id}
        )
        if not records:
            raise StorageError("Edge mutation returned no result")
        return record_to_edge_mutation(records[0])

    async def merge_follow(self, source_id: UserId, target_id: UserId) -> EdgeMutation:
        """Create (source)-[:FOLLOWS]->(target) if absent."""
        return await self._mutate(_MERGE_FOLLOW, source_id, target_id)

    async def delete_follow(
        self, source_id: UserId, target_id: UserId
    ) -> EdgeMutation:
        """Delete (source)-[:FOLLOWS]->(target) if present."""
        return await self._mutate(_DELETE_FOLLOW, source_id, target_id)

    async def merge_like(self, user_id: UserId, post_id: PostId) -> EdgeMutation:
        """Create (user)-[:LIKED]->(post) if absent."""
        return await self._mutate(_MERGE_LIKE, user_id, post_id)

    async def delete_like(self, user_id: UserId, post_id: PostId) -> EdgeMutation:
        """Delete (user)-[:LIKED]->(post) if present."""
        return await self._mutate(_DELETE_LIKE, user_id, post_id)
