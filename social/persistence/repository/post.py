"""Neo4j implementation of Post repository."""

from datetime import datetime
from typing import List, Optional

from social.domain.error import NotFoundError
from social.domain.model import Post
from social.domain.repository import PostRepository
from social.domain.value import PostId, UserId
from social.persistence.codec import post_to_properties, record_to_id, record_to_post
from social.persistence.graph import GraphClient

# Author and distinct likers are joined in the same traversal as the post
_PROJECTION = """
    OPTIONAL MATCH (liker:User)-[:LIKED]->(p)
    WITH u, p, collect(DISTINCT id(liker)) AS likes
    RETURN id(p) AS id, properties(p) AS props,
           id(u) AS userId, u.name AS userName, likes
    ORDER BY props.created_at DESC, id DESC
"""


class Neo4jPostRepository(PostRepository):
    """Neo4j implementation of PostRepository."""

    def __init__(self, graph: GraphClient) -> None:
        """Initialize repository with a graph client.

        Args:
            graph: Shared graph client
        """
        self.graph = graph

    async def create(
        self,
        user_id: UserId,
        description: str,
        created_at: datetime,
        media_pending: bool = False,
    ) -> Optional[PostId]:
        """Create a post node and its POSTED edge in one write."""
        records = await self.graph.execute(
            """
            MATCH (u:User) WHERE id(u) = $userId
            CREATE (p:Post $props)
            CREATE (u)-[:POSTED]->(p)
            RETURN id(p) AS id
            """,
            {
                "userId": user_id,
                "props": post_to_properties(description, created_at, media_pending),
            },
        )
        return PostId(record_to_id(records[0])) if records else None

    async def set_images(self, post_id: PostId, paths: List[str]) -> None:
        """Set the ordered image paths and clear the pending-media flag."""
        records = await self.graph.execute(
            """
            MATCH (p:Post) WHERE id(p) = $id
            SET p.images = $images, p.media_pending = false
            RETURN id(p) AS id
            """,
            {"id": post_id, "images": list(paths)},
        )
        if not records:
            raise NotFoundError("Post", str(post_id))

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID, joined with its author and likers."""
        records = await self.graph.execute(
            "MATCH (u:User)-[:POSTED]->(p:Post) WHERE id(p) = $id" + _PROJECTION,
            {"id": post_id},
        )
        return record_to_post(records[0]) if records else None

    async def find_all(self) -> List[Post]:
        """Find every post, joined with author and likers."""
        records = await self.graph.execute(
            "MATCH (u:User)-[:POSTED]->(p:Post)" + _PROJECTION
        )
        return [record_to_post(record) for record in records]

    async def find_by_author(self, user_id: UserId) -> List[Post]:
        """Find posts by a specific author."""
        records = await self.graph.execute(
            "MATCH (u:User)-[:POSTED]->(p:Post) WHERE id(u) = $id" + _PROJECTION,
            {"id": user_id},
        )
        return [record_to_post(record) for record in records]

    async def delete(self, user_id: UserId, post_id: PostId) -> bool:
        """Delete a post owned by a user, with every edge touching it.

        DETACH DELETE removes the POSTED edge and all LIKED edges in the
        same write as the node.
        """
        records = await self.graph.execute(
            """
            MATCH (u:User)-[:POSTED]->(p:Post)
            WHERE id(u) = $userId AND id(p) = $postId
            DETACH DELETE p
            RETURN count(*) AS deleted
            """,
            {"userId": user_id, "postId": post_id},
        )
        return bool(records) and record_to_id(records[0], "deleted") > 0
