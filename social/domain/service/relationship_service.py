"""Relationship domain service (FOLLOWS and LIKED edges)."""

import logfire

from social.domain.error import NotFoundError, RelationshipNotFoundError
from social.domain.repository import EdgeMutation, RelationshipRepository
from social.domain.service.base import Service
from social.domain.value import EdgeKind, PostId, UserId


def _require_endpoints(
    mutation: EdgeMutation,
    source: tuple[str, int],
    target: tuple[str, int],
) -> None:
    if not mutation.source_exists:
        raise NotFoundError(source[0], str(source[1]))
    if not mutation.target_exists:
        raise NotFoundError(target[0], str(target[1]))


class RelationshipService(Service):
    """Domain service for follow and like edges.

    Adding an edge is idempotent. Removing one that is not there raises
    RelationshipNotFoundError, which callers can tell apart from a missing
    endpoint.
    """

    def __init__(self, relationship_repository: RelationshipRepository) -> None:
        """Initialize relationship service.

        Args:
            relationship_repository: Relationship repository
        """
        self.relationship_repository = relationship_repository

    async def follow(self, source_id: UserId, target_id: UserId) -> None:
        """Make one user follow another.

        Raises:
            NotFoundError: If either user does not exist
        """
        with logfire.span(
            "relationship_service.follow", source_id=source_id, target_id=target_id
        ):
            mutation = await self.relationship_repository.merge_follow(
                source_id, target_id
            )
            _require_endpoints(mutation, ("User", source_id), ("User", target_id))
            logfire.info("Follow merged", source_id=source_id, target_id=target_id)

    async def unfollow(self, source_id: UserId, target_id: UserId) -> None:
        """Remove a follow edge.

        Raises:
            NotFoundError: If either user does not exist
            RelationshipNotFoundError: If source does not follow target
        """
        with logfire.span(
            "relationship_service.unfollow", source_id=source_id, target_id=target_id
        ):
            mutation = await self.relationship_repository.delete_follow(
                source_id, target_id
            )
            _require_endpoints(mutation, ("User", source_id), ("User", target_id))
            if mutation.edges == 0:
                logfire.warn(
                    "No follow to remove", source_id=source_id, target_id=target_id
                )
                raise RelationshipNotFoundError(
                    EdgeKind.FOLLOWS.value, source_id, target_id
                )
            logfire.info("Follow removed", source_id=source_id, target_id=target_id)

    async def like(self, user_id: UserId, post_id: PostId) -> None:
        """Like a post.

        Raises:
            NotFoundError: If the user or the post does not exist
        """
        with logfire.span("relationship_service.like", user_id=user_id, post_id=post_id):
            mutation = await self.relationship_repository.merge_like(user_id, post_id)
            _require_endpoints(mutation, ("User", user_id), ("Post", post_id))
            logfire.info("Like merged", user_id=user_id, post_id=post_id)

    async def dislike(self, user_id: UserId, post_id: PostId) -> None:
        """Remove a like.

        Raises:
            NotFoundError: If the user or the post does not exist
            RelationshipNotFoundError: If the user has not liked the post
        """
        with logfire.span(
            "relationship_service.dislike", user_id=user_id, post_id=post_id
        ):
            mutation = await self.relationship_repository.delete_like(user_id, post_id)
            _require_endpoints(mutation, ("User", user_id), ("Post", post_id))
            if mutation.edges == 0:
                logfire.warn("No like to remove", user_id=user_id, post_id=post_id)
                raise RelationshipNotFoundError(EdgeKind.LIKED.value, user_id, post_id)
            logfire.info("Like removed", user_id=user_id, post_id=post_id)
