"""Graph store infrastructure providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from neo4j import AsyncDriver

from social.config import GraphSettings
from social.domain.repository import (
    PostRepository,
    RelationshipRepository,
    UserRepository,
)
from social.persistence.graph import GraphClient, Neo4jGraphClient, create_driver
from social.persistence.repository import (
    Neo4jPostRepository,
    Neo4jRelationshipRepository,
    Neo4jUserRepository,
)
from social.util.di.base import ProviderBase


class GraphProvider(ProviderBase):
    """Graph store component base."""

    __mock_component__ = "graph"


class ProdGraphProvider(GraphProvider):
    """Production graph provider using Neo4j."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_driver(self, settings: GraphSettings) -> AsyncIterator[AsyncDriver]:
        """Provide the pooled Neo4j driver, closed when the app shuts down."""
        driver = create_driver(settings)
        logfire.info("Neo4j driver created", uri=settings.uri)
        yield driver
        await driver.close()
        logfire.info("Neo4j driver closed")

    @provide(scope=Scope.APP)
    def get_graph_client(
        self, driver: AsyncDriver, settings: GraphSettings
    ) -> GraphClient:
        """Provide the shared query-execution client."""
        return Neo4jGraphClient(
            driver, database=settings.database, timeout=settings.query_timeout
        )

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, graph: GraphClient) -> UserRepository:
        """Provide User repository."""
        return Neo4jUserRepository(graph)

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, graph: GraphClient) -> PostRepository:
        """Provide Post repository."""
        return Neo4jPostRepository(graph)

    @provide(scope=Scope.REQUEST)
    def get_relationship_repository(
        self, graph: GraphClient
    ) -> RelationshipRepository:
        """Provide Relationship repository."""
        return Neo4jRelationshipRepository(graph)
