"""Graph store connection and query execution.

Provides the Neo4j async driver and the query-execution client every
repository is handed. The driver owns connection pooling; one client is
shared for the application lifetime and each call opens its own session.
"""

import asyncio
from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

import logfire
from neo4j import AsyncDriver, AsyncGraphDatabase, Query
from neo4j.exceptions import ConstraintError, DriverError, Neo4jError

from social.config import GraphSettings
from social.domain.error import ConflictError, OperationTimeoutError, StorageError
from social.util.deadline import time_left

Record = dict[str, Any]


class GraphClient(ABC):
    """Executes parameterized Cypher and returns records as plain dicts.

    Nodes and relationships should be projected by the query
    (``id(n) AS id, properties(n) AS props``) so records only carry
    strings, integers, booleans, lists and maps.
    """

    @abstractmethod
    async def execute(
        self,
        query: str,
        parameters: Optional[Mapping[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> list[Record]:
        """Run a query in an auto-commit transaction.

        Args:
            query: Cypher text
            parameters: Query parameters
            timeout: Deadline in seconds, defaults to the time left on the
                open deadline or the configured one

        Returns:
            Records in result order

        Raises:
            ConflictError: If the store rejects the write on integrity grounds
            OperationTimeoutError: If the deadline is exceeded
            StorageError: On any other store failure
        """
        pass

    @abstractmethod
    async def ping(self) -> None:
        """Check the store is reachable.

        Raises:
            StorageError: If it is not
        """
        pass


def create_driver(settings: GraphSettings) -> AsyncDriver:
    """Create the Neo4j async driver.

    Args:
        settings: Graph store settings

    Returns:
        Configured driver (connections are opened lazily)
    """
    return AsyncGraphDatabase.driver(
        settings.uri,
        auth=(settings.user, settings.password),
        max_connection_pool_size=settings.max_connection_pool_size,
    )


class Neo4jGraphClient(GraphClient):
    """GraphClient backed by the Neo4j async driver.

    Queries run through ``session.run`` rather than managed transactions
    so the driver never retries on the caller's behalf.
    """

    def __init__(self, driver: AsyncDriver, database: str, timeout: float) -> None:
        """Initialize the client.

        Args:
            driver: Shared Neo4j driver
            database: Database name
            timeout: Default per-query deadline in seconds
        """
        self.driver = driver
        self.database = database
        self.timeout = timeout

    async def execute(
        self,
        query: str,
        parameters: Optional[Mapping[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> list[Record]:
        """Run a query in an auto-commit transaction.

        Without an explicit timeout the query gets whatever is left of
        the caller's open deadline, or the configured default.
        """
        budget = timeout if timeout is not None else time_left(self.timeout)
        if budget <= 0:
            # Query(timeout=0) would mean "unbounded" server side
            logfire.warn("Graph query skipped, deadline passed")
            raise OperationTimeoutError("graph query", 0)
        try:
            return await asyncio.wait_for(
                self._run(query, dict(parameters or {}), budget), budget
            )
        except asyncio.TimeoutError:
            logfire.warn("Graph query timed out", timeout=budget)
            raise OperationTimeoutError("graph query", budget)
        except ConstraintError as e:
            logfire.warn("Graph constraint violated", error=str(e))
            raise ConflictError(str(e)) from e
        except (Neo4jError, DriverError) as e:
            logfire.error("Graph query failed", error=str(e))
            raise StorageError(f"Graph query failed: {e}") from e

    async def _run(
        self, query: str, parameters: dict[str, Any], timeout: float
    ) -> list[Record]:
        async with self.driver.session(database=self.database) as session:
            result = await session.run(Query(query, timeout=timeout), parameters)
            return await result.data()

    async def ping(self) -> None:
        """Check the store is reachable."""
        try:
            await asyncio.wait_for(self.driver.verify_connectivity(), self.timeout)
        except asyncio.TimeoutError:
            raise OperationTimeoutError("graph connectivity check", self.timeout)
        except (Neo4jError, DriverError) as e:
            raise StorageError(f"Graph store unreachable: {e}") from e
