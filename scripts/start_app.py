#!/usr/bin/env python3
"""Start the FastAPI application with Logfire error tracking for startup errors."""

import asyncio
import sys

import logfire
import uvicorn

from social.config import Settings
from social.persistence.graph import Neo4jGraphClient, create_driver
from social.util.logging import setup_logging
from social.util.observability import configure_logfire


async def check_graph(settings: Settings) -> None:
    """Refuse to start when the graph store is unreachable."""
    driver = create_driver(settings.graph)
    try:
        client = Neo4jGraphClient(
            driver,
            database=settings.graph.database,
            timeout=settings.graph.query_timeout,
        )
        await client.ping()
        logfire.info("Graph store reachable", uri=settings.graph.uri)
    finally:
        await driver.close()


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    setup_logging(settings)
    # Configure Logfire early to catch startup errors
    configure_logfire(settings)

    try:
        asyncio.run(check_graph(settings))

        logfire.info("Starting FastAPI application", port=settings.port)
        uvicorn.run(
            "social.interface.api.app:create_app",
            factory=True,
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )

        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
