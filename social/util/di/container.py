"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from social.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the production container: Neo4j graph, filesystem media.

    Settings are read from the environment when first resolved, so building
    the container opens no connections.

    Returns:
        Configured DI container with production providers
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach a container to the app; it is closed with the app's lifespan.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)
