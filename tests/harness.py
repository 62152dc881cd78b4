"""Test harness for unit and integration tests."""

import pytest_asyncio

from social.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that builds a fresh test container (so every
    test starts from an empty graph and media store) and yields a
    request-scoped container for service access.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked
        unit_env = create_env_fixture()

        # Integration tests - real Neo4j, assumes it is running
        integration_env = create_env_fixture(unmock={"graph"})

        @pytest.mark.asyncio
        async def test_follow(unit_env):
            service = await unit_env.get(RelationshipService)
            ...
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
