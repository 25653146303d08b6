"""Test harness for unit and integration tests.

Integration tests assume PostgreSQL is already running with migrations
applied. Settings are loaded from environment variables (configure via .env
or export).
"""

import httpx
import pytest_asyncio
from dishka import AsyncContainer

from stackit.interface.api.app import create_app
from stackit.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access
    - Closes the container afterwards (with real persistence the request
      session is closed without a commit, so integration data written
      through it is rolled back)

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked, no database needed
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_cast_vote(unit_env):
            service = await unit_env.get(VoteService)
            result = await service.cast_vote(user_id, target, VoteType.UP)
            assert result.action == VoteAction.CREATED
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


async def serve_app(container: AsyncContainer):
    """Yield an HTTP client bound to an app built on the container.

    Requests go through httpx's ASGI transport, so no server is started.
    """
    app = create_app(container)

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(
        transport=transport, base_url="http://testserver"
    ) as http_client:
        yield http_client
