"""Fixtures for HTTP route tests."""

from dataclasses import dataclass, field
from uuid import UUID, uuid4

import pytest
import pytest_asyncio
from dishka.integrations.fastapi import FastapiProvider

from stackit.config import AuthSettings
from stackit.domain.repository import UserRepository
from stackit.domain.value import UserId, UserRole
from stackit.util.jwt import create_token
from tests.conftest import make_user
from tests.di import build_test_container
from tests.harness import serve_app


@dataclass
class Caller:
    """An authenticated user as seen by the API."""

    user_id: str = field(default_factory=lambda: str(uuid4()))

    @property
    def headers(self) -> dict[str, str]:
        # Signed with the default secret, which the app container also uses
        token = create_token(self.user_id, "tester", AuthSettings())
        return {"Cookie": f"auth_token={token}"}


@pytest_asyncio.fixture
async def container():
    """App container with in-memory persistence."""
    container = build_test_container(None, FastapiProvider())
    yield container
    await container.close()


@pytest_asyncio.fixture
async def client(container):
    """HTTP client bound to an app with in-memory persistence."""
    async for http_client in serve_app(container):
        yield http_client


@pytest.fixture
def alice() -> Caller:
    return Caller()


@pytest.fixture
def bob() -> Caller:
    return Caller()


@pytest_asyncio.fixture
async def admin(container) -> Caller:
    """A caller whose stored account has the ADMIN role."""
    caller = Caller()
    users = await container.get(UserRepository)
    await users.save(make_user(UserId(UUID(caller.user_id)), role=UserRole.ADMIN))
    return caller
