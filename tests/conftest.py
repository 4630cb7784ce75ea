"""
Shared fixtures.

The application is built around an ``AppContext`` holding in-memory
MongoDB collections (mongomock-motor) and a fake identity provider that
accepts tokens of the form ``token-<email>``.
"""

import asyncio
from typing import Any, Dict, Iterable, List

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient
from pymongo.errors import ServerSelectionTimeoutError

from tutor_booking_api.app.core.config import Settings
from tutor_booking_api.app.core.context import AppContext
from tutor_booking_api.app.core.db import get_collections
from tutor_booking_api.app.core.errors import IdentityProviderError, UnauthorizedError
from tutor_booking_api.app.main import create_app


class FakeIdentityProvider:
    """Identity provider double: ``token-<email>`` verifies as ``<email>``."""

    def __init__(self, emails: Iterable[str] = ()) -> None:
        self.users: List[Dict[str, Any]] = [
            {"uid": f"uid-{index}", "email": email} for index, email in enumerate(emails)
        ]
        self.fail_listing = False
        self.closed = False

    async def verify(self, token: str) -> Dict[str, Any]:
        for user in self.users:
            if token == f"token-{user['email']}":
                return {"uid": user["uid"], "email": user["email"]}
        raise UnauthorizedError()

    async def list_users(self) -> List[Dict[str, Any]]:
        if self.fail_listing:
            raise IdentityProviderError("provider unavailable")
        return list(self.users)

    async def close(self) -> None:
        self.closed = True


class _FailingCursor:
    async def to_list(self, length=None):
        raise ServerSelectionTimeoutError("no servers available")


class FailingCollection:
    """Collection whose every call fails as an unreachable server would."""

    def find(self, *args, **kwargs):
        return _FailingCursor()

    async def _fail(self, *args, **kwargs):
        raise ServerSelectionTimeoutError("no servers available")

    find_one = insert_one = update_one = update_many = delete_one = count_documents = _fail


def run(coro):
    return asyncio.run(coro)


def bearer(email: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer token-{email}"}


@pytest.fixture
def settings() -> Settings:
    return Settings(log_level="WARNING", cors_origins=["http://localhost:5173"])


@pytest.fixture
def identity() -> FakeIdentityProvider:
    return FakeIdentityProvider(["a@x.com", "t@x.com", "b@x.com"])


@pytest.fixture
def context(settings: Settings, identity: FakeIdentityProvider) -> AppContext:
    client = AsyncMongoMockClient()
    return AppContext(client=client, collections=get_collections(client, settings), identity=identity)


@pytest.fixture
def tutors(context: AppContext):
    return context.collections.tutors


@pytest.fixture
def bookings(context: AppContext):
    return context.collections.bookings


@pytest.fixture
def client(settings: Settings, context: AppContext) -> TestClient:
    return TestClient(create_app(settings=settings, context=context))
