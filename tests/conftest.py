"""
Shared fixtures: test settings, an in-memory user store and an HTTP client.
"""

import os
import uuid
from datetime import datetime, timezone

# config.settings reads JWT_SECRET at import time
os.environ.setdefault("JWT_SECRET", "test-secret-key-that-is-long-enough-1234")

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_user_store
from config.settings import Settings
from database.models import User
from utils.errors import NotFoundError
from utils.schemas import UserPayload

TEST_SECRET = "test-secret-key-that-is-long-enough-1234"


class FakeUserStore:
    """Dict-backed stand-in for ``UserStore`` with the same contract."""

    def __init__(self):
        self.users: dict[uuid.UUID, User] = {}
        self.calls: list[str] = []
        self.commits = 0

    async def create(self, payload: UserPayload) -> User:
        self.calls.append("create")
        user = User(
            id=uuid.uuid4(),
            name=payload.name,
            nick=payload.nick,
            email=payload.email,
            password=payload.password,
            created_at=datetime.now(timezone.utc),
        )
        self.users[user.id] = user
        return user

    async def list_by_name_or_nick(self, query: str) -> list[User]:
        self.calls.append("list")
        q = query.lower()
        return [
            u for u in self.users.values()
            if q in u.name.lower() or q in u.nick.lower()
        ]

    async def get_by_id(self, user_id: uuid.UUID) -> User:
        self.calls.append("get_by_id")
        if user_id not in self.users:
            raise NotFoundError()
        return self.users[user_id]

    async def get_credentials_by_email(self, email: str):
        self.calls.append("get_credentials_by_email")
        for u in self.users.values():
            if u.email == email:
                return u.id, u.password
        raise NotFoundError()

    async def update(self, user_id: uuid.UUID, payload: UserPayload) -> None:
        self.calls.append("update")
        user = self.users.get(user_id)
        if user is None:
            raise NotFoundError()
        user.name = payload.name or user.name
        user.nick = payload.nick or user.nick
        user.email = payload.email or user.email

    async def delete(self, user_id: uuid.UUID) -> None:
        self.calls.append("delete")
        if self.users.pop(user_id, None) is None:
            raise NotFoundError()

    async def commit(self) -> None:
        self.commits += 1


@pytest.fixture
def settings() -> Settings:
    return Settings(jwt_secret=TEST_SECRET, database_url="postgresql+asyncpg://u:p@localhost/test")


@pytest.fixture
def fake_store() -> FakeUserStore:
    return FakeUserStore()


@pytest.fixture
def app(settings, fake_store):
    from main import create_app

    application = create_app(settings)
    application.dependency_overrides[get_user_store] = lambda: fake_store
    return application


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def token_service(app):
    return app.state.token_service
