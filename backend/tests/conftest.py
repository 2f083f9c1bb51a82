"""Shared fixtures: an in-memory store per test and a vault that keeps objects in a dict.

Environment is set before the app is imported so settings pick it up.
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret-0123456789abcdef0123456789abcdef")

import httpx
import pytest
from minio import Minio
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from ambassador_api.db import get_session, init_models
from ambassador_api.main import app
from ambassador_api.security import hash_password
from ambassador_api.services import records
from ambassador_api.services.storage import BlobVault, get_vault

ADMIN_EMAIL = "admin@campus.edu"
ADMIN_PASSWORD = "admin-password"


class RecordingVault(BlobVault):
    """Real presigning, but uploads land in memory instead of on the network."""

    def __init__(self):
        client = Minio(
            endpoint="vault.test:9000",
            access_key="test-access",
            secret_key="test-secret-key",
            secure=False,
            region="us-east-1",
        )
        super().__init__(client, "screenshots")
        self.objects: dict[str, tuple[bytes, str]] = {}

    def _put(self, key: str, data: bytes, content_type: str) -> None:
        self.objects[key] = (data, content_type)


@pytest.fixture
async def sessionmaker():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await init_models(engine)
    maker = async_sessionmaker(engine, expire_on_commit=False)

    async def _session():
        async with maker() as session:
            yield session

    app.dependency_overrides[get_session] = _session
    yield maker
    app.dependency_overrides.pop(get_session, None)
    await engine.dispose()


@pytest.fixture
def vault():
    v = RecordingVault()
    app.dependency_overrides[get_vault] = lambda: v
    yield v
    app.dependency_overrides.pop(get_vault, None)


@pytest.fixture
async def client(sessionmaker, vault):
    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def admin_headers(client, sessionmaker):
    async with sessionmaker() as session:
        await records.insert_admin(session, email=ADMIN_EMAIL, password_hash=hash_password(ADMIN_PASSWORD))
    r = await client.post("/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD, "role": "admin"})
    assert r.status_code == 200, r.text
    return {"Authorization": f"Bearer {r.json()['token']}"}


async def create_ambassador(client, admin_headers, email, name="Amb", campus="North", password="amb-password"):
    r = await client.post(
        "/ambassadors",
        headers=admin_headers,
        json={"name": name, "email": email, "password": password, "campus": campus},
    )
    assert r.status_code == 201, r.text
    return r.json()


async def login_ambassador(client, email, password="amb-password"):
    r = await client.post("/auth/login", json={"email": email, "password": password})
    assert r.status_code == 200, r.text
    body = r.json()
    return {"Authorization": f"Bearer {body['token']}"}, body["user"]


class LogRecorder:
    """Stands in for a module's structlog logger to see what a handler logged."""

    def __init__(self):
        self.events: list[tuple[str, str, dict]] = []

    def info(self, event, **kw):
        self.events.append(("info", event, kw))

    def exception(self, event, **kw):
        self.events.append(("exception", event, kw))

    def logged(self, level, event):
        return any(lv == level and ev == event for lv, ev, _ in self.events)
