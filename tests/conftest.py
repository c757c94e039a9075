"""
Pytest configuration and fixtures.

Each test gets its own SQLite file: a sync engine creates the schema,
the app talks to it through aiosqlite.
"""

import os

os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["JWT_SECRET"] = "test-secret-key-that-is-long-enough-for-hs256"
os.environ["BCRYPT_ROUNDS"] = "4"

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

import food_delivery.models  # noqa: F401
from food_delivery.db.base import Base
from food_delivery.db.session import get_async_session
from food_delivery.main import app

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake-image-payload"


def _create_schema(db_file) -> None:
    engine = create_engine(f"sqlite:///{db_file}")
    Base.metadata.create_all(engine)
    engine.dispose()


@pytest.fixture
def session_factory(tmp_path):
    """
    Фабрика async-сессий на отдельном файле БД.
    NullPool: соединение открывается в том event loop, где используется.
    """
    db_file = tmp_path / "test.db"
    _create_schema(db_file)
    engine = create_async_engine(f"sqlite+aiosqlite:///{db_file}", poolclass=NullPool)
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def client(session_factory):
    """
    Test client with the session dependency overridden.
    """

    async def override_get_async_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_async_session] = override_get_async_session

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def make_user(client):
    """Signs up an account through the API and returns the response body."""

    def _make_user(email="ann@example.com", password="secret123", **fields):
        data = {
            "name": "Ann",
            "email": email,
            "password": password,
            "phone": "+15550001",
            "location": "12 Main St",
            **fields,
        }
        response = client.post(
            "/signup", data=data, files={"image": ("avatar.png", PNG_BYTES, "image/png")}
        )
        assert response.status_code == 200, response.text
        return response.json()

    return _make_user


@pytest.fixture
def make_restaurant(client):
    """Creates a restaurant through the API and returns the response body."""

    def _make_restaurant(name="Pizza Place", **fields):
        data = {"name": name, "address": "1 Oven Rd", "phone_number": "+15559999", **fields}
        response = client.post("/restaurants", data=data)
        assert response.status_code == 201, response.text
        return response.json()

    return _make_restaurant


@pytest.fixture
def make_food(client):
    """Adds a menu item to a restaurant and returns the response body."""

    def _make_food(restaurant_id, name="Margherita", price="10.00"):
        response = client.post(
            f"/restaurants/{restaurant_id}/foods", data={"name": name, "price": price}
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _make_food
