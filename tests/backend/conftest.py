import os
import uuid

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from tortoise import Tortoise

from askboard.core import db as db_module
from askboard.core.security import hash_password
from askboard.main import app
from askboard.models.user import User


TEST_DB_URL = "sqlite://:memory:?cache=shared"
os.environ["DATABASE_URL"] = TEST_DB_URL
db_module.DB_URL = TEST_DB_URL
db_module.TORTOISE_ORM["connections"]["default"] = TEST_DB_URL


async def _init_test_db() -> None:
    """
    Initialize a clean in-memory SQLite database for every test.
    Ensures tables are recreated from scratch.
    """
    if Tortoise._inited:
        await Tortoise.close_connections()
    await Tortoise.init(config=db_module.TORTOISE_ORM)
    await Tortoise.generate_schemas()


@pytest_asyncio.fixture
async def client():
    """
    Provide an HTTPX AsyncClient bound to the FastAPI app with a fresh DB.
    """
    await _init_test_db()
    # Use ASGITransport without lifespan parameter (not supported in all httpx versions)
    try:
        transport = ASGITransport(app=app, lifespan="off")
    except TypeError:
        transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client
    await Tortoise.close_connections()


@pytest_asyncio.fixture
async def create_user():
    """
    Factory fixture creating users directly via ORM.
    """

    async def _create_user(password: str = "UserPass!23", role: str = "user") -> tuple[User, str]:
        name = f"{role}_{uuid.uuid4().hex[:6]}"
        user = await User.create(
            username=name,
            email=f"{name}@example.com",
            password_hash=hash_password(password),
            role=role,
        )
        return user, password

    return _create_user


@pytest_asyncio.fixture
async def auth_header_factory(client):
    """
    Helper fixture to obtain Authorization headers via the login endpoint.
    The login cookie is dropped so requests without headers stay anonymous.
    """

    async def _get_headers(username: str, password: str) -> dict[str, str]:
        resp = await client.post(
            "/api/v1/auth/login",
            json={"username": username, "password": password},
        )
        assert resp.status_code == 200, resp.text
        client.cookies.clear()
        token = resp.json()["data"]["accessToken"]
        return {"Authorization": f"Bearer {token}"}

    return _get_headers


@pytest_asyncio.fixture
async def signed_in(create_user, auth_header_factory):
    """
    Factory returning (user, headers) for a fresh account; role="admin" for moderators.
    """

    async def _signed_in(role: str = "user") -> tuple[User, dict[str, str]]:
        user, password = await create_user(role=role)
        headers = await auth_header_factory(user.username, password)
        return user, headers

    return _signed_in


@pytest_asyncio.fixture
async def ask(client):
    """
    Factory posting a question and returning its JSON data.
    """

    async def _ask(headers: dict[str, str], title: str = "How do I reverse a list in Python?",
                   description: str = "I have a list of integers and need it in reverse order.",
                   tags: list[str] | None = None) -> dict:
        resp = await client.post(
            "/api/v1/questions",
            headers=headers,
            json={"title": title, "description": description, "tags": tags or ["python"]},
        )
        assert resp.status_code == 201, resp.text
        return resp.json()["data"]

    return _ask
