import logging

import pytest

from askboard.config import settings
from askboard.core.bootstrap import ensure_default_admin
from askboard.models.user import User


pytestmark = pytest.mark.asyncio


async def test_skips_without_admin_password(client, monkeypatch):
    monkeypatch.setattr(settings, "admin_password", None)
    assert await ensure_default_admin() is None
    assert not await User.filter(role="admin").exists()


async def test_creates_admin_with_unique_username(client, create_user, monkeypatch, caplog):
    taken, _ = await create_user()
    monkeypatch.setattr(settings, "admin_username", taken.username)
    monkeypatch.setattr(settings, "admin_email", "root@example.com")
    monkeypatch.setattr(settings, "admin_password", "RootPass#1")

    with caplog.at_level(logging.INFO, logger="uvicorn.error"):
        admin = await ensure_default_admin()
    assert admin is not None
    created_logs = [r for r in caplog.records if "Created default admin" in r.getMessage()]
    assert [r.levelno for r in created_logs] == [logging.INFO]
    assert admin.username == f"{taken.username}2"
    assert admin.role == "admin"

    login = await client.post("/api/v1/auth/login", json={"email": "root@example.com", "password": "RootPass#1"})
    assert login.status_code == 200
    assert login.json()["data"]["user"]["role"] == "admin"

    # Second run is a no-op once an admin exists
    assert await ensure_default_admin() is None
