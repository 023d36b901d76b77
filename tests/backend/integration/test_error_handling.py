import logging

import pytest
from httpx import ASGITransport, AsyncClient
from tortoise.exceptions import OperationalError

from askboard.main import app
from askboard.models.notification import Notification
from askboard.services import ranking


pytestmark = pytest.mark.asyncio


async def test_failed_notification_write_does_not_fail_answer(client, signed_in, ask, monkeypatch, caplog):
    _, asker_headers = await signed_in()
    _, helper_headers = await signed_in()
    qid = (await ask(asker_headers))["id"]

    async def _broken_create(*args, **kwargs):
        raise OperationalError("notifications table is locked")

    monkeypatch.setattr(Notification, "create", _broken_create)
    with caplog.at_level(logging.ERROR, logger="uvicorn.error"):
        resp = await client.post(f"/api/v1/questions/{qid}/answers", headers=helper_headers,
                                 json={"content": "Slicing with [::-1] returns a reversed copy."})

    assert resp.status_code == 201
    assert resp.json()["data"]["questionId"] == qid
    assert any("failed to create" in r.getMessage() for r in caplog.records)
    monkeypatch.undo()
    assert await Notification.all().count() == 0


async def test_unhandled_error_returns_generic_500(client, monkeypatch):
    async def _boom(**kwargs):
        raise RuntimeError("database went away")

    monkeypatch.setattr(ranking, "list_questions", _boom)
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://testserver") as raw_client:
        resp = await raw_client.get("/api/v1/questions")

    assert resp.status_code == 500
    assert resp.json() == {
        "success": False,
        "error": {"code": "INTERNAL_ERROR", "message": "Internal server error"},
    }
    assert "database went away" not in resp.text
