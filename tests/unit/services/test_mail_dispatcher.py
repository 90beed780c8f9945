import json
from datetime import datetime
from unittest.mock import AsyncMock
from uuid import uuid4

import httpx
import pytest

from chapterhub.adapter.services.mail_dispatcher import HttpMailDispatcher
from chapterhub.app.services.mail_dispatcher import MeetingDetails, dispatch_invites

API_URL = "https://mail.test/v3/smtp/email"


@pytest.fixture
def meeting():
    return MeetingDetails(
        event_id=uuid4(),
        title="Monthly <Mixer>",
        date=datetime(2026, 11, 5, 18, 30),
        venue="Main Hall",
        entry_fee=250,
        chapter_name="Downtown",
    )


def _dispatcher(handler, api_key="key-123", sender_email="noreply@chapterhub.test"):
    return HttpMailDispatcher(
        api_url=API_URL,
        api_key=api_key,
        sender_email=sender_email,
        app_url="https://app.chapterhub.test/",
        transport=httpx.MockTransport(handler),
    )


@pytest.mark.asyncio
async def test_invites_are_blind_copied(meeting):
    captured = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(201, json={"messageId": "abc"})

    await _dispatcher(handler).send_invites(["a@example.com", " a@example.com", "b@example.com"], meeting)

    assert len(captured) == 1
    request = captured[0]
    assert request.headers["api-key"] == "key-123"
    body = json.loads(request.content)
    assert body["subject"] == "Invitation: Monthly <Mixer>"
    assert body["to"] == [{"email": "noreply@chapterhub.test", "name": "Chapterhub"}]
    assert body["bcc"] == [{"email": "a@example.com"}, {"email": "b@example.com"}]
    assert "Monthly &lt;Mixer&gt;" in body["htmlContent"]
    assert f"https://app.chapterhub.test/events/{meeting.event_id}?payment=true" in body["htmlContent"]


@pytest.mark.asyncio
async def test_missing_api_key_skips_sending(meeting):
    handler = AsyncMock()

    await _dispatcher(handler, api_key="").send_invites(["a@example.com"], meeting)

    handler.assert_not_called()


@pytest.mark.asyncio
async def test_provider_error_is_logged_not_raised(meeting, caplog):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text="upstream exploded")

    await _dispatcher(handler).send_invites(["a@example.com"], meeting)

    assert "upstream exploded" in caplog.text


@pytest.mark.asyncio
async def test_dispatch_invites_swallows_dispatcher_errors(meeting, caplog):
    dispatcher = AsyncMock()
    dispatcher.send_invites.side_effect = [RuntimeError("boom"), None]

    await dispatch_invites(
        dispatcher, [(["a@example.com"], meeting), (["b@example.com"], meeting)]
    )

    assert dispatcher.send_invites.call_count == 2
    assert "Failed to send invites" in caplog.text


@pytest.mark.asyncio
async def test_dispatch_invites_without_dispatcher_is_noop(meeting):
    await dispatch_invites(None, [(["a@example.com"], meeting)])
