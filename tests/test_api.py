"""
Tests for the HTTP routes.
"""

import pytest
from httpx import AsyncClient, ASGITransport

from tom_ai_agent.api import create_app


@pytest.fixture
def app(orchestrator):
    return create_app(orchestrator)


@pytest.fixture
def transport(app):
    return ASGITransport(app=app)


@pytest.mark.asyncio
async def test_chat_answers(transport, mock_audit):
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        resp = await ac.post("/api/tom-chat", json={"message": "What's on today?", "userId": "nurse-1"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["message"] == "There are two cases today."
    assert body["context"].startswith("Theatre Cases (2 total):")
    assert body["timestamp"]
    assert mock_audit.record.await_args.args[0].user_id == "nurse-1"


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [{}, {"message": ""}, {"message": 42}, ["today"]])
async def test_chat_requires_message(transport, payload):
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        resp = await ac.post("/api/tom-chat", json=payload)

    assert resp.status_code == 400
    assert resp.json() == {"success": False, "error": "Message is required"}


@pytest.mark.asyncio
async def test_chat_rejects_malformed_json(transport):
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        resp = await ac.post(
            "/api/tom-chat", content="{not json", headers={"Content-Type": "application/json"}
        )

    assert resp.status_code == 400
    assert resp.json()["success"] is False


@pytest.mark.asyncio
async def test_chat_status(transport):
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        resp = await ac.get("/api/tom-chat")

    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["status"]["store"]["system"] == "manual"
    assert body["status"]["generation"]["ready"] is True
    assert body["status"]["speech"]["ready"] is False


@pytest.mark.asyncio
async def test_tts_browser_fallback_when_unconfigured(transport, mock_speech):
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        resp = await ac.post("/api/tts", json={"text": "Good morning"})

    assert resp.status_code == 200
    assert resp.json() == {
        "success": False,
        "useBrowserVoice": True,
        "message": "Azure Speech not configured, use browser fallback",
    }
    mock_speech.synthesize.assert_not_awaited()


@pytest.mark.asyncio
async def test_tts_browser_fallback_when_synthesis_fails(transport, mock_speech):
    mock_speech.is_ready.return_value = True

    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        resp = await ac.post("/api/tts", json={"text": "Good morning"})

    assert resp.json()["useBrowserVoice"] is True
    assert resp.json()["message"] == "TTS generation failed, use browser fallback"


@pytest.mark.asyncio
async def test_tts_returns_audio(transport, mock_speech):
    mock_speech.is_ready.return_value = True
    mock_speech.synthesize.return_value = b"ID3-audio"

    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        resp = await ac.post("/api/tts", json={"text": "Good morning"})

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("audio/mp3")
    assert resp.content == b"ID3-audio"
    mock_speech.synthesize.assert_awaited_once_with("Good morning")


@pytest.mark.asyncio
async def test_tts_requires_text(transport):
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        resp = await ac.post("/api/tts", json={})

    assert resp.status_code == 400
    assert resp.json() == {"success": False, "error": "Text is required"}


@pytest.mark.asyncio
async def test_health_routes(transport):
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        health = await ac.get("/health/")
        ready = await ac.get("/health/ready")
        live = await ac.get("/health/live")

    assert health.json()["status"] == "healthy"
    assert health.headers["X-Frame-Options"] == "DENY"
    assert health.headers["X-Content-Type-Options"] == "nosniff"
    assert ready.json()["status"] == "ready"
    assert ready.json()["store"] == "manual"
    assert live.json() == {"status": "alive"}
