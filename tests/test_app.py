"""Tests for server startup wiring."""

from unittest.mock import MagicMock

import pytest
from httpx import AsyncClient, ASGITransport

import app as server
from config import Config
from emojiurl.database.memory import InMemoryStore


@pytest.fixture
def memory_config():
    return Config(_env_file=None, database_url="memory://", domain="emoji.test")


@pytest.mark.asyncio
async def test_lifespan_wires_service(memory_config):
    """The lifespan builds the store and service the routes use."""
    application = server.build_app(memory_config)

    async with application.router.lifespan_context(application):
        assert isinstance(application.state.db, InMemoryStore)
        assert application.state.cache is None

        transport = ASGITransport(app=application)
        async with AsyncClient(transport=transport, base_url="http://testserver") as client:
            created = await client.post("/api/newURL", json={"url": "https://example.com", "emojis": "🐱🐶"})
            resolved = await client.get(f"/api/{created.json()['key']}")

    assert created.status_code == 200
    assert resolved.json()["emojiURL"] == "http://emoji.test/🐱🐶"


def test_multiple_workers_use_factory(monkeypatch, memory_config):
    """Worker processes are started from the import string, not the app object."""
    config = memory_config.model_copy(update={"workers": 3})
    monkeypatch.setattr(server, "load_config", lambda: config)
    run = MagicMock()
    monkeypatch.setattr(server.uvicorn, "run", run)
    server_cls = MagicMock()
    monkeypatch.setattr(server.uvicorn, "Server", server_cls)

    server.main()

    run.assert_called_once()
    args, kwargs = run.call_args
    assert args == ("app:build_app",)
    assert kwargs["factory"] is True
    assert kwargs["workers"] == 3
    server_cls.assert_not_called()


def test_single_worker_runs_in_process(monkeypatch, memory_config):
    monkeypatch.setattr(server, "load_config", lambda: memory_config)
    run = MagicMock()
    monkeypatch.setattr(server.uvicorn, "run", run)
    server_cls = MagicMock()
    monkeypatch.setattr(server.uvicorn, "Server", server_cls)
    monkeypatch.setattr(server.signal, "signal", MagicMock())

    server.main()

    run.assert_not_called()
    server_cls.return_value.run.assert_called_once()
