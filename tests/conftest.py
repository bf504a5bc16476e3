"""Pytest configuration and fixtures."""

import pytest
from typing import AsyncGenerator
from httpx import AsyncClient, ASGITransport

from config import Config
from emojiurl.database.memory import InMemoryStore
from emojiurl.service import EmojiURLService
from emojiurl.generator import SlugGenerator
from emojiurl.common.logging_config import setup_logging
from web_app import create_app


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
async def store(logger) -> AsyncGenerator[InMemoryStore, None]:
    """Create in-memory store."""
    db = InMemoryStore(logger=logger)
    
    yield db
    
    await db.close()


@pytest.fixture
def slug_generator():
    """Create slug generator."""
    return SlugGenerator(default_length=5)


@pytest.fixture
def service(store, slug_generator, logger) -> EmojiURLService:
    """Create service instance."""
    return EmojiURLService(
        db=store,
        cache=None,
        slug_generator=slug_generator,
        logger=logger,
    )


@pytest.fixture
def config():
    """Development config that ignores the environment's .env file."""
    return Config(
        _env_file=None,
        database_url="memory://",
        domain="emoji.test",
        port=4000,
        environment="development",
    )


@pytest.fixture
def app(service, store, config):
    """Create test FastAPI app."""
    return create_app(
        service_instance=service,
        config=config,
        db_instance=store,
    )


@pytest.fixture
async def client(app):
    """Create test client."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/test",
        "https://github.com/user/repo",
        "https://stackoverflow.com/questions/123456",
    ]


class ScriptedGenerator(SlugGenerator):
    """Generator that returns a fixed sequence of candidates."""
    
    def __init__(self, candidates):
        super().__init__(default_length=5)
        self._candidates = iter(candidates)
        self.calls = 0
    
    def generate_candidate(self, length=None):
        self.calls += 1
        return next(self._candidates)


@pytest.fixture
def scripted_generator():
    """Factory for generators with predetermined candidates."""
    return ScriptedGenerator
