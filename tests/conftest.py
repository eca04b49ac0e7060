"""Pytest configuration and fixtures."""

import asyncio
from typing import Callable, List

import pytest
from httpx import ASGITransport, AsyncClient

from config import Config
from hashlink.database.memory import InMemoryURLStore
from hashlink.errors import StorageError
from hashlink.service import URLShortenerService
from hashlink.common.logging_config import setup_logging
from web_app import create_app


class RecordingStore(InMemoryURLStore):
    """In-memory store that records calls and yields to the loop before inserting."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.insert_calls: List[tuple] = []
        self.long_url_lookups: List[str] = []

    async def seed(self, short_code, long_url):
        """Insert without recording the call."""
        return await super().insert_mapping(short_code, long_url)

    async def insert_mapping(self, short_code, long_url):
        self.insert_calls.append((short_code, long_url))
        await asyncio.sleep(0)
        return await super().insert_mapping(short_code, long_url)

    async def find_by_long_url(self, long_url):
        self.long_url_lookups.append(long_url)
        return await super().find_by_long_url(long_url)


class UnavailableStore(InMemoryURLStore):
    """Store whose every operation fails like a lost connection."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.insert_calls = 0

    async def insert_mapping(self, short_code, long_url):
        self.insert_calls += 1
        raise StorageError("connection refused")

    async def find_by_long_url(self, long_url):
        raise StorageError("connection refused")

    async def find_by_hash(self, short_code):
        raise StorageError("connection refused")

    async def health_check(self):
        return False


class ScriptedHasher:
    """Hasher returning a fixed sequence of codes and recording its inputs."""

    def __init__(self, codes: List[str]):
        self.codes = list(codes)
        self.calls: List[str] = []

    def __call__(self, value: str) -> str:
        self.calls.append(value)
        if len(self.codes) > 1:
            return self.codes.pop(0)
        return self.codes[0]


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def store(logger) -> RecordingStore:
    """Create test store."""
    return RecordingStore(logger=logger)


@pytest.fixture
def scripted_hasher() -> Callable[[List[str]], ScriptedHasher]:
    """Factory for scripted hashers."""
    return ScriptedHasher


@pytest.fixture
def service(store, logger) -> URLShortenerService:
    """Create service instance."""
    return URLShortenerService(store=store, cache=None, logger=logger)


@pytest.fixture
def config() -> Config:
    return Config(database_url="memory://", base_url="http://testserver")


def build_app(service, config):
    return create_app(
        store_instance=service.store,
        cache_instance=None,
        service_instance=service,
        config=config,
    )


@pytest.fixture
def app(service, config):
    """Create test FastAPI app."""
    return build_app(service, config)


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
