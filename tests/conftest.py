"""Pytest fixtures for all tests."""

import pytest
from httpx import AsyncClient, ASGITransport

from config import Config, GeneratorConfig, ServerConfig
from ui.app import create_app
from xid import Generator

FIXED_TIME = 1_600_000_000


@pytest.fixture
def generator():
    """Create a generator with pinned clock, host and pid."""
    return Generator(
        clock=lambda: FIXED_TIME,
        hostname=lambda: "test-host",
        pid=lambda: 0x12345,
        seed=0,
    )


@pytest.fixture
def config():
    """Create test config."""
    return Config(generator=GeneratorConfig(), server=ServerConfig(max_batch=50))


@pytest.fixture
async def app(config, generator):
    """Create test FastAPI app."""
    return create_app(config, generator=generator)


@pytest.fixture
async def client(app):
    """Create async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
