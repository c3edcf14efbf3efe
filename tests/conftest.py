"""Pytest fixtures for all tests."""

import pytest
from httpx import AsyncClient, ASGITransport

from config import Config, IdConfig
from identifiers import shortid
from identifiers.issuer import IdIssuer
from ui.app import create_app


@pytest.fixture(autouse=True)
def reset_shortid_defaults():
    """Every test starts with seconds precision and ordered ids enabled."""
    shortid.configure(precision="seconds", ordered_enabled=True)
    yield
    shortid.configure(precision="seconds", ordered_enabled=True)


@pytest.fixture
def id_config():
    """Create test id config."""
    return IdConfig(default_bytes=10, precision="seconds", ordered=True, max_batch=50)


@pytest.fixture
def issuer(id_config):
    """Create test issuer."""
    return IdIssuer(config=id_config)


@pytest.fixture
def app(id_config):
    """Create test FastAPI app."""
    return create_app(Config(ids=id_config))


@pytest.fixture
async def client(app):
    """Create async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
