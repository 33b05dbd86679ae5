"""Shared test fixtures for chirpy."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from chirpy.api import create_app
from chirpy.config import Settings
from db_chirpy.queries import MemoryQueries


class FailingQueries:
    """Query backend whose every call fails like a lost database connection."""

    async def create_user(self, email):
        raise ConnectionError("database unavailable")

    async def create_chirp(self, body, user_id):
        raise ConnectionError("database unavailable")

    async def delete_all_users(self):
        raise ConnectionError("database unavailable")


@pytest.fixture
def static_root(tmp_path: Path) -> Path:
    """Directory served under /app/ with an index page and one asset."""
    (tmp_path / "index.html").write_text(
        "<html>\n<body>\n<h1>Welcome to Chirpy</h1>\n</body>\n</html>\n"
    )
    assets = tmp_path / "assets"
    assets.mkdir()
    (assets / "logo.txt").write_text("chirpy logo\n")
    return tmp_path


@pytest.fixture
def make_settings(static_root: Path):
    def _make(**overrides) -> Settings:
        values = {"filepath_root": str(static_root), "db_url": None, "platform": ""}
        values.update(overrides)
        return Settings(**values)

    return _make


@pytest.fixture
def queries() -> MemoryQueries:
    return MemoryQueries()


@pytest.fixture
def app(make_settings, queries):
    return create_app(make_settings(), queries=queries)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def dev_client(make_settings, queries) -> TestClient:
    return TestClient(create_app(make_settings(platform="dev"), queries=queries))


@pytest.fixture
def failing_client(make_settings) -> TestClient:
    return TestClient(
        create_app(make_settings(platform="dev"), queries=FailingQueries())
    )
