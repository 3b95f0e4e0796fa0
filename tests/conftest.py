"""
Shared fixtures: an isolated SQLite database and storage directory per test.
"""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from userdeck.config import Settings
from userdeck.main import create_app


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        DATABASE_URL=f"sqlite:///{tmp_path / 'userdeck.sqlite3'}",
        STORAGE_PATH=str(tmp_path / "storage"),
        NODE_ENV="test",
    )


@pytest.fixture
def app(settings: Settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def storage_dir(settings: Settings) -> Path:
    return Path(settings.STORAGE_PATH)
