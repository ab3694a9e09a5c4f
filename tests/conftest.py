import pytest
from fastapi.testclient import TestClient

from library_api.app.core.config import settings
from library_api.app.core.db import init_db
from library_api.app.main import app


@pytest.fixture
def database(tmp_path, request, monkeypatch):
    # Unique database file per test
    db_file = str(tmp_path / f"library_{request.node.name}.db")
    monkeypatch.setattr(settings, "database_url", db_file)
    init_db()
    yield db_file


@pytest.fixture
def client(database):
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
