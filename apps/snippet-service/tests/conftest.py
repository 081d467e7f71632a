import os

# Make sure the engine module picks the in-memory SQLite path.
os.environ.setdefault("PYTEST_RUNNING", "1")
os.environ.pop("SNIPVAULT_TEST_DB", None)

import pytest
from fastapi.testclient import TestClient

from snipvault.db import models
from snipvault.db.database import SessionLocal, engine
from snipvault.utils.feature_flags import refresh_feature_flag_cache


@pytest.fixture(autouse=True)
def _auth_env(monkeypatch):
    monkeypatch.setenv("DEV_MODE", "false")
    monkeypatch.delenv("APP_BASE_URL", raising=False)
    yield


@pytest.fixture(autouse=True)
def _clean_tables():
    models.Base.metadata.create_all(bind=engine)
    yield
    with engine.begin() as conn:
        for table in reversed(models.Base.metadata.sorted_tables):
            conn.execute(table.delete())


@pytest.fixture(autouse=True)
def _fresh_feature_flags():
    refresh_feature_flag_cache()
    yield
    refresh_feature_flag_cache()


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    from snipvault.api.main import app
    return TestClient(app)
