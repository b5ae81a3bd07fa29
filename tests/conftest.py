import pytest
from fastapi.testclient import TestClient

from hcomp_app.config import get_settings
from hcomp_app.main import app


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test from default settings."""
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("VERSION", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
