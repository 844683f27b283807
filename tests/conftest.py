# tests/conftest.py

import os
from pathlib import Path

# Settings are read when app.main is imported, so set them first
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("STATIC_DIR", str(Path(__file__).resolve().parent.parent / "public"))

import pytest
from fastapi.testclient import TestClient

from app.main import app


@pytest.fixture
def client():
    """Entering the client runs the lifespan, which reloads the seed users."""
    with TestClient(app) as test_client:
        yield test_client
