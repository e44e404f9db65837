from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from apod.main import app

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def ok_body() -> str:
    return (DATA_DIR / "ok.json").read_text()


@pytest.fixture
def client():
    """TestClient running the app lifespan (no upstream traffic is made)."""
    with TestClient(app) as c:
        yield c
