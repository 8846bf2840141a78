"""Pytest configuration and shared fixtures."""

import os
import tempfile
import time
import uuid
from pathlib import Path

import jwt
import pytest

# Settings are read at import time, so point them at throwaway locations first
_TMP = Path(tempfile.mkdtemp(prefix="swasth_khet_tests_"))
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TMP / 'test.db'}"
TEST_SECRET = "test-secret-key-for-swasth-khet-suite-0123456789"
os.environ["JWT_SECRET"] = TEST_SECRET
os.environ["LOG_DIR"] = str(_TMP / "logs")
os.environ["LOG_LEVEL"] = "WARNING"

from fastapi.testclient import TestClient  # noqa: E402

from swasth_khet.main import app  # noqa: E402


def make_token(user_id: str, claim: str = "sub", expires_in: int = 3600, secret: str = TEST_SECRET) -> str:
    payload = {claim: user_id, "exp": int(time.time()) + expires_in}
    return jwt.encode(payload, secret, algorithm="HS256")


@pytest.fixture(scope="session")
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def user_id():
    return f"farmer-{uuid.uuid4()}"


@pytest.fixture
def auth_headers(user_id):
    return {"Authorization": f"Bearer {make_token(user_id)}"}


@pytest.fixture
def mixed_farm_payload():
    """Flood-irrigated farm using both synthetic and organic inputs."""
    return {
        "areaHectares": 2,
        "fertilizerUsage": {"synthetic": 100, "organic": 60},
        "pesticideUsage": {"chemical": 10, "organic": 5},
        "fuelUsage": {"diesel": 20},
        "irrigationHours": 10,
        "irrigationType": "flood",
        "transportMethod": "tractor",
        "cropDiversity": 1,
    }


def create_farm(client, headers, **overrides) -> dict:
    payload = {"name": "North field", "location": "Nashik", "areaHectares": 5}
    payload.update(overrides)
    resp = client.post("/farmer/farms/", json=payload, headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()
