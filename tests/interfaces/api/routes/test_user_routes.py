"""Tests for the user lookup endpoint."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[4]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

from app.interfaces.api.dependencies import get_user_repository  # noqa: E402
from app.infrastructure.repositories import InMemoryUserRepository  # noqa: E402
from main import create_app  # noqa: E402


@pytest.fixture()
def client():
    repository = InMemoryUserRepository.from_mapping({"123": "Juan"})
    app = create_app()
    app.dependency_overrides[get_user_repository] = lambda: repository
    with TestClient(app) as test_client:
        yield test_client


def test_read_user_name(client: TestClient) -> None:
    response = client.get("/users/123/name")

    assert response.status_code == 200
    assert response.json() == {"id": "123", "name": "Juan"}


def test_read_missing_user_returns_not_found(client: TestClient) -> None:
    response = client.get("/users/999/name")

    assert response.status_code == 404
    assert response.json()["detail"] == "User not found"
