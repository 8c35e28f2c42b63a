"""Shared fixtures: a fresh app per test and an HTTP client."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from main import create_app
from tests.helpers import make_settings


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def client(settings: Settings) -> TestClient:
    with TestClient(create_app(settings)) as c:
        yield c


@pytest.fixture
def token_client() -> TestClient:
    with TestClient(create_app(make_settings(id_policy="token"))) as c:
        yield c


@pytest.fixture
def valid_payload() -> dict:
    return {
        "title": "X",
        "description": "Y",
        "brand": "Z",
        "price": 5,
        "image": "http://i",
    }
