"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from tests.factories import make_event_payload


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def event_payload() -> dict:
    return make_event_payload()


@pytest.fixture
def created_event(api_client: APIClient, event_payload: dict) -> dict:
    response = api_client.post("/api/events", event_payload, format="json")
    assert response.status_code == 201
    return response.json()["event"]
