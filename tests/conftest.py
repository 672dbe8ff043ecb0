"""Shared fixtures for SDK tests."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest
import pytest_asyncio

from smartcar_async.api.client import SmartcarClient
from smartcar_async.models.config import SmartcarSettings
from smartcar_async.models.vehicle import Vehicle

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

API_BASE = "https://api.smartcar.com/v2.0"
TOKEN_URL = "https://auth.smartcar.com/oauth/token"
MANAGEMENT_BASE = "https://management.smartcar.com/v2.0"
VEHICLE_ID = "36ab27d0-fd9d-4455-823a-ce30af709ffc"


@pytest.fixture
def settings() -> SmartcarSettings:
    return SmartcarSettings(
        client_id="test-client-id",
        client_secret="test-client-secret",
        redirect_uri="https://example.com/callback",
        api_origin="https://api.smartcar.com",
        auth_origin=TOKEN_URL,
        connect_url="https://connect.smartcar.com",
        management_api_origin="https://management.smartcar.com",
    )


@pytest_asyncio.fixture
async def mock_client(settings: SmartcarSettings) -> AsyncIterator[SmartcarClient]:
    client = SmartcarClient(settings)
    yield client
    await client.close()


@pytest.fixture
def vehicle() -> Vehicle:
    return Vehicle(vehicle_id=VEHICLE_ID, access_token="access-tok")


@pytest.fixture
def sample_error_body() -> dict[str, Any]:
    return {
        "type": "VEHICLE_STATE",
        "code": "ASLEEP",
        "description": "The vehicle is in a sleep state and temporarily unable to respond.",
        "docURL": "https://smartcar.com/docs/errors/v2.0/vehicle-state/#asleep",
        "statusCode": 409,
        "resolution": {"type": "RETRY_LATER"},
        "requestId": "5dea93a1-3f79-4246-90aa-a0b45d0e3e1a",
    }
