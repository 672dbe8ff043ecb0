"""Tests for smartcar_async.api.client — SmartcarClient."""

from __future__ import annotations

import base64
from typing import TYPE_CHECKING, Any

import httpx
import pytest

from smartcar_async.api.client import SmartcarClient, basic_auth, bearer_auth
from smartcar_async.api.errors import DeserializationError, SmartcarApiError
from smartcar_async.models.config import SmartcarSettings
from smartcar_async.models.vehicle import Odometer

if TYPE_CHECKING:
    from pytest_httpx import HTTPXMock

API_BASE = "https://api.smartcar.com/v2.0"


class TestAuthHelpers:
    def test_bearer(self) -> None:
        assert bearer_auth("tok123") == "Bearer tok123"

    def test_basic(self) -> None:
        expected = base64.b64encode(b"user:pass").decode()
        assert basic_auth("user", "pass") == f"Basic {expected}"


class TestUrls:
    @pytest.mark.asyncio
    async def test_api_url(self, mock_client: SmartcarClient) -> None:
        assert mock_client.api_url("/vehicles") == f"{API_BASE}/vehicles"

    @pytest.mark.asyncio
    async def test_management_url(self, mock_client: SmartcarClient) -> None:
        assert (
            mock_client.management_url("/management/connections")
            == "https://management.smartcar.com/v2.0/management/connections"
        )

    def test_origin_override(self) -> None:
        client = SmartcarClient(SmartcarSettings(api_origin="http://localhost:8080"))
        assert client.api_url("/user") == "http://localhost:8080/v2.0/user"


class TestRequestSuccess:
    @pytest.mark.asyncio
    async def test_body_and_meta(self, httpx_mock: HTTPXMock, mock_client: SmartcarClient) -> None:
        httpx_mock.add_response(
            url=f"{API_BASE}/user",
            json={"id": "user-1"},
            headers={
                "SC-Data-Age": "2022-09-05T19:57:31.037Z",
                "SC-Request-Id": "req-1",
                "SC-Unit-System": "imperial",
            },
        )
        body, meta = await mock_client.request(
            "GET", f"{API_BASE}/user", authorization=bearer_auth("tok123")
        )
        assert body == {"id": "user-1"}
        assert meta.request_id == "req-1"
        assert meta.unit_system == "imperial"
        assert meta.data_age is not None
        assert meta.data_age.minute == 57

    @pytest.mark.asyncio
    async def test_authorization_header_sent(
        self, httpx_mock: HTTPXMock, mock_client: SmartcarClient
    ) -> None:
        httpx_mock.add_response(url=f"{API_BASE}/user", json={"id": "u"})
        await mock_client.request(
            "GET",
            f"{API_BASE}/user",
            authorization=bearer_auth("tok123"),
            headers={"SC-Unit-System": "metric"},
        )
        request = httpx_mock.get_requests()[0]
        assert request.headers["authorization"] == "Bearer tok123"
        assert request.headers["sc-unit-system"] == "metric"

    @pytest.mark.asyncio
    async def test_header_override_is_case_insensitive(
        self, httpx_mock: HTTPXMock, mock_client: SmartcarClient
    ) -> None:
        httpx_mock.add_response(url=f"{API_BASE}/user", json={"id": "u"})
        await mock_client.request(
            "GET",
            f"{API_BASE}/user",
            authorization=bearer_auth("tok123"),
            headers={"authorization": "Bearer other"},
        )
        request = httpx_mock.get_requests()[0]
        assert request.headers.get_list("authorization") == ["Bearer other"]

    @pytest.mark.asyncio
    async def test_malformed_data_age_ignored(
        self, httpx_mock: HTTPXMock, mock_client: SmartcarClient
    ) -> None:
        httpx_mock.add_response(
            url=f"{API_BASE}/user", json={"id": "u"}, headers={"SC-Data-Age": "soon"}
        )
        _body, meta = await mock_client.request(
            "GET", f"{API_BASE}/user", authorization=bearer_auth("t")
        )
        assert meta.data_age is None

    @pytest.mark.asyncio
    async def test_request_model(self, httpx_mock: HTTPXMock, mock_client: SmartcarClient) -> None:
        httpx_mock.add_response(url=f"{API_BASE}/vehicles/v1/odometer", json={"distance": 1.5})
        odometer, _meta = await mock_client.request_model(
            Odometer,
            "GET",
            f"{API_BASE}/vehicles/v1/odometer",
            authorization=bearer_auth("t"),
        )
        assert odometer.distance == 1.5


class TestRequestErrors:
    @pytest.mark.asyncio
    async def test_structured_error(
        self,
        httpx_mock: HTTPXMock,
        mock_client: SmartcarClient,
        sample_error_body: dict[str, Any],
    ) -> None:
        httpx_mock.add_response(url=f"{API_BASE}/user", status_code=409, json=sample_error_body)
        with pytest.raises(SmartcarApiError) as exc_info:
            await mock_client.request("GET", f"{API_BASE}/user", authorization=bearer_auth("t"))
        err = exc_info.value
        assert err.error_type == "VEHICLE_STATE"
        assert err.code == "ASLEEP"
        assert err.status_code == 409
        assert err.resolution == {"type": "RETRY_LATER"}
        assert err.request_id == sample_error_body["requestId"]
        assert err.doc_url == sample_error_body["docURL"]
        assert err.description == sample_error_body["description"]

    @pytest.mark.asyncio
    async def test_non_json_error(
        self, httpx_mock: HTTPXMock, mock_client: SmartcarClient
    ) -> None:
        httpx_mock.add_response(url=f"{API_BASE}/user", status_code=502, text="Bad Gateway")
        with pytest.raises(DeserializationError) as exc_info:
            await mock_client.request("GET", f"{API_BASE}/user", authorization=bearer_auth("t"))
        assert exc_info.value.status_code == 502
        assert exc_info.value.body == "Bad Gateway"

    @pytest.mark.asyncio
    async def test_foreign_json_error(
        self, httpx_mock: HTTPXMock, mock_client: SmartcarClient
    ) -> None:
        httpx_mock.add_response(
            url=f"{API_BASE}/user", status_code=500, json={"message": "internal"}
        )
        with pytest.raises(DeserializationError):
            await mock_client.request("GET", f"{API_BASE}/user", authorization=bearer_auth("t"))

    @pytest.mark.asyncio
    async def test_non_200_success_code_is_error(
        self, httpx_mock: HTTPXMock, mock_client: SmartcarClient
    ) -> None:
        httpx_mock.add_response(url=f"{API_BASE}/user", status_code=204)
        with pytest.raises(DeserializationError):
            await mock_client.request("GET", f"{API_BASE}/user", authorization=bearer_auth("t"))

    @pytest.mark.asyncio
    async def test_invalid_json_on_200(
        self, httpx_mock: HTTPXMock, mock_client: SmartcarClient
    ) -> None:
        httpx_mock.add_response(url=f"{API_BASE}/user", text="<html>")
        with pytest.raises(DeserializationError):
            await mock_client.request("GET", f"{API_BASE}/user", authorization=bearer_auth("t"))

    @pytest.mark.asyncio
    async def test_shape_mismatch(
        self, httpx_mock: HTTPXMock, mock_client: SmartcarClient
    ) -> None:
        httpx_mock.add_response(url=f"{API_BASE}/vehicles/v1/odometer", json={"miles": 3})
        with pytest.raises(DeserializationError, match="Odometer"):
            await mock_client.request_model(
                Odometer,
                "GET",
                f"{API_BASE}/vehicles/v1/odometer",
                authorization=bearer_auth("t"),
            )

    @pytest.mark.asyncio
    async def test_transport_error_propagates(
        self, httpx_mock: HTTPXMock, mock_client: SmartcarClient
    ) -> None:
        httpx_mock.add_exception(httpx.ConnectError("refused"))
        with pytest.raises(httpx.ConnectError):
            await mock_client.request("GET", f"{API_BASE}/user", authorization=bearer_auth("t"))


class TestLifecycle:
    @pytest.mark.asyncio
    async def test_owned_pool_closed(self, settings: SmartcarSettings) -> None:
        async with SmartcarClient(settings) as client:
            pass
        assert client._http.is_closed

    @pytest.mark.asyncio
    async def test_shared_pool_left_open(self, settings: SmartcarSettings) -> None:
        http = httpx.AsyncClient()
        async with SmartcarClient(settings, http=http):
            pass
        assert not http.is_closed
        await http.aclose()
