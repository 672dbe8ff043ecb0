"""Authenticated request sender shared by every Smartcar endpoint."""

from __future__ import annotations

import base64
import logging
from typing import TYPE_CHECKING, Any, NoReturn, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from smartcar_async.api.errors import DeserializationError, SmartcarApiError
from smartcar_async.models.config import SmartcarSettings
from smartcar_async.models.error import SmartcarErrorBody
from smartcar_async.models.meta import Meta

if TYPE_CHECKING:
    from collections.abc import Mapping
    from types import TracebackType

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

API_VERSION = "2.0"


def bearer_auth(token: str) -> str:
    """Return an ``Authorization`` header value for a bearer *token*."""
    return f"Bearer {token}"


def basic_auth(username: str, password: str) -> str:
    """Return an ``Authorization`` header value for HTTP Basic auth."""
    encoded = base64.b64encode(f"{username}:{password}".encode()).decode("ascii")
    return f"Basic {encoded}"


class SmartcarClient:
    """Single chokepoint for Smartcar HTTP calls.

    Attaches the ``Authorization`` header, dispatches the request and
    classifies the result: HTTP 200 yields ``(body, Meta)``; anything else
    raises :class:`SmartcarApiError` (or :class:`DeserializationError` when
    the error body is not Smartcar's shape).  Transport errors from httpx
    propagate unchanged.  There is no retry, cache or rate limiting.

    Pass *http* to share one connection pool across clients; a client that
    creates its own pool closes it in :meth:`close`.
    """

    def __init__(
        self,
        settings: SmartcarSettings | None = None,
        *,
        http: httpx.AsyncClient | None = None,
    ) -> None:
        self.settings = settings or SmartcarSettings()
        self._owns_http = http is None
        self._http = http or httpx.AsyncClient(timeout=self.settings.timeout)

    # -- url helpers ---------------------------------------------------------

    def api_url(self, path: str) -> str:
        """Return ``{api_origin}/v2.0{path}``."""
        return f"{self.settings.api_origin}/v{API_VERSION}{path}"

    def management_url(self, path: str) -> str:
        return f"{self.settings.management_api_origin}/v{API_VERSION}{path}"

    # -- lifecycle -----------------------------------------------------------

    async def close(self) -> None:
        """Close the underlying HTTP pool if this client created it."""
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> SmartcarClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    # -- requests ------------------------------------------------------------

    async def request(
        self,
        method: str,
        url: str,
        *,
        authorization: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
        data: dict[str, str] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> tuple[Any, Meta]:
        """Send one request and return the decoded JSON body with its :class:`Meta`."""
        request_headers = httpx.Headers({"Authorization": authorization})
        if headers:
            request_headers.update(headers)

        logger.debug("%s %s", method, url)
        resp = await self._http.request(
            method,
            url,
            params=params,
            json=json,
            data=data,
            headers=request_headers,
        )
        logger.debug("%s %s -> HTTP %d", method, url, resp.status_code)

        if resp.status_code != 200:
            self._raise_for_error(resp)

        try:
            body = resp.json()
        except ValueError as exc:
            raise DeserializationError(
                f"Response from {url} is not valid JSON",
                status_code=resp.status_code,
                body=resp.text,
            ) from exc
        return body, Meta.from_headers(resp.headers)

    async def request_model(
        self,
        model: type[ModelT],
        method: str,
        url: str,
        **kwargs: Any,
    ) -> tuple[ModelT, Meta]:
        """Like :meth:`request`, validating the body into *model*."""
        body, meta = await self.request(method, url, **kwargs)
        try:
            return model.model_validate(body), meta
        except ValidationError as exc:
            raise DeserializationError(
                f"Response from {url} does not match {model.__name__}: {exc}",
                status_code=200,
                body=str(body),
            ) from exc

    @staticmethod
    def _raise_for_error(resp: httpx.Response) -> NoReturn:
        try:
            detail = SmartcarErrorBody.model_validate_json(resp.content)
        except ValidationError as exc:
            raise DeserializationError(
                f"Unrecognized error response (HTTP {resp.status_code}): {resp.text}",
                status_code=resp.status_code,
                body=resp.text,
            ) from exc
        logger.debug(
            "Smartcar error %s/%s (request %s)", detail.error_type, detail.code, detail.request_id
        )
        raise SmartcarApiError(detail)
