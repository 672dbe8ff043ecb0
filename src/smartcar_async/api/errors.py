"""Exception hierarchy for the Smartcar SDK."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from smartcar_async.models.error import SmartcarErrorBody


class SmartcarSdkError(Exception):
    """Base class for every error raised by this package."""


class ConfigError(SmartcarSdkError):
    """Required configuration (client id, secret, redirect URI) is missing."""


class ConnectionsFilterError(SmartcarSdkError):
    """Management connection filter is invalid (needs exactly one of vehicle_id / user_id)."""


class InvalidKeyLengthError(SmartcarSdkError):
    """The webhook secret cannot be used as an HMAC key."""


class DeserializationError(SmartcarSdkError):
    """A response body could not be decoded into the expected shape."""

    def __init__(self, message: str, *, status_code: int | None = None, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class SmartcarApiError(SmartcarSdkError):
    """Non-200 response carrying Smartcar's structured error body.

    This is the error callers branch on, e.g. ``error_type == "VEHICLE_STATE"``
    with ``code == "ASLEEP"`` versus ``error_type == "PERMISSION"``.
    """

    def __init__(self, detail: SmartcarErrorBody) -> None:
        super().__init__(f"{detail.error_type}::{detail.description}")
        self.detail = detail

    @property
    def error_type(self) -> str:
        return self.detail.error_type

    @property
    def code(self) -> str | None:
        return self.detail.code

    @property
    def description(self) -> str:
        return self.detail.description

    @property
    def doc_url(self) -> str:
        return self.detail.doc_url

    @property
    def status_code(self) -> int:
        return self.detail.status_code

    @property
    def resolution(self) -> dict[str, str | None]:
        return self.detail.resolution

    @property
    def request_id(self) -> str:
        return self.detail.request_id
