"""Async client SDK for the Smartcar vehicle API."""

from __future__ import annotations

from smartcar_async.api.client import SmartcarClient
from smartcar_async.api.compatibility import CompatibilityAPI
from smartcar_async.api.errors import (
    ConfigError,
    ConnectionsFilterError,
    DeserializationError,
    InvalidKeyLengthError,
    SmartcarApiError,
    SmartcarSdkError,
)
from smartcar_async.api.management import ManagementAPI
from smartcar_async.api.user import UserAPI
from smartcar_async.api.vehicle import VehicleAPI
from smartcar_async.auth.oauth import AuthClient
from smartcar_async.auth.options import AuthUrlOptions
from smartcar_async.models import (
    Access,
    Credentials,
    Meta,
    Permission,
    ScopeBuilder,
    SmartcarSettings,
    UnitSystem,
    Vehicle,
)
from smartcar_async.webhooks import hash_challenge, verify_payload

__version__ = "0.1.0"

__all__ = [
    "Access",
    "AuthClient",
    "AuthUrlOptions",
    "CompatibilityAPI",
    "ConfigError",
    "ConnectionsFilterError",
    "Credentials",
    "DeserializationError",
    "InvalidKeyLengthError",
    "ManagementAPI",
    "Meta",
    "Permission",
    "ScopeBuilder",
    "SmartcarApiError",
    "SmartcarClient",
    "SmartcarSdkError",
    "SmartcarSettings",
    "UnitSystem",
    "UserAPI",
    "Vehicle",
    "VehicleAPI",
    "__version__",
    "hash_challenge",
    "verify_payload",
]
