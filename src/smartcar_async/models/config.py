from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

API_ORIGIN: str = "https://api.smartcar.com"
AUTH_ORIGIN: str = "https://auth.smartcar.com/oauth/token"
CONNECT_URL: str = "https://connect.smartcar.com"
MANAGEMENT_API_ORIGIN: str = "https://management.smartcar.com"


class SmartcarSettings(BaseSettings):
    """SDK settings populated from explicit values or ``SMARTCAR_*`` variables.

    Host overrides point the SDK at a sandbox; they are read once, when a
    :class:`~smartcar_async.api.client.SmartcarClient` is constructed.
    """

    model_config = SettingsConfigDict(
        env_prefix="SMARTCAR_",
        extra="ignore",
    )

    client_id: str | None = None
    client_secret: str | None = None
    redirect_uri: str | None = None
    api_origin: str = API_ORIGIN
    auth_origin: str = AUTH_ORIGIN
    connect_url: str = CONNECT_URL
    management_api_origin: str = MANAGEMENT_API_ORIGIN
    timeout: float = 30.0
