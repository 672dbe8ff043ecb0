from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from smartcar_async.api.errors import ConfigError

if TYPE_CHECKING:
    from smartcar_async.models.config import SmartcarSettings

AUTHORIZE_PATH: str = "/oauth/authorize"

# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class Access(BaseModel):
    """Token response from the Smartcar OAuth endpoint.

    Returned by both the authorization-code and the refresh-token exchange.
    """

    access_token: str
    token_type: str
    expires_in: int
    refresh_token: str


class Credentials(BaseModel):
    """Application credentials from the Smartcar developer dashboard."""

    model_config = ConfigDict(frozen=True)

    client_id: str
    client_secret: str
    redirect_uri: str
    test_mode: bool = False

    @classmethod
    def from_settings(cls, settings: SmartcarSettings, *, test_mode: bool = False) -> Credentials:
        """Build credentials from *settings*, raising :class:`ConfigError` if incomplete."""
        missing = [
            name
            for name in ("client_id", "client_secret", "redirect_uri")
            if not getattr(settings, name)
        ]
        if missing:
            env_names = ", ".join(f"SMARTCAR_{name.upper()}" for name in missing)
            raise ConfigError(
                f"Missing Smartcar credentials: set {env_names} or pass them explicitly."
            )
        return cls(
            client_id=settings.client_id or "",
            client_secret=settings.client_secret or "",
            redirect_uri=settings.redirect_uri or "",
            test_mode=test_mode,
        )
