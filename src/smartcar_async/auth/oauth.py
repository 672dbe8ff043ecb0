"""Smartcar Connect URL generation and OAuth2 token exchange."""

from __future__ import annotations

from typing import TYPE_CHECKING

from smartcar_async._internal.query import encode_query
from smartcar_async.api.client import basic_auth
from smartcar_async.models.auth import AUTHORIZE_PATH, Access, Credentials

if TYPE_CHECKING:
    from smartcar_async.api.client import SmartcarClient
    from smartcar_async.auth.options import AuthUrlOptions
    from smartcar_async.models.meta import Meta
    from smartcar_async.models.permission import ScopeBuilder

_FORM_HEADERS = {"Content-Type": "application/x-www-form-urlencoded"}


# ---------------------------------------------------------------------------
# Authorization URL
# ---------------------------------------------------------------------------


def build_auth_url(
    connect_url: str,
    credentials: Credentials,
    scope: ScopeBuilder,
    options: AuthUrlOptions | None = None,
) -> str:
    """Build the full Smartcar Connect authorization URL.

    ``approval_prompt=auto`` is appended unless *options* forces the prompt,
    so the URL always carries exactly one ``approval_prompt``.
    """
    query: list[tuple[str, str]] = [
        ("scope", scope.query_value),
        ("response_type", "code"),
        ("client_id", credentials.client_id),
        ("client_secret", credentials.client_secret),
        ("redirect_uri", credentials.redirect_uri),
    ]
    if credentials.test_mode:
        query.append(("mode", "test"))
    if options is not None:
        query.extend(options.to_query())
    if not any(key == "approval_prompt" for key, _ in query):
        query.append(("approval_prompt", "auto"))
    return f"{connect_url}{AUTHORIZE_PATH}?{encode_query(query)}"


# ---------------------------------------------------------------------------
# Auth client
# ---------------------------------------------------------------------------


class AuthClient:
    """OAuth client for an application registered with Smartcar.

    Holds no tokens: each exchange returns a fresh :class:`Access` and the
    caller decides where to keep it.
    """

    def __init__(self, client: SmartcarClient, credentials: Credentials | None = None) -> None:
        self._client = client
        self.credentials = credentials or Credentials.from_settings(client.settings)

    def get_auth_url(self, scope: ScopeBuilder, options: AuthUrlOptions | None = None) -> str:
        """Return the Smartcar Connect URL to send the user to (no network call)."""
        return build_auth_url(self._client.settings.connect_url, self.credentials, scope, options)

    async def exchange_code(self, code: str) -> tuple[Access, Meta]:
        """Exchange an authorization *code* for tokens.

        https://smartcar.com/api#auth-code-exchange
        """
        return await self._token_request(
            {
                "grant_type": "authorization_code",
                "code": code,
                "redirect_uri": self.credentials.redirect_uri,
            }
        )

    async def exchange_refresh_token(self, refresh_token: str) -> tuple[Access, Meta]:
        """Use a refresh token to obtain a new token pair.

        https://smartcar.com/api#refresh-token-exchange
        """
        return await self._token_request(
            {
                "grant_type": "refresh_token",
                "refresh_token": refresh_token,
            }
        )

    async def _token_request(self, form: dict[str, str]) -> tuple[Access, Meta]:
        return await self._client.request_model(
            Access,
            "POST",
            self._client.settings.auth_origin,
            authorization=basic_auth(self.credentials.client_id, self.credentials.client_secret),
            data=form,
            headers=_FORM_HEADERS,
        )
