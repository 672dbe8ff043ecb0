"""Vehicle compatibility lookup."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from smartcar_async._internal.query import format_flag_query
from smartcar_async.api.client import basic_auth
from smartcar_async.api.errors import ConfigError
from smartcar_async.models.compatibility import Compatibility, CompatibilityOptions

if TYPE_CHECKING:
    from smartcar_async.api.client import SmartcarClient
    from smartcar_async.models.meta import Meta
    from smartcar_async.models.permission import ScopeBuilder


class CompatibilityAPI:
    def __init__(self, client: SmartcarClient) -> None:
        self._client = client

    async def get_compatibility(
        self,
        vin: str,
        scope: ScopeBuilder,
        country: str = "US",
        options: CompatibilityOptions | None = None,
    ) -> tuple[Compatibility, Meta]:
        """Check whether *vin* supports Smartcar and the endpoints behind *scope*.

        Authenticates with the application's client id and secret, taken from
        *options* or, failing that, from the client settings.

        https://smartcar.com/api#get-compatibility
        """
        options = options or CompatibilityOptions()
        settings = self._client.settings
        client_id = options.client_id or settings.client_id
        client_secret = options.client_secret or settings.client_secret
        if not client_id or not client_secret:
            raise ConfigError(
                "get_compatibility needs a client id and secret: pass them in"
                " CompatibilityOptions or set SMARTCAR_CLIENT_ID / SMARTCAR_CLIENT_SECRET."
            )

        params: dict[str, Any] = {
            "vin": vin,
            "scope": scope.query_value,
            "country": country,
        }
        if options.flags:
            params["flags"] = format_flag_query(options.flags)

        return await self._client.request_model(
            Compatibility,
            "GET",
            self._client.api_url("/compatibility"),
            authorization=basic_auth(client_id, client_secret),
            params=params,
        )
