"""Account-level endpoints for the authorized user."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from smartcar_async.api.client import bearer_auth
from smartcar_async.models.vehicle import User, Vehicles

if TYPE_CHECKING:
    from smartcar_async.api.client import SmartcarClient
    from smartcar_async.models.meta import Meta


class UserAPI:
    """User-related API operations (composition over SmartcarClient)."""

    def __init__(self, client: SmartcarClient) -> None:
        self._client = client

    async def get_user(self, access_token: str) -> tuple[User, Meta]:
        """Return the id of the user who granted access."""
        return await self._client.request_model(
            User,
            "GET",
            self._client.api_url("/user"),
            authorization=bearer_auth(access_token),
        )

    async def get_vehicles(
        self,
        access_token: str,
        *,
        limit: int | None = None,
        offset: int | None = None,
    ) -> tuple[Vehicles, Meta]:
        """Return the paged list of vehicle ids connected for the user."""
        params: dict[str, Any] = {}
        if limit is not None:
            params["limit"] = limit
        if offset is not None:
            params["offset"] = offset
        return await self._client.request_model(
            Vehicles,
            "GET",
            self._client.api_url("/vehicles"),
            authorization=bearer_auth(access_token),
            params=params or None,
        )
