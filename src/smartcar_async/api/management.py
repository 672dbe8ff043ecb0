"""Application management endpoints, authenticated with the AMT."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from smartcar_async.api.client import basic_auth
from smartcar_async.api.errors import ConnectionsFilterError
from smartcar_async.models.management import (
    Connections,
    ConnectionsFilter,
    ConnectionsPaging,
    DeletedConnections,
)

if TYPE_CHECKING:
    from smartcar_async.api.client import SmartcarClient
    from smartcar_async.models.meta import Meta

CONNECTIONS_PATH = "/management/connections"
AMT_USERNAME = "default"


def _filter_params(connections_filter: ConnectionsFilter | None) -> dict[str, Any]:
    params: dict[str, Any] = {}
    if connections_filter is None:
        return params
    if connections_filter.vehicle_id is not None:
        params["vehicle_id"] = connections_filter.vehicle_id
    if connections_filter.user_id is not None:
        params["user_id"] = connections_filter.user_id
    return params


class ManagementAPI:
    """List and delete the vehicle connections of an application.

    *amt* is the Application Management Token from the Smartcar dashboard.
    """

    def __init__(self, client: SmartcarClient) -> None:
        self._client = client

    async def get_connections(
        self,
        amt: str,
        connections_filter: ConnectionsFilter | None = None,
        paging: ConnectionsPaging | None = None,
    ) -> tuple[Connections, Meta]:
        params = _filter_params(connections_filter)
        if paging is not None:
            if paging.cursor_id is not None:
                params["cursor_id"] = paging.cursor_id
            if paging.limit is not None:
                params["limit"] = paging.limit
        return await self._client.request_model(
            Connections,
            "GET",
            self._client.management_url(CONNECTIONS_PATH),
            authorization=basic_auth(AMT_USERNAME, amt),
            params=params or None,
        )

    async def delete_connections(
        self,
        amt: str,
        connections_filter: ConnectionsFilter,
    ) -> tuple[DeletedConnections, Meta]:
        """Delete all connections for one vehicle or one user.

        Raises :class:`ConnectionsFilterError` unless exactly one of
        ``vehicle_id`` / ``user_id`` is set.
        """
        params = _filter_params(connections_filter)
        if len(params) != 1:
            raise ConnectionsFilterError("Choose ONE of vehicle_id OR user_id as a filter")
        return await self._client.request_model(
            DeletedConnections,
            "DELETE",
            self._client.management_url(CONNECTIONS_PATH),
            authorization=basic_auth(AMT_USERNAME, amt),
            params=params,
        )
