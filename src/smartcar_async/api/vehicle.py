"""Per-vehicle Smartcar endpoints built on top of SmartcarClient."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

import httpx
from pydantic import BaseModel

from smartcar_async.api.batch import build_batch_request_body
from smartcar_async.api.client import bearer_auth
from smartcar_async.models.batch import Batch
from smartcar_async.models.vehicle import (
    Action,
    ApplicationPermissions,
    BatteryCapacity,
    BatteryLevel,
    ChargeLimit,
    ChargingStatus,
    EngineOilLife,
    FuelTank,
    Location,
    LockStatus,
    Odometer,
    Status,
    Subscribe,
    TirePressure,
    VehicleAttributes,
    Vin,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from smartcar_async.api.client import SmartcarClient
    from smartcar_async.models.meta import Meta
    from smartcar_async.models.vehicle import Vehicle

ModelT = TypeVar("ModelT", bound=BaseModel)

UNIT_SYSTEM_HEADER = "SC-Unit-System"


class VehicleAPI:
    """Vehicle endpoints (composition over SmartcarClient).

    Every method takes the :class:`Vehicle` handle to address, so one
    ``VehicleAPI`` serves any number of vehicles and tokens.  Commands
    (lock, charge, charge limit) return an :class:`Action` acknowledgment;
    re-read the resource to confirm the vehicle applied it.
    """

    def __init__(self, client: SmartcarClient) -> None:
        self._client = client

    def _url(self, vehicle: Vehicle, path: str) -> str:
        return self._client.api_url(f"/vehicles/{vehicle.vehicle_id}{path}")

    def _headers(self, vehicle: Vehicle) -> dict[str, str]:
        return {UNIT_SYSTEM_HEADER: vehicle.unit_system.value}

    async def _get(
        self,
        model: type[ModelT],
        vehicle: Vehicle,
        path: str,
        params: dict[str, Any] | None = None,
    ) -> tuple[ModelT, Meta]:
        return await self._client.request_model(
            model,
            "GET",
            self._url(vehicle, path),
            authorization=bearer_auth(vehicle.access_token),
            params=params,
            headers=self._headers(vehicle),
        )

    async def _post(
        self,
        model: type[ModelT],
        vehicle: Vehicle,
        path: str,
        body: dict[str, Any] | None = None,
    ) -> tuple[ModelT, Meta]:
        return await self._client.request_model(
            model,
            "POST",
            self._url(vehicle, path),
            authorization=bearer_auth(vehicle.access_token),
            json=body,
            headers=self._headers(vehicle),
        )

    # -- reads ---------------------------------------------------------------

    async def attributes(self, vehicle: Vehicle) -> tuple[VehicleAttributes, Meta]:
        """Return id, make, model and year."""
        return await self._get(VehicleAttributes, vehicle, "")

    async def permissions(
        self,
        vehicle: Vehicle,
        *,
        limit: int | None = None,
        offset: int | None = None,
    ) -> tuple[ApplicationPermissions, Meta]:
        """Return the permissions granted to the application for this vehicle."""
        params: dict[str, Any] = {}
        if limit is not None:
            params["limit"] = limit
        if offset is not None:
            params["offset"] = offset
        return await self._get(ApplicationPermissions, vehicle, "/permissions", params or None)

    async def engine_oil(self, vehicle: Vehicle) -> tuple[EngineOilLife, Meta]:
        return await self._get(EngineOilLife, vehicle, "/engine/oil")

    async def battery_capacity(self, vehicle: Vehicle) -> tuple[BatteryCapacity, Meta]:
        return await self._get(BatteryCapacity, vehicle, "/battery/capacity")

    async def battery_level(self, vehicle: Vehicle) -> tuple[BatteryLevel, Meta]:
        """Return state of charge and remaining range."""
        return await self._get(BatteryLevel, vehicle, "/battery")

    async def charging_status(self, vehicle: Vehicle) -> tuple[ChargingStatus, Meta]:
        return await self._get(ChargingStatus, vehicle, "/charge")

    async def charge_limit(self, vehicle: Vehicle) -> tuple[ChargeLimit, Meta]:
        return await self._get(ChargeLimit, vehicle, "/charge/limit")

    async def fuel_tank(self, vehicle: Vehicle) -> tuple[FuelTank, Meta]:
        """Return the fuel tank status (US vehicles only)."""
        return await self._get(FuelTank, vehicle, "/fuel")

    async def location(self, vehicle: Vehicle) -> tuple[Location, Meta]:
        return await self._get(Location, vehicle, "/location")

    async def odometer(self, vehicle: Vehicle) -> tuple[Odometer, Meta]:
        return await self._get(Odometer, vehicle, "/odometer")

    async def tire_pressure(self, vehicle: Vehicle) -> tuple[TirePressure, Meta]:
        return await self._get(TirePressure, vehicle, "/tires/pressure")

    async def vin(self, vehicle: Vehicle) -> tuple[Vin, Meta]:
        return await self._get(Vin, vehicle, "/vin")

    async def lock_status(self, vehicle: Vehicle) -> tuple[LockStatus, Meta]:
        """Return lock state plus door, window and storage status."""
        return await self._get(LockStatus, vehicle, "/security")

    # -- commands ------------------------------------------------------------

    async def lock(self, vehicle: Vehicle) -> tuple[Action, Meta]:
        return await self._post(Action, vehicle, "/security", {"action": "LOCK"})

    async def unlock(self, vehicle: Vehicle) -> tuple[Action, Meta]:
        return await self._post(Action, vehicle, "/security", {"action": "UNLOCK"})

    async def start_charge(self, vehicle: Vehicle) -> tuple[Action, Meta]:
        return await self._post(Action, vehicle, "/charge", {"action": "START"})

    async def stop_charge(self, vehicle: Vehicle) -> tuple[Action, Meta]:
        return await self._post(Action, vehicle, "/charge", {"action": "STOP"})

    async def set_charge_limit(self, vehicle: Vehicle, limit: float) -> tuple[Action, Meta]:
        """Set the charge limit as a fraction of capacity, e.g. ``0.8``."""
        if isinstance(limit, bool) or not 0 < limit <= 1:
            raise ValueError(f"Charge limit must be in (0, 1], got {limit}")
        return await self._post(Action, vehicle, "/charge/limit", {"limit": limit})

    async def batch(self, vehicle: Vehicle, paths: Sequence[str]) -> tuple[Batch, Meta]:
        """Fetch several endpoints (e.g. ``["/odometer", "/charge"]``) in one request."""
        return await self._post(Batch, vehicle, "/batch", build_batch_request_body(paths))

    # -- connection lifecycle ------------------------------------------------

    async def disconnect(self, vehicle: Vehicle) -> tuple[Status, Meta]:
        """Revoke the application's access to this vehicle."""
        return await self._client.request_model(
            Status,
            "DELETE",
            self._url(vehicle, "/application"),
            authorization=bearer_auth(vehicle.access_token),
        )

    async def subscribe(self, vehicle: Vehicle, webhook_id: str) -> tuple[Subscribe, Meta]:
        """Subscribe the vehicle to webhook *webhook_id*."""
        return await self._post(Subscribe, vehicle, f"/webhooks/{webhook_id}")

    async def unsubscribe(
        self, vehicle: Vehicle, amt: str, webhook_id: str
    ) -> tuple[Status, Meta]:
        """Unsubscribe the vehicle from a webhook.

        Authenticates with the application management token *amt* rather than
        the vehicle's access token.
        """
        return await self._client.request_model(
            Status,
            "DELETE",
            self._url(vehicle, f"/webhooks/{webhook_id}"),
            authorization=bearer_auth(amt),
        )

    # -- escape hatch --------------------------------------------------------

    async def request(
        self,
        vehicle: Vehicle,
        path: str,
        method: str = "GET",
        *,
        body: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> tuple[dict[str, Any], Meta]:
        """Call an arbitrary vehicle endpoint, e.g. ``/tesla/compass``.

        Returns the raw JSON body.
        """
        request_headers = httpx.Headers(self._headers(vehicle))
        if headers:
            request_headers.update(headers)
        data, meta = await self._client.request(
            method,
            self._url(vehicle, path),
            authorization=bearer_auth(vehicle.access_token),
            json=body,
            headers=request_headers,
        )
        result: dict[str, Any] = data
        return result, meta
