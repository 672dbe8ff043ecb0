"""Batch response models.

Sub-response bodies carry no discriminant, so :data:`BatchBody` is resolved
structurally: members are tried left to right and the first that validates
wins.  The error shape goes first (its required fields appear in no success
shape), then success shapes from most to fewest required fields, so that a
body never lands in a narrower shape it merely contains (``FuelTank`` before
``BatteryLevel``).  :class:`UnrecognizedBody` catches everything else.
"""

from __future__ import annotations

import logging
from typing import Annotated, Any

from pydantic import BaseModel, Field, model_validator

from smartcar_async.models.error import SmartcarErrorBody
from smartcar_async.models.meta import Meta
from smartcar_async.models.vehicle import (
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
    TirePressure,
    VehicleAttributes,
    Vin,
)

logger = logging.getLogger(__name__)


class UnrecognizedBody(BaseModel):
    """Sub-response body matching none of the known shapes."""

    raw: Any = None

    @model_validator(mode="before")
    @classmethod
    def _wrap(cls, value: Any) -> Any:
        if isinstance(value, cls):
            return value
        logger.debug("Batch body matched no known shape: %r", value)
        return {"raw": value}


BatchBody = Annotated[
    SmartcarErrorBody
    | TirePressure
    | VehicleAttributes
    | FuelTank
    | ApplicationPermissions
    | BatteryLevel
    | ChargingStatus
    | Location
    | LockStatus
    | EngineOilLife
    | BatteryCapacity
    | ChargeLimit
    | Odometer
    | Vin
    | UnrecognizedBody,
    Field(union_mode="left_to_right"),
]


class BatchResponse(BaseModel):
    """One sub-response of a batch request."""

    path: str
    body: BatchBody
    code: int
    headers: Meta | None = None

    @property
    def ok(self) -> bool:
        return self.code == 200 and not isinstance(self.body, SmartcarErrorBody)


class Batch(BaseModel):
    """Response body of ``POST /vehicles/{id}/batch``."""

    responses: list[BatchResponse]

    def get(self, path: str) -> BatchResponse | None:
        """Return the sub-response for *path*, or *None*."""
        for response in self.responses:
            if response.path == path:
                return response
        return None
