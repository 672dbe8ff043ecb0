from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

_CAMEL_EXTRA_ALLOW = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")


class UnitSystem(StrEnum):
    METRIC = "metric"
    IMPERIAL = "imperial"


class Vehicle(BaseModel):
    """Handle addressing one vehicle with the bearer token that can read it."""

    model_config = ConfigDict(frozen=True)

    vehicle_id: str
    access_token: str
    unit_system: UnitSystem = UnitSystem.METRIC


# ---------------------------------------------------------------------------
# Shared
# ---------------------------------------------------------------------------


class Paging(BaseModel):
    model_config = _CAMEL_EXTRA_ALLOW

    count: int
    offset: int


class User(BaseModel):
    model_config = _CAMEL_EXTRA_ALLOW

    id: str


class Vehicles(BaseModel):
    """Paged list of vehicle ids connected for the authorized user."""

    model_config = _CAMEL_EXTRA_ALLOW

    vehicles: list[str]
    paging: Paging


class ApplicationPermissions(BaseModel):
    model_config = _CAMEL_EXTRA_ALLOW

    permissions: list[str]
    paging: Paging


# ---------------------------------------------------------------------------
# Read endpoints
# ---------------------------------------------------------------------------


class VehicleAttributes(BaseModel):
    model_config = _CAMEL_EXTRA_ALLOW

    id: str
    make: str
    model: str
    year: int


class Vin(BaseModel):
    model_config = _CAMEL_EXTRA_ALLOW

    vin: str


class EngineOilLife(BaseModel):
    model_config = _CAMEL_EXTRA_ALLOW

    life_remaining: float


class BatteryCapacity(BaseModel):
    model_config = _CAMEL_EXTRA_ALLOW

    capacity: float


class BatteryLevel(BaseModel):
    """State of charge (0-1) and remaining range of an EV battery."""

    model_config = _CAMEL_EXTRA_ALLOW

    percent_remaining: float
    range: float


class ChargingStatus(BaseModel):
    model_config = _CAMEL_EXTRA_ALLOW

    is_plugged_in: bool
    state: str


class ChargeLimit(BaseModel):
    model_config = _CAMEL_EXTRA_ALLOW

    limit: float


class FuelTank(BaseModel):
    """Fuel tank status (vehicles sold in the United States only)."""

    model_config = _CAMEL_EXTRA_ALLOW

    range: float
    percent_remaining: float
    amount_remaining: float


class Location(BaseModel):
    model_config = _CAMEL_EXTRA_ALLOW

    latitude: float
    longitude: float


class Odometer(BaseModel):
    model_config = _CAMEL_EXTRA_ALLOW

    distance: float


class TirePressure(BaseModel):
    model_config = _CAMEL_EXTRA_ALLOW

    front_left: float
    front_right: float
    back_left: float
    back_right: float


class OpenableStatus(BaseModel):
    """Status of a door, window, sunroof, storage area or charging port."""

    model_config = _CAMEL_EXTRA_ALLOW

    type: str
    status: str


class LockStatus(BaseModel):
    model_config = _CAMEL_EXTRA_ALLOW

    is_locked: bool
    doors: list[OpenableStatus] = []
    windows: list[OpenableStatus] = []
    sunroof: list[OpenableStatus] = []
    storage: list[OpenableStatus] = []
    charging_port: list[OpenableStatus] = []


# ---------------------------------------------------------------------------
# Command / lifecycle acknowledgments
# ---------------------------------------------------------------------------


class Action(BaseModel):
    """Acknowledgment of a command; the vehicle state must be re-read to confirm."""

    model_config = _CAMEL_EXTRA_ALLOW

    message: str
    status: str


class Status(BaseModel):
    """Result of a DELETE (disconnect, unsubscribe)."""

    model_config = _CAMEL_EXTRA_ALLOW

    status: str


class Subscribe(BaseModel):
    model_config = _CAMEL_EXTRA_ALLOW

    webhook_id: str
    vehicle_id: str
