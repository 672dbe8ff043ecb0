from __future__ import annotations

from smartcar_async.models.auth import Access, Credentials
from smartcar_async.models.batch import Batch, BatchResponse, UnrecognizedBody
from smartcar_async.models.compatibility import Capability, Compatibility, CompatibilityOptions
from smartcar_async.models.config import SmartcarSettings
from smartcar_async.models.error import SmartcarErrorBody
from smartcar_async.models.management import (
    Connection,
    Connections,
    ConnectionsFilter,
    ConnectionsPaging,
    DeletedConnection,
    DeletedConnections,
)
from smartcar_async.models.meta import Meta
from smartcar_async.models.permission import Permission, ScopeBuilder
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
    Paging,
    Status,
    Subscribe,
    TirePressure,
    UnitSystem,
    User,
    Vehicle,
    VehicleAttributes,
    Vehicles,
    Vin,
)

__all__ = [
    # auth
    "Access",
    "Credentials",
    # batch
    "Batch",
    "BatchResponse",
    "UnrecognizedBody",
    # compatibility
    "Capability",
    "Compatibility",
    "CompatibilityOptions",
    # config
    "SmartcarSettings",
    # error
    "SmartcarErrorBody",
    # management
    "Connection",
    "Connections",
    "ConnectionsFilter",
    "ConnectionsPaging",
    "DeletedConnection",
    "DeletedConnections",
    # meta
    "Meta",
    # permission
    "Permission",
    "ScopeBuilder",
    # vehicle
    "Action",
    "ApplicationPermissions",
    "BatteryCapacity",
    "BatteryLevel",
    "ChargeLimit",
    "ChargingStatus",
    "EngineOilLife",
    "FuelTank",
    "Location",
    "LockStatus",
    "Odometer",
    "Paging",
    "Status",
    "Subscribe",
    "TirePressure",
    "UnitSystem",
    "User",
    "Vehicle",
    "VehicleAttributes",
    "Vehicles",
    "Vin",
]
