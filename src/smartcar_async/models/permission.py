"""Smartcar permissions and the scope builder used during Smartcar Connect."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from enum import StrEnum


class Permission(StrEnum):
    """A permission the application requests during Smartcar Connect.

    The member value is the token sent in the ``scope`` query parameter.
    """

    READ_ENGINE_OIL = "read_engine_oil"  # engine oil health
    READ_BATTERY = "read_battery"  # EV battery capacity and state of charge
    READ_CHARGE = "read_charge"  # charging status and limit
    CONTROL_CHARGE = "control_charge"  # start/stop charging, set limit
    READ_THERMOMETER = "read_thermometer"
    READ_FUEL = "read_fuel"
    READ_LOCATION = "read_location"
    CONTROL_SECURITY = "control_security"  # lock/unlock
    READ_ODOMETER = "read_odometer"
    READ_TIRES = "read_tires"
    READ_VEHICLE_INFO = "read_vehicle_info"  # make, model, year
    READ_VIN = "read_vin"
    READ_SECURITY = "read_security"  # lock status


@dataclasses.dataclass(frozen=True)
class ScopeBuilder:
    """Immutable, ordered, duplicate-free set of permissions.

    >>> ScopeBuilder().add_permission(Permission.READ_VIN).query_value
    'read_vin'
    """

    permissions: tuple[Permission, ...] = ()

    @classmethod
    def with_all_permissions(cls) -> ScopeBuilder:
        """Return a scope requesting every known permission."""
        return cls().add_permissions(Permission)

    def add_permission(self, permission: Permission) -> ScopeBuilder:
        """Return a new builder with *permission* appended (no-op if present)."""
        if permission in self.permissions:
            return self
        return dataclasses.replace(self, permissions=(*self.permissions, permission))

    def add_permissions(self, permissions: Iterable[Permission]) -> ScopeBuilder:
        builder = self
        for permission in permissions:
            builder = builder.add_permission(permission)
        return builder

    @property
    def query_value(self) -> str:
        """Space-joined permission tokens, in insertion order."""
        return " ".join(p.value for p in self.permissions)

    def __str__(self) -> str:
        return self.query_value
