"""Models for the application management (connections) endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

_CAMEL_EXTRA_ALLOW = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")


class ConnectionsFilter(BaseModel):
    """Restrict a connections query to one vehicle or one user."""

    vehicle_id: str | None = None
    user_id: str | None = None


class ConnectionsPaging(BaseModel):
    cursor_id: str | None = None
    limit: int | None = None


class Connection(BaseModel):
    model_config = _CAMEL_EXTRA_ALLOW

    user_id: str
    vehicle_id: str
    connected_at: datetime | None = None


class CursorPaging(BaseModel):
    model_config = _CAMEL_EXTRA_ALLOW

    cursor: str | None = None


class Connections(BaseModel):
    model_config = _CAMEL_EXTRA_ALLOW

    connections: list[Connection]
    paging: CursorPaging | None = None


class DeletedConnection(BaseModel):
    model_config = _CAMEL_EXTRA_ALLOW

    user_id: str
    vehicle_id: str


class DeletedConnections(BaseModel):
    model_config = _CAMEL_EXTRA_ALLOW

    connections: list[DeletedConnection]
