from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

_CAMEL_EXTRA_ALLOW = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")


class Capability(BaseModel):
    """Whether the vehicle supports one endpoint of the requested scope."""

    model_config = _CAMEL_EXTRA_ALLOW

    permission: str
    endpoint: str
    capable: bool
    reason: str | None = None


class Compatibility(BaseModel):
    model_config = _CAMEL_EXTRA_ALLOW

    compatible: bool
    reason: str | None = None
    capabilities: list[Capability] = []


class CompatibilityOptions(BaseModel):
    """Overrides for a compatibility lookup.

    ``client_id`` / ``client_secret`` fall back to the client's settings.
    """

    client_id: str | None = None
    client_secret: str | None = None
    flags: dict[str, str] | None = None
