"""Response metadata carried in Smartcar's ``SC-*`` headers."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

DATA_AGE_HEADER = "sc-data-age"
REQUEST_ID_HEADER = "sc-request-id"
UNIT_SYSTEM_HEADER = "sc-unit-system"

# e.g. "2022-09-05T19:57:31.037Z"
DATA_AGE_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"


def parse_data_age(value: str) -> datetime | None:
    """Parse an ``SC-Data-Age`` value, returning *None* when malformed."""
    try:
        return datetime.strptime(value, DATA_AGE_FORMAT).replace(tzinfo=UTC)
    except ValueError:
        logger.debug("Ignoring unparseable SC-Data-Age header %r", value)
        return None


class Meta(BaseModel):
    """Informational headers attached to a response.

    https://smartcar.com/docs/api/#response-headers
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    data_age: datetime | None = Field(default=None, alias=DATA_AGE_HEADER)
    request_id: str | None = Field(default=None, alias=REQUEST_ID_HEADER)
    unit_system: str | None = Field(default=None, alias=UNIT_SYSTEM_HEADER)

    @field_validator("data_age", mode="before")
    @classmethod
    def _lenient_data_age(cls, value: Any) -> Any:
        if isinstance(value, str):
            return parse_data_age(value)
        return value

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> Meta:
        """Build metadata from response headers (case-insensitive lookup)."""
        lowered = {k.lower(): v for k, v in headers.items()}
        data_age = lowered.get(DATA_AGE_HEADER)
        return cls(
            data_age=parse_data_age(data_age) if data_age is not None else None,
            request_id=lowered.get(REQUEST_ID_HEADER),
            unit_system=lowered.get(UNIT_SYSTEM_HEADER),
        )
