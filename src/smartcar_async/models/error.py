from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SmartcarErrorBody(BaseModel):
    """Smartcar API v2.0 error response.

    See https://smartcar.com/docs/api/#errors
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    error_type: str = Field(alias="type")
    code: str | None = None
    description: str
    doc_url: str = Field(alias="docURL")
    status_code: int
    resolution: dict[str, str | None]
    request_id: str
