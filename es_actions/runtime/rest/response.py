"""Transport response model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Response(BaseModel):
    """Decoded HTTP response returned by the transport."""

    status: int = Field(..., ge=100, le=599)
    headers: dict[str, str] = Field(default_factory=dict)
    body: Any = None

    model_config = ConfigDict(frozen=True)
