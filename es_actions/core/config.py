"""Client configuration model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_BASE_URL = "http://localhost:9200"
DEFAULT_TIMEOUT = 30.0


class ClientConfig(BaseModel):
    """Connection and parameter-handling settings for a client."""

    base_url: str = Field(DEFAULT_BASE_URL, min_length=1)
    timeout: float = Field(DEFAULT_TIMEOUT, gt=0)
    headers: dict[str, str] = Field(default_factory=dict)
    # Reject unrecognized query parameters instead of dropping them
    strict_params: bool = False

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)
