"""Base model configuration for all data structures."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Immutable model; unknown fields in API payloads are ignored."""

    model_config = ConfigDict(frozen=True, extra="ignore")
