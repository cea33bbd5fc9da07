"""GitHub hook models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Hook(BaseModel):
    """A webhook on a GitHub repository.

    Only the fields travis-kit reads are modelled; the rest of the API
    payload is ignored.
    """

    model_config = ConfigDict(extra="ignore")

    id: int
    name: str
    active: bool = False
    config: dict[str, Any] = Field(default_factory=dict)
