"""Response envelopes and shared fragments."""

from typing import Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict

DataT = TypeVar("DataT")


class DataResponse(BaseModel, Generic[DataT]):
    """Success envelope carrying a payload."""

    success: bool = True
    data: DataT


class MessageResponse(BaseModel):
    """Success envelope carrying a message."""

    success: bool = True
    message: str


class ErrorResponse(BaseModel):
    """Failure envelope produced by the exception handlers."""

    success: bool = False
    error: str
    details: list[dict] | dict | None = None


class RefSummary(BaseModel):
    """A referenced category, tag or parent resolved to its display fields."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    slug: str


class HealthCheckResponse(BaseModel):
    """Health check payload."""

    status: str
    version: str
    environment: str
    session_store: str
