"""Base model and response envelope shared by every endpoint."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class OmglolModel(BaseModel):
    """Base for all API models.

    Strict mode rejects type coercion (``"5"`` for an int), unknown keys in a
    payload are ignored, and aliased fields accept their Python name too.
    """

    model_config = ConfigDict(strict=True, extra="ignore", populate_by_name=True)


class RequestStatus(OmglolModel):
    """Status record the API reports inside every reply."""

    status_code: int = Field(ge=0, le=65535)
    success: bool


class Envelope(OmglolModel, Generic[T]):
    """The ``{"request": ..., "response": ...}`` wrapper of every API reply.

    Parametrize with the payload model, e.g. ``Envelope[DNSRecords]``.
    """

    request: RequestStatus
    response: T


class MessageResponse(OmglolModel):
    message: str


class TimeStrings(OmglolModel):
    """A moment in time rendered in several formats."""

    unix_epoch_time: str
    iso_8601_time: str
    rfc_2822_time: str
    relative_time: str
    message: str | None = None
