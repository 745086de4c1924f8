"""Status log models."""

from pydantic import Field

from omglol.models.base import OmglolModel


class Status(OmglolModel):
    """A status log entry as returned by the API."""

    id: str
    address: str
    created: str
    relative_time: str
    emoji: str
    content: str
    external_url: str | None = None


class StatuslogStatusResponse(OmglolModel):
    message: str
    status: Status


class StatuslogAllStatuses(OmglolModel):
    message: str
    statuses: list[Status]


class StatuslogUpdateResponse(OmglolModel):
    message: str
    id: str
    url: str


class StatusPostResponse(OmglolModel):
    message: str
    id: str
    status: str
    url: str
    external_url: str | None = None


class StatuslogBio(OmglolModel):
    message: str
    bio: str
    css: str | None = None


class StatusCreate(OmglolModel):
    """Payload for posting a new status."""

    emoji: str
    content: str
    external_url: str | None = None


class StatusUpdate(StatusCreate):
    """Payload for editing an existing status, identified by ``id``."""

    id: str = Field(min_length=1)


class BioUpdate(OmglolModel):
    content: str
