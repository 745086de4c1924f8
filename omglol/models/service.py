"""Service-wide information models."""

from omglol.models.base import OmglolModel


class ServiceStatus(OmglolModel):
    message: str
    members: int
    addresses: int
    profiles: int
