"""Persistent URL (PURL) models."""

from omglol.models.base import OmglolModel


class Purl(OmglolModel):
    name: str
    url: str
    counter: int | None = None


class PurlResponse(OmglolModel):
    message: str
    purl: Purl


class PurlsResponse(OmglolModel):
    message: str
    purls: list[Purl]
