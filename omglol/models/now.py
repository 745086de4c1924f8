"""Now page and Now Garden models."""

from omglol.models.base import OmglolModel, TimeStrings


class NowPage(OmglolModel):
    content: str
    updated: int
    listed: int
    nudge: int
    metadata: str


class NowResponse(OmglolModel):
    message: str
    now: NowPage


class NowGarden(OmglolModel):
    address: str
    url: str
    updated: TimeStrings


class NowGardenResponse(OmglolModel):
    message: str
    garden: list[NowGarden]
