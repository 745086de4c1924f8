"""Profile web page models."""

from pydantic import Field

from omglol.models.base import OmglolModel


class Web(OmglolModel):
    """Profile page content and its rendering settings."""

    message: str
    content: str
    css: str | None = None
    head: str | None = None
    # 1 when the profile has been verified
    verified: int | None = None
    pfp: str | None = None
    metadata: str | None = None
    branding: str | None = None
    page_type: str | None = Field(default=None, alias="type")


class WebUpdate(OmglolModel):
    """Payload for replacing the profile page content.

    ``publish`` controls whether the new content goes live immediately.
    """

    content: str
    publish: bool | None = None
