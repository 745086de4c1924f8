"""Profile theme models."""

from omglol.models.base import OmglolModel


class Theme(OmglolModel):
    id: str
    name: str
    created: str
    updated: str
    author: str
    author_url: str
    version: str
    license: str
    description: str
    preview_css: str


class ProfileThemes(OmglolModel):
    """All profile themes, keyed by theme id."""

    message: str
    themes: dict[str, Theme]
