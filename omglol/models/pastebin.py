"""Pastebin models."""

from pydantic import AliasChoices, Field

from omglol.models.base import OmglolModel


class Paste(OmglolModel):
    title: str
    content: str
    modified_on: str | None = None


class PasteResponse(OmglolModel):
    message: str
    paste: Paste = Field(validation_alias=AliasChoices("paste", "pastebin"))


class PastebinResponse(OmglolModel):
    message: str
    pastebin: list[Paste] = Field(validation_alias=AliasChoices("pastebin", "success"))


class PasteCreate(OmglolModel):
    """Payload for creating or replacing a paste.

    Set ``listed`` to make the paste appear in the public paste list.
    """

    title: str
    content: str
    listed: bool | None = None
