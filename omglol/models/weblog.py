"""Weblog models."""

from pydantic import AliasChoices, Field

from omglol.models.base import OmglolModel


class WeblogMetadata(OmglolModel):
    date: str
    slug: str


class WeblogEntry(OmglolModel):
    location: str
    title: str
    date: int
    status: str
    body: str
    source: str
    metadata: WeblogMetadata
    output: str
    entry: str
    entry_type: str = Field(alias="type")


class WeblogEntryResponse(OmglolModel):
    """A single weblog entry; the latest-post endpoint names it ``post``."""

    message: str
    entry: WeblogEntry = Field(validation_alias=AliasChoices("entry", "post"))


class WeblogEntriesResponse(OmglolModel):
    message: str
    entries: list[WeblogEntry]


class WeblogConfiguration(OmglolModel):
    weblog_title: str
    weblog_description: str
    author: str
    separator: str
    tag_path: str
    timezone: str
    date_format: str
    default_post: str
    feed_post_count: str
    recents_posts_format: str
    post_list_format: str
    search_status: str
    search_status_success_message: str
    search_results_failure_message: str
    search_results_format: str


class WeblogConfigurationFormats(OmglolModel):
    """The configuration as a parsed object, a JSON string and raw text."""

    object: WeblogConfiguration
    json_text: str = Field(alias="json")
    raw: str


class WeblogConfigurationResponse(OmglolModel):
    message: str
    configuration: WeblogConfigurationFormats


class WeblogTemplateResponse(OmglolModel):
    message: str
    template: str | None = None
