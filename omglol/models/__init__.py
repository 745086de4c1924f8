"""Pydantic models for api.omg.lol payloads.

Every reply is decoded into ``Envelope[T]``, where ``T`` is one of the
response models below. Request bodies use the ``*Create``/``*Update`` models.
"""

from omglol.models.account import (
    AccountResponse,
    AccountSettings,
    Address,
    Expiration,
    Verification,
)
from omglol.models.base import (
    Envelope,
    MessageResponse,
    OmglolModel,
    RequestStatus,
    TimeStrings,
)
from omglol.models.dns import DNSRecord, DNSRecords, DNSType
from omglol.models.email import ForwardingAddresses
from omglol.models.now import NowGarden, NowGardenResponse, NowPage, NowResponse
from omglol.models.pastebin import Paste, PastebinResponse, PasteCreate, PasteResponse
from omglol.models.purl import Purl, PurlResponse, PurlsResponse
from omglol.models.service import ServiceStatus
from omglol.models.statuslog import (
    BioUpdate,
    Status,
    StatusCreate,
    StatuslogAllStatuses,
    StatuslogBio,
    StatuslogStatusResponse,
    StatuslogUpdateResponse,
    StatusPostResponse,
    StatusUpdate,
)
from omglol.models.themes import ProfileThemes, Theme
from omglol.models.web import Web, WebUpdate
from omglol.models.weblog import (
    WeblogConfiguration,
    WeblogConfigurationFormats,
    WeblogConfigurationResponse,
    WeblogEntriesResponse,
    WeblogEntry,
    WeblogEntryResponse,
    WeblogMetadata,
    WeblogTemplateResponse,
)

__all__ = [
    "OmglolModel",
    "Envelope",
    "RequestStatus",
    "MessageResponse",
    "TimeStrings",
    "AccountResponse",
    "AccountSettings",
    "Address",
    "Expiration",
    "Verification",
    "DNSType",
    "DNSRecord",
    "DNSRecords",
    "ForwardingAddresses",
    "NowPage",
    "NowResponse",
    "NowGarden",
    "NowGardenResponse",
    "Paste",
    "PasteCreate",
    "PasteResponse",
    "PastebinResponse",
    "Purl",
    "PurlResponse",
    "PurlsResponse",
    "ServiceStatus",
    "Status",
    "StatusCreate",
    "StatusUpdate",
    "StatusPostResponse",
    "StatuslogAllStatuses",
    "StatuslogBio",
    "StatuslogStatusResponse",
    "StatuslogUpdateResponse",
    "BioUpdate",
    "Theme",
    "ProfileThemes",
    "Web",
    "WebUpdate",
    "WeblogConfiguration",
    "WeblogConfigurationFormats",
    "WeblogConfigurationResponse",
    "WeblogEntriesResponse",
    "WeblogEntry",
    "WeblogEntryResponse",
    "WeblogMetadata",
    "WeblogTemplateResponse",
]
