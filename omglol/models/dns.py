"""DNS record models."""

from enum import Enum

from pydantic import Field

from omglol.models.base import OmglolModel


class DNSType(str, Enum):
    """Record types supported by omg.lol DNS."""

    A = "A"
    AAAA = "AAAA"
    CAA = "CAA"
    CNAME = "CNAME"
    MX = "MX"
    NS = "NS"
    SRV = "SRV"
    TXT = "TXT"

    def __str__(self) -> str:
        return self.value


class DNSRecord(OmglolModel):
    id: int
    name: str
    data: str
    priority: int | None = None
    ttl: int
    created_at: str | None = None
    updated_at: str | None = None
    record_type: DNSType = Field(alias="type")


class DNSRecords(OmglolModel):
    message: str
    dns: list[DNSRecord]
