"""Account and address information models."""

from omglol.models.base import OmglolModel, TimeStrings


class AccountSettings(OmglolModel):
    owner: str
    # communication and date_format are missing for some accounts
    communication: str | None = None
    date_format: str | None = None
    web_editor: str


class AccountResponse(OmglolModel):
    message: str
    email: str
    name: str
    api_key: str
    created: TimeStrings
    settings: AccountSettings


class Verification(OmglolModel):
    message: str
    verified: bool


class Expiration(OmglolModel):
    """Expiration state of an address.

    The time fields are only present when the address has an expiry date.
    """

    message: str
    expired: bool
    will_expire: bool | None = None
    unix_epoch_time: str | None = None
    iso_8601_time: str | None = None
    rfc_2822_time: str | None = None
    relative_time: str | None = None


class Address(OmglolModel):
    """An omg.lol address as returned by ``address/{address}/info``."""

    address: str
    message: str
    registration: TimeStrings
    expiration: Expiration
    verification: Verification
    owner: str | None = None
