"""Email forwarding models."""

from omglol.models.base import OmglolModel


class ForwardingAddresses(OmglolModel):
    """Forwarding configuration of an ``@omg.lol`` mailbox."""

    message: str
    destination_string: str
    destination_array: list[str]
    address: str
    email_address: str
