"""Helpers for the email forwarding endpoint."""

from collections.abc import Sequence

from pydantic import EmailStr, TypeAdapter, ValidationError

from omglol.exceptions import OmglolValidationError

_EMAIL_ADAPTER = TypeAdapter(EmailStr)


def validate_email(address: str) -> str:
    """Validate a single bare email address.

    The address is returned exactly as given; validation never rewrites its
    case or spelling. The ``Name <addr>`` display-name form is rejected.

    Raises:
        OmglolValidationError: The address is not a valid bare email address.
    """
    if "<" in address or ">" in address:
        raise OmglolValidationError(f"Invalid email address: {address!r}")
    try:
        _EMAIL_ADAPTER.validate_python(address)
    except ValidationError as e:
        raise OmglolValidationError(f"Invalid email address: {address!r}") from e
    return address


def format_forwarding_destinations(addresses: Sequence[str]) -> str:
    """Build the request body for setting forwarding destinations.

    The endpoint expects a single comma-separated string rather than a JSON
    array, so the body is assembled by hand::

        {"destination": "a@example.net, b@example.net"}

    Args:
        addresses: One or more destination email addresses.

    Returns:
        The JSON body text.

    Raises:
        OmglolValidationError: The list is empty or an address is invalid.
    """
    if isinstance(addresses, str):
        addresses = [addresses]
    if not addresses:
        raise OmglolValidationError("At least one forwarding destination is required")
    validated = [validate_email(address) for address in addresses]
    return '{"destination": "' + ", ".join(validated) + '"}'
