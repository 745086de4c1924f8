"""omglol: typed Python client for api.omg.lol.

Public API:
    OmglolClient - Unauthenticated client, public endpoints only
    AuthOmglolClient - Authenticated client, all endpoints
    omglol.models - Pydantic models for request and response payloads
    omglol.exceptions - Error types raised by the clients
"""

from omglol._version import __version__
from omglol.client import AuthOmglolClient, OmglolClient
from omglol.email import format_forwarding_destinations
from omglol.exceptions import (
    OmglolAPIError,
    OmglolConfigError,
    OmglolDecodeError,
    OmglolError,
    OmglolPreconditionError,
    OmglolTransportError,
    OmglolValidationError,
)
from omglol.models import Envelope

__all__ = [
    "__version__",
    "OmglolClient",
    "AuthOmglolClient",
    "Envelope",
    "format_forwarding_destinations",
    "OmglolError",
    "OmglolAPIError",
    "OmglolConfigError",
    "OmglolDecodeError",
    "OmglolPreconditionError",
    "OmglolTransportError",
    "OmglolValidationError",
]
