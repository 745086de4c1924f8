"""Request dispatch for the omglol client.

WARNING: This is a system-level module used by the client classes.
Do not call directly from user code.
"""

from omglol._internal.dispatch.dispatcher import (
    JSON_CONTENT_TYPE,
    TEXT_CONTENT_TYPE,
    Dispatcher,
)
from omglol._internal.dispatch.redaction import redact_headers, redact_token

__all__ = [
    "Dispatcher",
    "JSON_CONTENT_TYPE",
    "TEXT_CONTENT_TYPE",
    "redact_headers",
    "redact_token",
]
