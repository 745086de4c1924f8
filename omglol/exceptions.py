"""Public exceptions for the omglol client."""


class OmglolError(Exception):
    """Base exception for all omglol client errors."""


class OmglolTransportError(OmglolError):
    """The request never produced an HTTP response (connect, DNS, timeout)."""


class OmglolAPIError(OmglolError):
    """The API answered with a status code other than 200."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class OmglolDecodeError(OmglolError):
    """A 200 response body was not valid JSON or did not match the expected model."""


class OmglolValidationError(OmglolError):
    """Validation error for caller-supplied request data."""


class OmglolConfigError(OmglolError):
    """Configuration error (missing env vars, invalid config)."""


class OmglolPreconditionError(OmglolError, RuntimeError):
    """An authenticated endpoint was called on a handle without an API key.

    This signals a programming error rather than a remote failure.
    """
