"""Request dispatcher for api.omg.lol.

Every endpoint method funnels through `Dispatcher.dispatch`, which performs
exactly one HTTP exchange and turns it into an `Envelope[T]` or an exception.
"""

import sys
from typing import TypeVar

import httpx
from pydantic import ValidationError

from omglol._internal.dispatch.redaction import redact_headers
from omglol._internal.http import API_ORIGIN
from omglol.exceptions import (
    OmglolAPIError,
    OmglolDecodeError,
    OmglolPreconditionError,
    OmglolTransportError,
)
from omglol.models.base import Envelope

T = TypeVar("T")

JSON_CONTENT_TYPE = "application/json"
TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"


class Dispatcher:
    """Builds, sends and decodes a single API request.

    The dispatcher holds no mutable state: the HTTP client is thread-safe and
    the API key is fixed at construction, so one instance can serve concurrent
    callers without locking.
    """

    def __init__(
        self,
        http_client: httpx.Client,
        *,
        base_url: str = API_ORIGIN,
        api_key: str | None = None,
        debug: bool = False,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            http_client: Transport used for every request.
            base_url: API origin that request paths are appended to.
            api_key: Bearer token for authenticated endpoints.
            debug: Write requests and raw responses to stderr.
        """
        self._http = http_client
        self._base_url = base_url if base_url.endswith("/") else f"{base_url}/"
        self._api_key = api_key
        self._debug = debug

    @property
    def base_url(self) -> str:
        """API origin with a trailing slash."""
        return self._base_url

    @property
    def has_credential(self) -> bool:
        """Whether an API key is attached to this dispatcher."""
        return self._api_key is not None

    @property
    def debug(self) -> bool:
        """Whether requests and responses are written to stderr."""
        return self._debug

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            print(f"[omglol] {message}", file=sys.stderr)

    def url_for(self, path: str) -> str:
        """Compose the full URL for an endpoint path such as ``service/info``."""
        if "://" in path:
            raise ValueError(f"path must be relative to the API origin, got {path!r}")
        return self._base_url + path.lstrip("/")

    def dispatch(
        self,
        response_model: type[T],
        *,
        requires_auth: bool,
        method: str,
        path: str,
        body: str | None = None,
        content_type: str = JSON_CONTENT_TYPE,
    ) -> Envelope[T]:
        """Send one request and decode the reply.

        Args:
            response_model: Model the ``response`` member of the reply decodes into.
            requires_auth: Attach the bearer token. The dispatcher must hold one.
            method: HTTP verb.
            path: Endpoint path relative to the API origin.
            body: Already serialized request body, sent as UTF-8.
            content_type: Content-Type sent along with ``body``.

        Returns:
            The decoded envelope.

        Raises:
            OmglolPreconditionError: requires_auth is set but there is no API key.
            OmglolTransportError: The request did not complete at the transport
                level, or the HTTP client has been closed.
            OmglolAPIError: The server answered with a status other than 200.
            OmglolDecodeError: The body could not be decoded (bad content
                encoding, or not valid JSON for the envelope).
        """
        if requires_auth and self._api_key is None:
            raise OmglolPreconditionError(
                f"{method} {path} requires an API key; call auth() on the client first"
            )

        headers: dict[str, str] = {}
        if requires_auth:
            headers["Authorization"] = f"Bearer {self._api_key}"
        content: bytes | None = None
        if body is not None:
            headers["Content-Type"] = content_type
            content = body.encode("utf-8")

        request = self._http.build_request(
            method,
            self.url_for(path),
            headers=headers,
            content=content,
        )
        self._log_debug(f"{request.method} {request.url} {redact_headers(request.headers)}")

        if self._http.is_closed:
            raise OmglolTransportError(
                f"{method} {path} failed: the HTTP transport has been closed"
            )

        try:
            response = self._http.send(request)
        except httpx.DecodingError as e:
            self._log_debug(f"Body decoding error: {e!r}")
            raise OmglolDecodeError(
                f"Could not decode the body of {method} {path}: {e}"
            ) from e
        except httpx.RequestError as e:
            self._log_debug(f"Transport error: {e!r}")
            raise OmglolTransportError(f"{method} {path} failed: {e}") from e

        if response.status_code != 200:
            self._log_debug(f"Request failed with status {response.status_code}")
            raise OmglolAPIError(
                f"Request error. HTTP status code: {response.status_code}.",
                status_code=response.status_code,
            )

        raw = response.text
        self._log_debug(f"Response: {raw}")

        try:
            return Envelope[response_model].model_validate_json(raw)  # type: ignore[valid-type]
        except ValidationError as e:
            raise OmglolDecodeError(
                f"Could not decode {response_model.__name__} from {method} {path}: {e}"
            ) from e
