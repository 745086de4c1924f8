"""Clients for api.omg.lol.

Two handle types gate which endpoints can be called:

    OmglolClient     - unauthenticated, public endpoints only
    AuthOmglolClient - carries an API key, public and private endpoints

Example usage:
    from omglol import OmglolClient

    client = OmglolClient()
    print(client.service_status().response.members)

    authed = client.auth("YOUR_API_KEY")
    records = authed.get_dns_records("foobar").response.dns

An authenticated handle is always a new object; ``client`` above stays
unauthenticated and both share one connection pool.
"""

import os
from collections.abc import Sequence
from types import TracebackType
from typing import Any, Self
from urllib.parse import quote

import httpx

from omglol._internal.dispatch import (
    TEXT_CONTENT_TYPE,
    Dispatcher,
    redact_token,
)
from omglol._internal.http import API_ORIGIN, DEFAULT_TIMEOUT, create_http_client
from omglol.email import format_forwarding_destinations, validate_email
from omglol.exceptions import OmglolConfigError
from omglol.models import (
    AccountResponse,
    Address,
    BioUpdate,
    DNSRecords,
    Envelope,
    Expiration,
    ForwardingAddresses,
    MessageResponse,
    NowGardenResponse,
    NowResponse,
    PastebinResponse,
    PasteCreate,
    PasteResponse,
    ProfileThemes,
    PurlResponse,
    PurlsResponse,
    ServiceStatus,
    StatusCreate,
    StatuslogAllStatuses,
    StatuslogBio,
    StatuslogStatusResponse,
    StatuslogUpdateResponse,
    StatusPostResponse,
    StatusUpdate,
    Web,
    WeblogConfigurationResponse,
    WeblogEntriesResponse,
    WeblogEntryResponse,
    WeblogTemplateResponse,
    WebUpdate,
)


def _segment(value: str | int) -> str:
    """Percent-encode a caller-supplied path segment."""
    return quote(str(value), safe="@")


def _settings_from_env() -> dict[str, Any]:
    """Read transport settings shared by both client types.

    Optional environment variables:
        OMGLOL_BASE_URL: Override the API origin.
        OMGLOL_TIMEOUT: Request timeout in seconds.
        OMGLOL_DEBUG: Set to "1" to write requests and responses to stderr.
    """
    return {
        "base_url": os.environ.get("OMGLOL_BASE_URL") or None,
        "timeout": float(os.environ.get("OMGLOL_TIMEOUT", str(DEFAULT_TIMEOUT))),
        "debug": os.environ.get("OMGLOL_DEBUG", "") == "1",
    }


class _BaseClient:
    """Transport ownership and the endpoints that need no API key."""

    def __init__(
        self,
        *,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: httpx.Client | None = None,
        debug: bool = False,
    ) -> None:
        self._owns_transport = http_client is None
        self._http = http_client if http_client is not None else create_http_client(timeout=timeout)
        self._dispatcher = Dispatcher(
            self._http,
            base_url=base_url or API_ORIGIN,
            api_key=api_key,
            debug=debug,
        )

    @property
    def base_url(self) -> str:
        """API origin that request paths are appended to."""
        return self._dispatcher.base_url

    @property
    def is_authenticated(self) -> bool:
        """Whether this handle carries an API key."""
        return self._dispatcher.has_credential

    def close(self) -> None:
        """Close the connection pool if this handle created it.

        Handles made by `OmglolClient.auth()` share the parent's pool, so closing
        the parent also ends them: their next call raises `OmglolTransportError`.
        Closing such a derived handle leaves the pool open.
        """
        if self._owns_transport:
            self._http.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self.base_url!r})"

    # =========================================================================
    # Service
    # =========================================================================

    def service_status(self) -> Envelope[ServiceStatus]:
        """Get omg.lol member, address and profile counts."""
        return self._dispatcher.dispatch(
            ServiceStatus, requires_auth=False, method="GET", path="service/info"
        )

    def get_profile_themes(self) -> Envelope[ProfileThemes]:
        """List every profile theme, keyed by theme id."""
        return self._dispatcher.dispatch(
            ProfileThemes, requires_auth=False, method="GET", path="theme/list"
        )

    def get_public_address_info(self, address: str) -> Envelope[Address]:
        """Get the public registration, expiration and verification info of an address."""
        return self._dispatcher.dispatch(
            Address,
            requires_auth=False,
            method="GET",
            path=f"address/{_segment(address)}/info",
        )

    # =========================================================================
    # Status log
    # =========================================================================

    def get_statuslog_bio(self, address: str) -> Envelope[StatuslogBio]:
        """Get the status log bio of an address."""
        return self._dispatcher.dispatch(
            StatuslogBio,
            requires_auth=False,
            method="GET",
            path=f"address/{_segment(address)}/statuses/bio",
        )

    def get_all_statuses(self, address: str) -> Envelope[StatuslogAllStatuses]:
        """Get every status an address has posted."""
        return self._dispatcher.dispatch(
            StatuslogAllStatuses,
            requires_auth=False,
            method="GET",
            path=f"address/{_segment(address)}/statuses",
        )

    def get_status(self, address: str, status_id: str) -> Envelope[StatuslogStatusResponse]:
        """Get a single status by its id."""
        return self._dispatcher.dispatch(
            StatuslogStatusResponse,
            requires_auth=False,
            method="GET",
            path=f"address/{_segment(address)}/statuses/{_segment(status_id)}",
        )

    # =========================================================================
    # Pastebin
    # =========================================================================

    def get_listed_pastes(self, address: str) -> Envelope[PastebinResponse]:
        """Get the pastes an address has marked as listed."""
        return self._dispatcher.dispatch(
            PastebinResponse,
            requires_auth=False,
            method="GET",
            path=f"address/{_segment(address)}/pastebin",
        )

    def get_paste(self, address: str, title: str) -> Envelope[PasteResponse]:
        """Get a single paste by its title."""
        return self._dispatcher.dispatch(
            PasteResponse,
            requires_auth=False,
            method="GET",
            path=f"address/{_segment(address)}/pastebin/{_segment(title)}",
        )

    # =========================================================================
    # Weblog and Now
    # =========================================================================

    def get_latest_weblog_post(self, address: str) -> Envelope[WeblogEntryResponse]:
        """Get the most recently published weblog post of an address."""
        return self._dispatcher.dispatch(
            WeblogEntryResponse,
            requires_auth=False,
            method="GET",
            path=f"address/{_segment(address)}/weblog/post/latest",
        )

    def get_now_page(self, address: str) -> Envelope[NowResponse]:
        """Get the Now page of an address."""
        return self._dispatcher.dispatch(
            NowResponse,
            requires_auth=False,
            method="GET",
            path=f"address/{_segment(address)}/now",
        )

    def get_now_garden(self) -> Envelope[NowGardenResponse]:
        """List every listed Now page in the Now Garden."""
        return self._dispatcher.dispatch(
            NowGardenResponse, requires_auth=False, method="GET", path="now/garden"
        )


class OmglolClient(_BaseClient):
    """Unauthenticated client for api.omg.lol.

    Restricted to public endpoints. Use `auth()` to obtain an
    `AuthOmglolClient` for private ones; no network call happens either way.
    """

    def __init__(
        self,
        *,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: httpx.Client | None = None,
        debug: bool = False,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: API origin. Defaults to https://api.omg.lol/.
            timeout: Request timeout in seconds. Ignored if http_client is given.
            http_client: Existing httpx.Client to send requests with. It is
                not closed by `close()`.
            debug: Write requests and raw responses to stderr.
        """
        super().__init__(
            base_url=base_url,
            timeout=timeout,
            http_client=http_client,
            debug=debug,
        )

    @classmethod
    def from_env(cls) -> "OmglolClient":
        """Create an unauthenticated client from environment variables.

        Optional environment variables:
            OMGLOL_BASE_URL: Override the API origin.
            OMGLOL_TIMEOUT: Request timeout in seconds.
            OMGLOL_DEBUG: Set to "1" to enable debug output.

        Raises:
            ValueError: OMGLOL_TIMEOUT is not a number.
        """
        return cls(**_settings_from_env())

    def auth(self, api_key: str) -> "AuthOmglolClient":
        """Create an authenticated client able to access private endpoints.

        The new client shares this client's connection pool. This client is
        left untouched and remains usable. Closing this client closes the
        shared pool, after which the returned client raises
        `OmglolTransportError` on every call.

        Args:
            api_key: omg.lol API key.
        """
        return AuthOmglolClient(
            api_key,
            base_url=self.base_url,
            http_client=self._http,
            debug=self._dispatcher.debug,
        )


class AuthOmglolClient(_BaseClient):
    """Authenticated client for api.omg.lol.

    Every request to a private endpoint carries ``Authorization: Bearer <api_key>``.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: httpx.Client | None = None,
        debug: bool = False,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: omg.lol API key.
            base_url: API origin. Defaults to https://api.omg.lol/.
            timeout: Request timeout in seconds. Ignored if http_client is given.
            http_client: Existing httpx.Client to send requests with. It is
                not closed by `close()`.
            debug: Write requests and raw responses to stderr.

        Raises:
            OmglolConfigError: api_key is empty.
        """
        if not api_key:
            raise OmglolConfigError("An API key is required for an authenticated client")
        super().__init__(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            http_client=http_client,
            debug=debug,
        )
        self._api_key_hint = redact_token(api_key)

    @classmethod
    def from_env(cls) -> "AuthOmglolClient":
        """Create an authenticated client from environment variables.

        Required environment variables:
            OMGLOL_API_KEY: The API key.

        Optional environment variables are the same as `OmglolClient.from_env`.

        Raises:
            OmglolConfigError: OMGLOL_API_KEY is not set.
            ValueError: OMGLOL_TIMEOUT is not a number.
        """
        api_key = os.environ.get("OMGLOL_API_KEY")
        if not api_key:
            raise OmglolConfigError("OMGLOL_API_KEY is not set")
        return cls(api_key, **_settings_from_env())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self.base_url!r}, api_key={self._api_key_hint!r})"

    # =========================================================================
    # Account and address
    # =========================================================================

    def get_account_info(self, email: str) -> Envelope[AccountResponse]:
        """Get information about the account registered to ``email``.

        Raises:
            OmglolValidationError: email is not a valid email address.
        """
        return self._dispatcher.dispatch(
            AccountResponse,
            requires_auth=True,
            method="GET",
            path=f"account/{_segment(validate_email(email))}/info",
        )

    def get_private_address_info(self, address: str) -> Envelope[Address]:
        """Get address info including the private fields visible to its owner."""
        return self._dispatcher.dispatch(
            Address,
            requires_auth=True,
            method="GET",
            path=f"address/{_segment(address)}/info",
        )

    def get_address_expiration(self, address: str) -> Envelope[Expiration]:
        """Get whether and when an address expires."""
        return self._dispatcher.dispatch(
            Expiration,
            requires_auth=True,
            method="GET",
            path=f"address/{_segment(address)}/expiration",
        )

    # =========================================================================
    # DNS
    # =========================================================================

    def get_dns_records(self, address: str) -> Envelope[DNSRecords]:
        """List the DNS records of an address."""
        return self._dispatcher.dispatch(
            DNSRecords,
            requires_auth=True,
            method="GET",
            path=f"address/{_segment(address)}/dns",
        )

    def delete_dns_record(self, address: str, record_id: str | int) -> Envelope[MessageResponse]:
        """Delete a DNS record by its numeric id."""
        return self._dispatcher.dispatch(
            MessageResponse,
            requires_auth=True,
            method="DELETE",
            path=f"address/{_segment(address)}/dns/{_segment(record_id)}",
        )

    # =========================================================================
    # Email
    # =========================================================================

    def get_forwarding_addresses(self, address: str) -> Envelope[ForwardingAddresses]:
        """Get where mail to an address is forwarded."""
        return self._dispatcher.dispatch(
            ForwardingAddresses,
            requires_auth=True,
            method="GET",
            path=f"address/{_segment(address)}/email",
        )

    def set_forwarding_addresses(
        self, address: str, destinations: Sequence[str]
    ) -> Envelope[ForwardingAddresses]:
        """Replace the forwarding destinations of an address.

        Args:
            address: The omg.lol address whose mail is forwarded.
            destinations: One or more email addresses to forward to.

        Raises:
            OmglolValidationError: destinations is empty or holds an invalid address.
        """
        return self._dispatcher.dispatch(
            ForwardingAddresses,
            requires_auth=True,
            method="POST",
            path=f"address/{_segment(address)}/email",
            body=format_forwarding_destinations(destinations),
        )

    # =========================================================================
    # Status log
    # =========================================================================

    def post_status(self, address: str, status: StatusCreate) -> Envelope[StatusPostResponse]:
        """Post a new status to the status log of an address."""
        return self._dispatcher.dispatch(
            StatusPostResponse,
            requires_auth=True,
            method="POST",
            path=f"address/{_segment(address)}/statuses",
            body=status.model_dump_json(exclude_none=True),
        )

    def update_status(self, address: str, status: StatusUpdate) -> Envelope[StatuslogUpdateResponse]:
        """Edit an existing status; ``status.id`` selects which one."""
        return self._dispatcher.dispatch(
            StatuslogUpdateResponse,
            requires_auth=True,
            method="POST",
            path=f"address/{_segment(address)}/status",
            body=status.model_dump_json(exclude_none=True),
        )

    def update_statuslog_bio(self, address: str, bio: str) -> Envelope[StatuslogBio]:
        """Replace the status log bio of an address."""
        return self._dispatcher.dispatch(
            StatuslogBio,
            requires_auth=True,
            method="POST",
            path=f"address/{_segment(address)}/statuses/bio",
            body=BioUpdate(content=bio).model_dump_json(),
        )

    # =========================================================================
    # Pastebin
    # =========================================================================

    def upload_paste(self, address: str, paste: PasteCreate) -> Envelope[PasteResponse]:
        """Create a paste, or replace the paste with the same title."""
        return self._dispatcher.dispatch(
            PasteResponse,
            requires_auth=True,
            method="POST",
            path=f"address/{_segment(address)}/pastebin",
            body=paste.model_dump_json(exclude_none=True),
        )

    def delete_paste(self, address: str, title: str) -> Envelope[MessageResponse]:
        """Delete a paste by its title."""
        return self._dispatcher.dispatch(
            MessageResponse,
            requires_auth=True,
            method="DELETE",
            path=f"address/{_segment(address)}/pastebin/{_segment(title)}",
        )

    # =========================================================================
    # PURLs
    # =========================================================================

    def get_all_purls(self, address: str) -> Envelope[PurlsResponse]:
        """List every PURL of an address."""
        return self._dispatcher.dispatch(
            PurlsResponse,
            requires_auth=True,
            method="GET",
            path=f"address/{_segment(address)}/purls",
        )

    def get_purl(self, address: str, name: str) -> Envelope[PurlResponse]:
        """Get a single PURL by its name."""
        return self._dispatcher.dispatch(
            PurlResponse,
            requires_auth=True,
            method="GET",
            path=f"address/{_segment(address)}/purl/{_segment(name)}",
        )

    def delete_purl(self, address: str, name: str) -> Envelope[MessageResponse]:
        """Delete a PURL by its name."""
        return self._dispatcher.dispatch(
            MessageResponse,
            requires_auth=True,
            method="DELETE",
            path=f"address/{_segment(address)}/purl/{_segment(name)}",
        )

    # =========================================================================
    # Profile web page
    # =========================================================================

    def get_web_page(self, address: str) -> Envelope[Web]:
        """Get the profile page content and settings of an address."""
        return self._dispatcher.dispatch(
            Web,
            requires_auth=True,
            method="GET",
            path=f"address/{_segment(address)}/web",
        )

    def update_web_page(self, address: str, web: WebUpdate) -> Envelope[MessageResponse]:
        """Replace the profile page content of an address."""
        return self._dispatcher.dispatch(
            MessageResponse,
            requires_auth=True,
            method="POST",
            path=f"address/{_segment(address)}/web",
            body=web.model_dump_json(exclude_none=True),
        )

    # =========================================================================
    # Weblog
    # =========================================================================

    def get_weblog_entries(self, address: str) -> Envelope[WeblogEntriesResponse]:
        """List every weblog entry of an address."""
        return self._dispatcher.dispatch(
            WeblogEntriesResponse,
            requires_auth=True,
            method="GET",
            path=f"address/{_segment(address)}/weblog/entries",
        )

    def get_weblog_entry(self, address: str, entry_id: str) -> Envelope[WeblogEntryResponse]:
        """Get a single weblog entry by its id."""
        return self._dispatcher.dispatch(
            WeblogEntryResponse,
            requires_auth=True,
            method="GET",
            path=f"address/{_segment(address)}/weblog/entry/{_segment(entry_id)}",
        )

    def create_weblog_entry(
        self, address: str, entry_id: str, content: str
    ) -> Envelope[WeblogEntryResponse]:
        """Create or replace a weblog entry.

        Args:
            address: The omg.lol address owning the weblog.
            entry_id: Entry identifier to write to.
            content: Raw entry source, front matter included. Sent as plain text.
        """
        return self._dispatcher.dispatch(
            WeblogEntryResponse,
            requires_auth=True,
            method="POST",
            path=f"address/{_segment(address)}/weblog/entry/{_segment(entry_id)}",
            body=content,
            content_type=TEXT_CONTENT_TYPE,
        )

    def delete_weblog_entry(self, address: str, entry_id: str) -> Envelope[MessageResponse]:
        """Delete a weblog entry by its id."""
        return self._dispatcher.dispatch(
            MessageResponse,
            requires_auth=True,
            method="DELETE",
            path=f"address/{_segment(address)}/weblog/delete/{_segment(entry_id)}",
        )

    def get_weblog_configuration(self, address: str) -> Envelope[WeblogConfigurationResponse]:
        """Get the weblog configuration of an address."""
        return self._dispatcher.dispatch(
            WeblogConfigurationResponse,
            requires_auth=True,
            method="GET",
            path=f"address/{_segment(address)}/weblog/configuration",
        )

    def update_weblog_configuration(
        self, address: str, configuration: str
    ) -> Envelope[MessageResponse]:
        """Replace the weblog configuration with raw configuration text."""
        return self._dispatcher.dispatch(
            MessageResponse,
            requires_auth=True,
            method="POST",
            path=f"address/{_segment(address)}/weblog/configuration",
            body=configuration,
            content_type=TEXT_CONTENT_TYPE,
        )

    def get_weblog_template(self, address: str) -> Envelope[WeblogTemplateResponse]:
        """Get the weblog template of an address."""
        return self._dispatcher.dispatch(
            WeblogTemplateResponse,
            requires_auth=True,
            method="GET",
            path=f"address/{_segment(address)}/weblog/template",
        )

    def update_weblog_template(self, address: str, template: str) -> Envelope[MessageResponse]:
        """Replace the weblog template of an address."""
        return self._dispatcher.dispatch(
            MessageResponse,
            requires_auth=True,
            method="POST",
            path=f"address/{_segment(address)}/weblog/template",
            body=template,
            content_type=TEXT_CONTENT_TYPE,
        )
