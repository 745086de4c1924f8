"""Tests for the forwarding destination formatter."""

import json

import pytest

from omglol.email import format_forwarding_destinations, validate_email
from omglol.exceptions import OmglolValidationError


class TestFormatForwardingDestinations:
    """Tests for format_forwarding_destinations()."""

    def test_two_addresses(self):
        """Should join destinations with a comma and a space in one string."""
        body = format_forwarding_destinations(["a@example.net", "b@example.net"])
        assert body == '{"destination": "a@example.net, b@example.net"}'

    def test_single_address(self):
        """Should not add a separator for a single destination."""
        body = format_forwarding_destinations(["a@example.net"])
        assert body == '{"destination": "a@example.net"}'

    def test_each_address_appears_once(self):
        """Should list every address exactly once, in order."""
        addresses = ["a@example.net", "b@example.net", "c@example.net"]
        body = format_forwarding_destinations(addresses)
        assert json.loads(body) == {"destination": "a@example.net, b@example.net, c@example.net"}

    def test_bare_string_is_one_destination(self):
        """Should treat a plain string as a single address, not a list of characters."""
        body = format_forwarding_destinations("a@example.net")
        assert body == '{"destination": "a@example.net"}'

    def test_empty_list_rejected(self):
        """Should reject an empty destination list."""
        with pytest.raises(OmglolValidationError):
            format_forwarding_destinations([])

    def test_invalid_address_rejected(self):
        """Should reject a destination that is not an email address."""
        with pytest.raises(OmglolValidationError) as exc_info:
            format_forwarding_destinations(["a@example.net", "not-an-email"])
        assert "not-an-email" in str(exc_info.value)


class TestValidateEmail:
    """Tests for validate_email()."""

    def test_valid_address(self):
        """Should return a valid lowercase address as given."""
        assert validate_email("me@example.net") == "me@example.net"

    def test_missing_domain(self):
        """Should reject an address without a domain."""
        with pytest.raises(OmglolValidationError):
            validate_email("me@")

    def test_mixed_case_returned_verbatim(self):
        """Should return the caller's spelling rather than a normalized form."""
        assert validate_email("Me@Example.NET") == "Me@Example.NET"

    def test_display_name_form_rejected(self):
        """Should reject a 'Name <addr>' display-name address."""
        with pytest.raises(OmglolValidationError):
            validate_email("John <a@example.net>")


class TestForwardingBodyPreservesInput:
    """Tests that the forwarding body carries the addresses as given."""

    def test_case_preserved(self):
        """Should not rewrite the case of a destination."""
        body = format_forwarding_destinations(["Me@Example.NET"])
        assert body == '{"destination": "Me@Example.NET"}'

    def test_display_name_rejected(self):
        """Should reject a display-name destination instead of stripping it."""
        with pytest.raises(OmglolValidationError):
            format_forwarding_destinations(["John <a@example.net>"])
