"""Tests for public exceptions."""

import pytest

from omglol.exceptions import (
    OmglolAPIError,
    OmglolConfigError,
    OmglolDecodeError,
    OmglolError,
    OmglolPreconditionError,
    OmglolTransportError,
    OmglolValidationError,
)


class TestOmglolError:
    """Tests for base OmglolError."""

    def test_is_exception(self):
        """OmglolError should be an Exception."""
        assert issubclass(OmglolError, Exception)

    def test_can_be_raised(self):
        """OmglolError should be raisable with message."""
        with pytest.raises(OmglolError) as exc_info:
            raise OmglolError("test error")
        assert str(exc_info.value) == "test error"

    @pytest.mark.parametrize(
        "error_cls",
        [
            OmglolAPIError,
            OmglolConfigError,
            OmglolDecodeError,
            OmglolPreconditionError,
            OmglolTransportError,
            OmglolValidationError,
        ],
    )
    def test_subclasses_inherit_from_omglol_error(self, error_cls):
        """Every client error should be catchable as OmglolError."""
        assert issubclass(error_cls, OmglolError)


class TestOmglolAPIError:
    """Tests for OmglolAPIError."""

    def test_with_message_only(self):
        """Should create error with message only."""
        error = OmglolAPIError("API request failed")
        assert str(error) == "API request failed"
        assert error.status_code is None

    def test_with_status_code(self):
        """Should store status code."""
        error = OmglolAPIError("Not found", status_code=404)
        assert str(error) == "Not found"
        assert error.status_code == 404

    def test_can_be_caught_as_omglol_error(self):
        """Should be catchable as OmglolError."""
        with pytest.raises(OmglolError):
            raise OmglolAPIError("API error", status_code=500)


class TestOmglolPreconditionError:
    """Tests for OmglolPreconditionError."""

    def test_is_runtime_error(self):
        """A missing API key is a programming error, so it is also a RuntimeError."""
        assert issubclass(OmglolPreconditionError, RuntimeError)

    def test_is_distinct_from_api_error(self):
        """Should not be confused with a remote failure."""
        assert not issubclass(OmglolPreconditionError, OmglolAPIError)
        assert not issubclass(OmglolPreconditionError, OmglolTransportError)
