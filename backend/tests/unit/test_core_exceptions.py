"""
Unit tests for the custom exception hierarchy.

Verifies inheritance chains, attribute assignment, and message formatting
for all exception classes in inventory_search.core.exceptions.

Version: 1.0.0
"""
import pytest

from inventory_search.core.exceptions import (
    ConnectionTimeoutError,
    InventorySearchException,
    NonRetryableError,
    NotFoundError,
    RetryableError,
    TransportFailure,
    ValidationError,
)


pytestmark = pytest.mark.unit


class TestBaseException:
    """Tests for InventorySearchException base class."""

    def test_is_exception(self):
        assert issubclass(InventorySearchException, Exception)

    def test_can_be_raised_and_caught(self):
        with pytest.raises(InventorySearchException):
            raise InventorySearchException("test error")

    def test_message_preserved(self):
        exc = InventorySearchException("something went wrong")
        assert str(exc) == "something went wrong"


class TestRetryableErrors:
    """Tests for the retryable error branch of the hierarchy."""

    def test_retryable_inherits_from_base(self):
        assert issubclass(RetryableError, InventorySearchException)

    def test_transport_failure_inheritance(self):
        assert issubclass(TransportFailure, RetryableError)

    def test_transport_failure_attributes(self):
        exc = TransportFailure(service="Inventory API", message="Server exploded", status_code=500)
        assert exc.service == "Inventory API"
        assert exc.status_code == 500
        assert exc.detail == "Server exploded"
        assert str(exc) == "Server exploded"

    def test_transport_failure_status_optional(self):
        assert TransportFailure("Inventory API", "down").status_code is None

    def test_connection_timeout_default_message(self):
        exc = ConnectionTimeoutError("Inventory API")
        assert isinstance(exc, TransportFailure)
        assert str(exc) == "Request timed out."


class TestNonRetryableErrors:
    """Tests for the non-retryable error branch."""

    @pytest.mark.parametrize("cls", [ValidationError, NotFoundError])
    def test_inheritance(self, cls):
        assert issubclass(cls, NonRetryableError)
        assert not issubclass(cls, RetryableError)

    def test_validation_error_message(self):
        assert str(ValidationError("Sort field is not supported.")) == "Sort field is not supported."

    def test_branches_are_disjoint(self):
        assert not issubclass(TransportFailure, NonRetryableError)
