"""
Custom exception hierarchy for Inventory Search.

Exceptions are categorized as:
- RetryableError: Transient errors where a later attempt may succeed
  (the failed request's cache entry is dropped so the next attempt refetches)
- NonRetryableError: Permanent errors that are surfaced and never retried

A superseded search is not an error: it is carried by asyncio.CancelledError
internally and reported to the user as an informational notice.
"""


class InventorySearchException(Exception):
    """Base exception for Inventory Search."""
    pass


# ============================================
# RETRYABLE ERRORS
# ============================================
class RetryableError(InventorySearchException):
    """
    Base class for errors where retrying might succeed.

    - Network errors and timeouts
    - Remote 5xx responses
    - Failure envelopes returned by the remote API
    """
    pass


class TransportFailure(RetryableError):
    """
    Error talking to the remote inventory API.

    The message is the user-facing text (the envelope message when the
    server supplied one).
    """
    def __init__(self, service: str, message: str, status_code: int = None):
        self.service = service
        self.status_code = status_code
        self.detail = message
        super().__init__(message)


class ConnectionTimeoutError(TransportFailure):
    """Request timed out before the remote API answered."""
    def __init__(self, service: str, message: str = "Request timed out."):
        super().__init__(service, message)


# ============================================
# NON-RETRYABLE ERRORS
# ============================================
class NonRetryableError(InventorySearchException):
    """
    Base class for errors that should NOT trigger retry.

    - Validation failures (bad page/size/by/sort)
    - Lookups for things that do not exist
    """
    pass


class ValidationError(NonRetryableError):
    """Invalid query parameters - rejected before execution."""
    pass


class NotFoundError(NonRetryableError):
    """Nothing matched; only the HTTP boundary raises this."""
    pass
