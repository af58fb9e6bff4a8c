"""
Exception hierarchy for the Clockify client.
"""
from typing import Optional


class ClockifyError(Exception):
    """Base exception for every failure raised by the client."""

    def __init__(self, message: str, stage: str = ""):
        self.message = message
        self.stage = stage
        super().__init__(f"{stage}: {message}" if stage else message)


class RequestBuildError(ClockifyError):
    """An option carried a value that cannot be encoded for the operation."""

    def __init__(self, message: str, key: Optional[str] = None):
        self.key = key
        super().__init__(message, stage="build")


class TransportError(ClockifyError):
    """The request could not be completed successfully."""

    status_code: Optional[int] = None


class ClockifyAPIError(TransportError):
    """Clockify answered with a non-success status code."""

    def __init__(self, code: str, message: str, status_code: int = 500, stage: str = ""):
        self.code = code
        self.status_code = status_code
        super().__init__(message, stage=stage)


class NetworkError(TransportError):
    """DNS, connection or timeout failure below the HTTP layer."""


class RequestCancelledError(TransportError):
    """The request context was cancelled before or during the call."""


class DeadlineExceededError(RequestCancelledError):
    """The request context deadline passed before the call completed."""


class DecodeError(ClockifyError):
    """The response body could not be decoded into the declared shape."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        expected: Optional[str] = None,
        stage: str = "json unmarshal",
    ):
        self.field = field
        self.expected = expected
        super().__init__(message, stage=stage)
