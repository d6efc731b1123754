"""Unified error taxonomy shared by every payment processor.

Every failure of a checkout call surfaces as an `AfriPayError` carrying one of
two kinds. There are no structured error codes; the upstream HTTP status only
ever appears inside the message text.
"""

from enum import Enum


class ErrorKind(str, Enum):
    MISSING_CREDENTIALS = "missing_credentials"
    REQUEST_FAILED = "request_failed"


class AfriPayError(Exception):
    """Base error raised by checkout operations."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = ErrorKind(kind)
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value!r}, message={self.message!r})"


class MissingCredentialsError(AfriPayError):
    """A required provider secret is absent or empty."""

    def __init__(self, message: str) -> None:
        super().__init__(ErrorKind.MISSING_CREDENTIALS, message)


class RequestFailedError(AfriPayError):
    """Upstream call failed, or the request was rejected before sending."""

    def __init__(self, message: str) -> None:
        super().__init__(ErrorKind.REQUEST_FAILED, message)
