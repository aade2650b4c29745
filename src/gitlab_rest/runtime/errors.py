"""
GitLab Client Error Model

This module provides the error handling framework for the GitLab REST client.
Every stage of the request pipeline (build, dispatch, decode) reports failures
through one of the error kinds below.
"""

from __future__ import annotations
from typing import Optional, Dict, Any, TYPE_CHECKING
from enum import IntEnum

if TYPE_CHECKING:
    from ..v4.response import Response


class ErrorCode(IntEnum):
    """Error kinds raised by the request pipeline."""

    UNKNOWN = 1

    # Raised before anything is sent
    INVALID_REQUEST = 100

    # Raised while sending
    TRANSPORT = 200
    CANCELLED = 201

    # Raised after a response was received
    API_STATUS = 300
    DECODE = 400


class GitLabError(Exception):
    """
    Base class for all GitLab client errors.

    Carries a message, an error code, optional details and the underlying
    exception, mirroring the structure of the server's own error payloads.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[BaseException] = None):
        """
        Initialize a GitLab error.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.cause = cause

    @property
    def response(self) -> Optional["Response"]:
        """Response metadata, when the error happened after a response arrived."""
        return None

    def __str__(self) -> str:
        parts = [f"[{self.code.name}] {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.cause:
            parts.append(f"Caused by: {self.cause}")
        return " | ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result: Dict[str, Any] = {
            "code": self.code.value,
            "kind": self.code.name,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.cause:
            result["cause"] = str(self.cause)
        return result


class InvalidRequestError(GitLabError):
    """Malformed input detected before dispatch."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None,
                 cause: Optional[BaseException] = None):
        super().__init__(message, ErrorCode.INVALID_REQUEST, details, cause)


class TransportError(GitLabError):
    """Network level failure (DNS, connect, TLS, read). No response exists."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None,
                 cause: Optional[BaseException] = None):
        super().__init__(message, ErrorCode.TRANSPORT, details, cause)


class CancelledError(GitLabError):
    """The caller cancelled the request or its deadline expired."""

    def __init__(self, message: str = "Request cancelled",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[BaseException] = None):
        super().__init__(message, ErrorCode.CANCELLED, details, cause)


class DecodeError(GitLabError):
    """A success response whose body could not be decoded into the target."""

    def __init__(self, message: str = "Failed to decode response body",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[BaseException] = None,
                 response: Optional["Response"] = None):
        super().__init__(message, ErrorCode.DECODE, details, cause)
        self._response = response

    @property
    def response(self) -> Optional["Response"]:
        return self._response


class APIStatusError(GitLabError):
    """
    Non-2xx response from the server.

    The response metadata is always attached so callers can still inspect
    headers and pagination links.
    """

    def __init__(self, message: str, status_code: int, body: str = "",
                 response: Optional["Response"] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.API_STATUS, details)
        self.status_code = status_code
        self.body = body
        self._response = response

    @property
    def response(self) -> Optional["Response"]:
        return self._response

    def __str__(self) -> str:
        return f"[{self.code.name}] {self.status_code}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result["status_code"] = self.status_code
        return result


class UnauthorizedError(APIStatusError):
    """401 Unauthorized."""


class ForbiddenError(APIStatusError):
    """403 Forbidden."""


class NotFoundError(APIStatusError):
    """404 Not Found."""


_STATUS_ERRORS = {
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
}


def error_from_response(response: "Response", message: Optional[str] = None) -> APIStatusError:
    """
    Create an appropriate error from a non-2xx response.

    Args:
        response: Response metadata for the failed call
        message: Message parsed from the error body, if any

    Returns:
        APIStatusError (or a status specific subclass)
    """
    status = response.status_code
    body = response.text
    if message is None:
        # Undecodable body: fall back to the raw status line and body text
        message = f"{status} {response.reason}".strip()
        if body:
            message = f"{message}: {body}"

    error_class = _STATUS_ERRORS.get(status, APIStatusError)
    return error_class(
        message,
        status_code=status,
        body=body,
        response=response,
        details={"method": response.method, "url": response.url},
    )


__all__ = [
    "ErrorCode",
    "GitLabError",
    "InvalidRequestError",
    "TransportError",
    "CancelledError",
    "DecodeError",
    "APIStatusError",
    "UnauthorizedError",
    "ForbiddenError",
    "NotFoundError",
    "error_from_response",
]
