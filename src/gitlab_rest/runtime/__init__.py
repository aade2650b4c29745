"""Runtime helpers for the GitLab REST client"""

from .errors import (
    ErrorCode,
    GitLabError,
    InvalidRequestError,
    TransportError,
    CancelledError,
    DecodeError,
    APIStatusError,
    UnauthorizedError,
    ForbiddenError,
    NotFoundError,
    error_from_response,
)
from .codec import decode_json, parse_error_message
from .cancel import CancelToken

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
    "decode_json",
    "parse_error_message",
    "CancelToken",
]
