"""
GitLab REST Python Client

Typed client for the GitLab REST API. Every resource service goes through
one request pipeline: build the request, send it once, decode the body into
pydantic models and report failures through a single error taxonomy.
"""

from .config import ClientConfig
from .runtime.errors import *
from .runtime.cancel import CancelToken
from .v4 import *

__version__ = "0.4.0"
__all__ = [
    "ClientConfig",
    "CancelToken",

    # Errors
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

    # Client
    "GitLabClient",
    "APIRequest",
    "Response",

    # Options
    "Options",
    "ListOptions",
    "RetrieveAllStorageMovesOptions",
    "ScheduleAllStorageMovesOptions",
    "ScheduleStorageMoveForProjectOptions",

    # Request options
    "RequestOption",
    "with_header",
    "with_headers",
    "with_token",
    "with_sudo",
    "with_query_params",
    "with_cancel_token",
    "with_timeout",
    "with_offset_pagination",
    "with_keyset_pagination",
    "with_next_page",

    # Resources
    "ProjectRepositoryStorageMove",
    "StorageMoveProject",
    "ProjectRepositoryStorageMoveService",
]
