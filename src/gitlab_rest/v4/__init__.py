"""
GitLab REST API v4 client.

Exports the client, its request/response types, option classes and the
resource services built on top of them.
"""

from .client import GitLabClient
from .options import (
    Options,
    ListOptions,
    RetrieveAllStorageMovesOptions,
    ScheduleAllStorageMovesOptions,
    ScheduleStorageMoveForProjectOptions,
)
from .request import (
    APIRequest,
    RequestOption,
    parse_id,
    parse_int_id,
    path_escape,
    with_header,
    with_headers,
    with_token,
    with_sudo,
    with_query_params,
    with_cancel_token,
    with_timeout,
    with_offset_pagination,
    with_keyset_pagination,
    with_next_page,
)
from .response import Response
from .types import ProjectRepositoryStorageMove, StorageMoveProject
from .storage_moves import ProjectRepositoryStorageMoveService

__all__ = [
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
    "parse_id",
    "parse_int_id",
    "path_escape",
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
