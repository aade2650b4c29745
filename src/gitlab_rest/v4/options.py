"""
GitLab v4 API option classes.

Options are immutable pydantic models. GET options are encoded as query
parameters with ``to_query()``; POST options are sent as the JSON body with
``to_body()``.
"""

from __future__ import annotations
from typing import Any, Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, Field


# =============================================================================
# Base Options Classes
# =============================================================================

class Options(BaseModel):
    """
    Base class for request options.

    Only fields that were given a value are encoded, always in declaration
    order, so encoding the same options twice gives identical output.
    """

    model_config = {"frozen": True, "populate_by_name": True, "extra": "forbid"}

    def to_query(self) -> List[Tuple[str, str]]:
        """Convert to an ordered list of query parameters."""
        params: List[Tuple[str, str]] = []
        for name, value in self.to_body().items():
            if isinstance(value, bool):
                params.append((name, "true" if value else "false"))
            elif isinstance(value, (list, tuple)):
                params.extend((f"{name}[]", str(item)) for item in value)
            else:
                params.append((name, str(value)))
        return params

    def to_body(self) -> Dict[str, Any]:
        """Convert to an API-compatible dictionary."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ListOptions(Options):
    """
    Pagination options shared by list endpoints.

    Offset pagination (``page``/``per_page``) is the default. Keyset
    pagination is requested with ``pagination="keyset"``; follow-up pages
    are then fetched with ``with_keyset_pagination`` or ``with_next_page``.
    """

    page: Optional[int] = Field(default=None, ge=1, description="Page number, starting at 1")
    per_page: Optional[int] = Field(default=None, ge=1, le=100, description="Results per page")
    pagination: Optional[Literal["keyset"]] = Field(default=None, description="Pagination mode")
    order_by: Optional[str] = Field(default=None, description="Field to order by")
    sort: Optional[Literal["asc", "desc"]] = Field(default=None, description="Sort direction")


# =============================================================================
# Project Repository Storage Move Options
# =============================================================================

class RetrieveAllStorageMovesOptions(ListOptions):
    """Options for listing project repository storage moves."""


class ScheduleAllStorageMovesOptions(Options):
    """Options for scheduling moves of every repository on a storage shard."""

    source_storage_name: Optional[str] = Field(default=None, min_length=1)
    destination_storage_name: Optional[str] = Field(default=None, min_length=1)


class ScheduleStorageMoveForProjectOptions(Options):
    """Options for scheduling the move of a single project's repository."""

    destination_storage_name: Optional[str] = Field(default=None, min_length=1)
