"""
GitLab v4 resource types.

Values returned by the server. They are snapshots of server state at fetch
time and are never mutated by the client. Nullable server fields are
``Optional`` and decode to ``None``, never to a placeholder value.
"""

from __future__ import annotations
from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class GitLabModel(BaseModel):
    """Base for server resources: frozen, unknown fields ignored."""

    model_config = {"frozen": True, "extra": "ignore"}


class StorageMoveProject(GitLabModel):
    """Summary of the project a repository storage move belongs to."""

    id: int
    description: Optional[str] = None
    name: str = ""
    name_with_namespace: str = ""
    path: str = ""
    path_with_namespace: str = ""
    created_at: Optional[datetime] = None


class ProjectRepositoryStorageMove(GitLabModel):
    """
    Status of a project repository storage move.

    GitLab API docs:
    https://docs.gitlab.com/ee/api/project_repository_storage_moves.html
    """

    id: int
    created_at: Optional[datetime] = None
    state: str = ""
    source_storage_name: str = ""
    destination_storage_name: str = ""
    project: Optional[StorageMoveProject] = None
