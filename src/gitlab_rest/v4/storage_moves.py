"""
Project repository storage moves.

GitLab API docs:
https://docs.gitlab.com/ee/api/project_repository_storage_moves.html
"""

from __future__ import annotations
from typing import TYPE_CHECKING, List, Optional, Tuple, Union

from .options import (
    RetrieveAllStorageMovesOptions,
    ScheduleAllStorageMovesOptions,
    ScheduleStorageMoveForProjectOptions,
)
from .request import RequestOption, parse_id, parse_int_id
from .response import Response
from .types import ProjectRepositoryStorageMove

if TYPE_CHECKING:
    from .client import GitLabClient

StorageMoves = List[ProjectRepositoryStorageMove]


class ProjectRepositoryStorageMoveService:
    """
    Handles the project repository storage move endpoints.

    Every method builds one request, sends it once and returns
    ``(result, response)``. Errors from any stage are raised unchanged;
    those raised after a response arrived carry it as ``error.response``.
    """

    def __init__(self, client: GitLabClient):
        self.client = client

    def retrieve_all_storage_moves(
        self,
        opts: Optional[RetrieveAllStorageMovesOptions] = None,
        *options: RequestOption,
    ) -> Tuple[StorageMoves, Response]:
        """
        Retrieve all repository storage moves accessible by the authenticated user.

        GitLab API docs:
        https://docs.gitlab.com/ee/api/project_repository_storage_moves.html#retrieve-all-project-repository-storage-moves
        """
        req = self.client.new_request("GET", "project_repository_storage_moves", opts, options)
        return self.client.do(req, StorageMoves)

    def retrieve_all_storage_moves_for_project(
        self,
        project: Union[int, str],
        opts: Optional[RetrieveAllStorageMovesOptions] = None,
        *options: RequestOption,
    ) -> Tuple[StorageMoves, Response]:
        """
        Retrieve all repository storage moves for a single project.

        GitLab API docs:
        https://docs.gitlab.com/ee/api/project_repository_storage_moves.html#retrieve-all-repository-storage-moves-for-a-project
        """
        path = f"projects/{parse_id(project, 'project')}/repository_storage_moves"
        req = self.client.new_request("GET", path, opts, options)
        return self.client.do(req, StorageMoves)

    def get_storage_move(
        self,
        storage_move: int,
        *options: RequestOption,
    ) -> Tuple[ProjectRepositoryStorageMove, Response]:
        """
        Get a single repository storage move.

        GitLab API docs:
        https://docs.gitlab.com/ee/api/project_repository_storage_moves.html#get-a-single-project-repository-storage-move
        """
        path = f"project_repository_storage_moves/{parse_int_id(storage_move, 'storage move')}"
        req = self.client.new_request("GET", path, None, options)
        return self.client.do(req, ProjectRepositoryStorageMove)

    def get_storage_move_for_project(
        self,
        project: Union[int, str],
        storage_move: int,
        *options: RequestOption,
    ) -> Tuple[ProjectRepositoryStorageMove, Response]:
        """
        Get a single repository storage move for a project.

        GitLab API docs:
        https://docs.gitlab.com/ee/api/project_repository_storage_moves.html#get-a-single-repository-storage-move-for-a-project
        """
        path = (f"projects/{parse_id(project, 'project')}/repository_storage_moves/"
                f"{parse_int_id(storage_move, 'storage move')}")
        req = self.client.new_request("GET", path, None, options)
        return self.client.do(req, ProjectRepositoryStorageMove)

    def schedule_all_storage_moves(
        self,
        opts: Optional[ScheduleAllStorageMovesOptions] = None,
        *options: RequestOption,
    ) -> Tuple[StorageMoves, Response]:
        """
        Schedule all repositories on a storage shard to be moved.

        GitLab API docs:
        https://docs.gitlab.com/ee/api/project_repository_storage_moves.html#schedule-repository-storage-moves-for-all-projects-on-a-storage-shard
        """
        req = self.client.new_request("POST", "project_repository_storage_moves", opts, options)
        return self.client.do(req, StorageMoves)

    def schedule_storage_move_for_project(
        self,
        project: Union[int, str],
        opts: Optional[ScheduleStorageMoveForProjectOptions] = None,
        *options: RequestOption,
    ) -> Tuple[StorageMoves, Response]:
        """
        Schedule a repository to be moved for a project.

        GitLab API docs:
        https://docs.gitlab.com/ee/api/project_repository_storage_moves.html#schedule-a-repository-storage-move-for-a-project
        """
        path = f"projects/{parse_id(project, 'project')}/repository_storage_moves"
        req = self.client.new_request("POST", path, opts, options)
        return self.client.do(req, StorageMoves)
