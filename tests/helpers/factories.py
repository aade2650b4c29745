"""Sample server payloads."""

from typing import Any, Dict


def mk_project(**overrides: Any) -> Dict[str, Any]:
    project = {
        "id": 1,
        "description": None,
        "name": "project1",
        "name_with_namespace": "John Doe2 / project1",
        "path": "project1",
        "path_with_namespace": "namespace1/project1",
        "created_at": "2020-05-07T04:27:17.016Z",
    }
    project.update(overrides)
    return project


def mk_storage_move(**overrides: Any) -> Dict[str, Any]:
    move = {
        "id": 123,
        "created_at": "2020-05-07T04:27:17.234Z",
        "state": "scheduled",
        "source_storage_name": "default",
        "destination_storage_name": "storage2",
        "project": mk_project(),
    }
    move.update(overrides)
    return move
