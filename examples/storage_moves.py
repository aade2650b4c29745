#!/usr/bin/env python3
"""
Example: Inspect and schedule project repository storage moves.

This example demonstrates:
1. Listing every storage move page by page
2. Fetching a single move for a project
3. Scheduling a move with a deadline
4. Handling the client's error kinds

Requirements:
- GITLAB_URL and an administrator GITLAB_TOKEN in the environment
"""

import argparse
import logging
import sys

from gitlab_rest import (
    APIStatusError,
    CancelToken,
    CancelledError,
    GitLabClient,
    GitLabError,
    RetrieveAllStorageMovesOptions,
    ScheduleStorageMoveForProjectOptions,
    TransportError,
    with_cancel_token,
    with_next_page,
)


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def list_all_moves(client: GitLabClient) -> None:
    opts = RetrieveAllStorageMovesOptions(per_page=50)
    moves, resp = client.storage_moves.retrieve_all_storage_moves(opts)
    while resp.has_next:
        page, resp = client.storage_moves.retrieve_all_storage_moves(opts, with_next_page(resp))
        moves.extend(page)

    for move in moves:
        created = move.created_at.isoformat() if move.created_at else "unknown"
        project = move.project.path_with_namespace if move.project else "?"
        logger.info(f"#{move.id} {project}: {move.source_storage_name} -> "
                    f"{move.destination_storage_name} [{move.state}] created {created}")
    logger.info(f"{len(moves)} storage moves, rate limit remaining: {resp.rate_limit_remaining}")


def schedule_move(client: GitLabClient, project: str, destination: str, timeout: float) -> None:
    token = CancelToken.with_timeout(timeout)
    opts = ScheduleStorageMoveForProjectOptions(destination_storage_name=destination)
    moves, _ = client.storage_moves.schedule_storage_move_for_project(
        project, opts, with_cancel_token(token)
    )
    for move in moves:
        logger.info(f"Scheduled move #{move.id} to {move.destination_storage_name}: {move.state}")
        current, _ = client.storage_moves.get_storage_move_for_project(project, move.id)
        logger.info(f"Move #{current.id} is now {current.state}")


def main() -> int:
    parser = argparse.ArgumentParser(description="Repository storage move example")
    parser.add_argument("--schedule", metavar="PROJECT", help="project id or path to move")
    parser.add_argument("--destination", default="default", help="destination storage shard")
    parser.add_argument("--timeout", type=float, default=30.0, help="deadline in seconds")
    args = parser.parse_args()

    with GitLabClient() as client:
        try:
            if args.schedule:
                project = int(args.schedule) if args.schedule.isdigit() else args.schedule
                schedule_move(client, project, args.destination, args.timeout)
            else:
                list_all_moves(client)
        except APIStatusError as e:
            logger.error(f"GitLab answered {e.status_code}: {e.message}")
            return 1
        except CancelledError as e:
            logger.error(f"Gave up: {e.message}")
            return 1
        except TransportError as e:
            logger.error(f"Could not reach {client.base_url}: {e.message}")
            return 1
        except GitLabError as e:
            logger.error(str(e))
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
