"""Runs the rename procedure over a selection of repositories in bounded batches."""

import asyncio
from typing import Sequence

import structlog

from default_branch_renamer.github.abc import GitHubClientBase
from default_branch_renamer.rename.exceptions import BatchRenameError
from default_branch_renamer.rename.procedure import rename_default_branch
from default_branch_renamer.rename.results import BranchRenameResult
from default_branch_renamer.schemas.repository import RepositoryRecord
from default_branch_renamer.utils.constants import DEFAULT_BATCH_SIZE
from default_branch_renamer.utils.helpers import chunk

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def rename_in_batches(
    github_adapter: GitHubClientBase,
    repositories: Sequence[RepositoryRecord],
    to_branch: str,
    batch_size: int = DEFAULT_BATCH_SIZE,
) -> list[BranchRenameResult]:
    """Rename the default branch of each repository, `batch_size` at a time.

    Batches run one after another in selection order. Within a batch every
    rename runs concurrently, and the next batch starts only once all of them
    have finished. The first failure cancels the renames still in flight in
    its batch, and no further batch is started.

    Raises:
        BatchRenameError: If any rename in a batch fails. `failures` holds each
            BranchRenameError raised before the batch was cancelled.
    """
    batches = chunk(repositories, batch_size)
    results: list[BranchRenameResult] = []

    for index, batch in enumerate(batches, start=1):
        logger.info(f"Updating repositories ({index}/{len(batches)})", batch=index, batch_count=len(batches), batch_size=len(batch))
        try:
            async with asyncio.TaskGroup() as task_group:
                tasks = [task_group.create_task(rename_default_branch(github_adapter, repository, to_branch)) for repository in batch]
        except ExceptionGroup as exc_group:
            failures = list(exc_group.exceptions)
            logger.error("Batch failed, skipping remaining batches", batch=index, batch_count=len(batches), failure_count=len(failures))
            raise BatchRenameError(index, len(batches), failures) from failures[0]
        results.extend(task.result() for task in tasks)

    return results
