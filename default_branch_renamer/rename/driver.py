"""Orchestrates renaming the default branch across the account's repositories."""

import time
from typing import Awaitable, Callable

import structlog

from default_branch_renamer.configuration.models import RenameConfig
from default_branch_renamer.github.abc import GitHubClientBase
from default_branch_renamer.rename.batching import rename_in_batches
from default_branch_renamer.rename.filtering import filter_rename_candidates
from default_branch_renamer.rename.results import RenameWorkflowResult
from default_branch_renamer.schemas.repository import RepositoryRecord

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

RepositorySelector = Callable[[list[RepositoryRecord]], Awaitable[list[int]]]


async def run_rename_workflow(
    config: RenameConfig,
    github_adapter: GitHubClientBase,
    select_repositories: RepositorySelector,
) -> RenameWorkflowResult:
    """Run the rename workflow: list, filter, select, then rename in batches.

    Returns early, without asking for a selection, when no repository has
    `config.from_branch` as its default branch.
    """
    repositories = await github_adapter.list_repositories_for_authenticated_user(per_page=config.per_page)

    candidates = filter_rename_candidates(repositories, config.from_branch)
    if not candidates:
        logger.info(f"No repositories found with the default branch {config.from_branch}. Exiting", from_branch=config.from_branch)
        return RenameWorkflowResult(repositories=repositories, candidates=candidates)

    logger.info(
        f"Found {len(candidates)} repositories with the default branch {config.from_branch}",
        candidate_count=len(candidates),
        from_branch=config.from_branch,
    )

    selected_repository_ids = await select_repositories(candidates)
    candidates_by_id = {repository.id: repository for repository in candidates}
    unknown_ids = [repository_id for repository_id in selected_repository_ids if repository_id not in candidates_by_id]
    if unknown_ids:
        raise ValueError(f"Selected repository ids are not rename candidates: {unknown_ids}")
    selected_repositories = [candidates_by_id[repository_id] for repository_id in selected_repository_ids]

    start_time = time.time()
    logger.info("Updating repositories", selected_count=len(selected_repositories), to_branch=config.to_branch)
    rename_results = await rename_in_batches(
        github_adapter,
        selected_repositories,
        config.to_branch,
        batch_size=config.batch_size,
    )
    logger.info(
        "Updated repositories",
        renamed_count=len(rename_results),
        duration=round(time.time() - start_time, 2),
    )

    return RenameWorkflowResult(
        repositories=repositories,
        candidates=candidates,
        selected_repository_ids=selected_repository_ids,
        rename_results=rename_results,
    )
