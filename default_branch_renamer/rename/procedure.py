"""Renames the default branch of a single repository."""

import structlog

from default_branch_renamer.github.abc import GitHubClientBase
from default_branch_renamer.rename.exceptions import BranchRenameError
from default_branch_renamer.rename.models import RenameStep
from default_branch_renamer.rename.results import BranchRenameResult
from default_branch_renamer.schemas.repository import RepositoryRecord

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def rename_default_branch(
    github_adapter: GitHubClientBase,
    repository: RepositoryRecord,
    to_branch: str,
) -> BranchRenameResult:
    """Rename the default branch of a repository to `to_branch`.

    The rename is four dependent remote calls:

    1. Resolve the commit the current default branch points to.
    2. Create the new branch at that commit.
    3. Switch the repository's default branch setting to the new branch.
    4. Delete the old branch.

    If a step fails, no later step is attempted and nothing is rolled back. The
    failure is logged with the repository's full name and raised as a
    BranchRenameError whose `step` and `completed_steps` tell the caller which
    state the repository was left in.
    """
    from_branch = repository.default_branch
    owner = repository.owner_login
    repo = repository.name
    completed_steps: list[RenameStep] = []
    step = RenameStep.RESOLVE_COMMIT

    logger.debug("Renaming default branch", repository=repository.full_name, from_branch=from_branch, to_branch=to_branch)
    try:
        sha = await github_adapter.get_branch_sha(owner, repo, from_branch)
        completed_steps.append(step)

        step = RenameStep.CREATE_REF
        await github_adapter.create_branch_ref(owner, repo, to_branch, sha)
        completed_steps.append(step)

        step = RenameStep.UPDATE_DEFAULT_BRANCH
        await github_adapter.update_default_branch(owner, repo, to_branch)
        completed_steps.append(step)

        step = RenameStep.DELETE_REF
        await github_adapter.delete_branch_ref(owner, repo, from_branch)
        completed_steps.append(step)
    except Exception as exc:
        logger.error(
            "Error updating repository",
            repository=repository.full_name,
            step=step.value,
            completed_steps=[completed.value for completed in completed_steps],
            error=str(exc),
            error_type=type(exc).__name__,
        )
        raise BranchRenameError(repository, step, list(completed_steps)) from exc

    logger.info("Renamed default branch", repository=repository.full_name, from_branch=from_branch, to_branch=to_branch, sha=sha)
    return BranchRenameResult(
        repository=repository,
        from_branch=from_branch,
        to_branch=to_branch,
        sha=sha,
        completed_steps=completed_steps,
    )
