"""Custom exceptions for the rename module."""

from default_branch_renamer.rename.models import RenameStep
from default_branch_renamer.schemas.repository import RepositoryRecord


class BranchRenameError(Exception):
    """Raised when one step of a default branch rename fails.

    Steps listed in `completed_steps` were applied on GitHub and are not rolled
    back. The underlying error is available as `__cause__`.
    """

    def __init__(self, repository: RepositoryRecord, step: RenameStep, completed_steps: list[RenameStep]) -> None:
        super().__init__(f"Error updating {repository.full_name}: step '{step.value}' failed")
        self.repository = repository
        self.step = step
        self.completed_steps = completed_steps


class BatchRenameError(Exception):
    """Raised when at least one rename in a batch fails; later batches are not started."""

    def __init__(self, batch_number: int, batch_count: int, failures: list[BaseException]) -> None:
        super().__init__(f"Updating repositories failed in batch {batch_number}/{batch_count} with {len(failures)} error(s)")
        self.batch_number = batch_number
        self.batch_count = batch_count
        self.failures = failures
