"""Contains results of the rename workflow."""

from default_branch_renamer.rename.models import RENAME_STEPS, RenameStep
from default_branch_renamer.schemas.repository import RepositoryRecord


class BranchRenameResult:
    """Contains the outcome of renaming the default branch of one repository."""

    def __init__(
        self,
        repository: RepositoryRecord,
        from_branch: str,
        to_branch: str,
        sha: str,
        completed_steps: list[RenameStep],
    ) -> None:
        """Initialize the result with the repository, the branch names, the commit, and the completed steps."""
        self.repository = repository
        self.from_branch = from_branch
        self.to_branch = to_branch
        self.sha = sha
        self.completed_steps = completed_steps

    @property
    def completed(self) -> bool:
        """Whether every step of the rename ran."""
        return tuple(self.completed_steps) == RENAME_STEPS


class RenameWorkflowResult:
    """Contains results of the rename workflow."""

    def __init__(
        self,
        repositories: list[RepositoryRecord],
        candidates: list[RepositoryRecord],
        selected_repository_ids: list[int] | None = None,
        rename_results: list[BranchRenameResult] | None = None,
    ) -> None:
        """Initialize the result with the listed repositories, the candidates, the selection, and the rename results."""
        self.repositories = repositories
        self.candidates = candidates
        self.selected_repository_ids = selected_repository_ids or []
        self.rename_results = rename_results or []
