"""Selects the repositories whose default branch can be renamed."""

from typing import Iterable

from default_branch_renamer.schemas.repository import RepositoryRecord


def is_rename_candidate(repository: RepositoryRecord, from_branch: str) -> bool:
    """Return True for non-fork repositories whose default branch is exactly `from_branch`."""
    return repository.default_branch == from_branch and not repository.fork


def filter_rename_candidates(repositories: Iterable[RepositoryRecord], from_branch: str) -> list[RepositoryRecord]:
    """Filter repositories down to rename candidates, sorted by full name for display."""
    candidates = [repository for repository in repositories if is_rename_candidate(repository, from_branch)]
    return sorted(candidates, key=lambda repository: repository.full_name)
