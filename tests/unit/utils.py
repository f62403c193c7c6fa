"""Helpers shared by the unit tests."""

import asyncio
from typing import Any

from default_branch_renamer.github.abc import GitHubClientBase
from default_branch_renamer.schemas.repository import RepositoryRecord


def make_repository(
    repository_id: int,
    name: str | None = None,
    owner: str = "octocat",
    default_branch: str = "master",
    fork: bool = False,
) -> RepositoryRecord:
    """Build a RepositoryRecord with sensible defaults."""
    name = name or f"repo-{repository_id}"
    return RepositoryRecord(
        id=repository_id,
        name=name,
        full_name=f"{owner}/{name}",
        owner_login=owner,
        default_branch=default_branch,
        fork=fork,
    )


class FakeGitHubAdapter(GitHubClientBase):
    """In-memory GitHub adapter that records every call and can fail on demand."""

    def __init__(self, repositories: list[RepositoryRecord] | None = None, failing_repositories: set[str] | None = None) -> None:
        """Initialize the fake with the repositories to list and the repository names whose ref creation fails."""
        self.repositories = repositories or []
        self.failing_repositories = failing_repositories or set()
        self.calls: list[tuple[str, ...]] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def list_repositories_for_authenticated_user(self, per_page: int = 100, **kwargs: Any) -> list[RepositoryRecord]:
        """Return the configured repositories."""
        self.calls.append(("list", str(per_page)))
        return list(self.repositories)

    async def get_branch_sha(self, owner: str, repo: str, branch_name: str) -> str:
        """Return a SHA derived from the repository name, yielding to the event loop first."""
        self.calls.append(("get_branch_sha", repo, branch_name))
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(0)
        finally:
            self.in_flight -= 1
        return f"sha-{repo}"

    async def create_branch_ref(self, owner: str, repo: str, branch_name: str, sha: str) -> Any:
        """Record the ref creation, failing for configured repositories."""
        self.calls.append(("create_branch_ref", repo, branch_name, sha))
        if repo in self.failing_repositories:
            raise RuntimeError(f"Reference already exists in {repo}")
        return None

    async def update_default_branch(self, owner: str, repo: str, default_branch: str) -> Any:
        """Record the default branch update."""
        self.calls.append(("update_default_branch", repo, default_branch))
        return None

    async def delete_branch_ref(self, owner: str, repo: str, branch_name: str) -> None:
        """Record the ref deletion."""
        self.calls.append(("delete_branch_ref", repo, branch_name))

    def repositories_touched(self) -> set[str]:
        """Names of repositories that saw at least one branch call."""
        return {call[1] for call in self.calls if call[0] != "list"}
