"""Base ABC for GitHub clients."""

from abc import ABC, abstractmethod
from typing import Any

from default_branch_renamer.schemas.repository import RepositoryRecord


class GitHubClientBase(ABC):
    """Base ABC for GitHub clients."""

    # Repository listing
    @abstractmethod
    async def list_repositories_for_authenticated_user(self, per_page: int = 100, **kwargs: Any) -> list[RepositoryRecord]:
        """List every repository visible to the authenticated account."""
        pass

    # Repository settings
    @abstractmethod
    async def update_default_branch(self, owner: str, repo: str, default_branch: str) -> Any:
        """Change the default branch setting of a repository."""
        pass

    # Branch ref operations
    @abstractmethod
    async def get_branch_sha(self, owner: str, repo: str, branch_name: str) -> str:
        """Get the SHA of the commit a branch ref points to."""
        pass

    @abstractmethod
    async def create_branch_ref(self, owner: str, repo: str, branch_name: str, sha: str) -> Any:
        """Create a branch ref pointing at the given commit."""
        pass

    @abstractmethod
    async def delete_branch_ref(self, owner: str, repo: str, branch_name: str) -> None:
        """Delete a branch ref."""
        pass
