"""Pydantic models describing the repositories a rename run operates on."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class RepositoryRecord(BaseModel):
    """Snapshot of a repository owned by the authenticated account."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    full_name: str
    owner_login: str
    default_branch: str
    fork: bool

    @classmethod
    def from_github(cls, repository: Any) -> "RepositoryRecord":
        """Build a record from a githubkit repository model (or anything shaped like one)."""
        return cls(
            id=repository.id,
            name=repository.name,
            full_name=repository.full_name,
            owner_login=repository.owner.login,
            default_branch=repository.default_branch,
            fork=repository.fork,
        )
