"""GitHub client adapter for the githubkit library."""

from functools import wraps
from typing import Any, Awaitable, Callable, Self, TypeVar

import structlog
from githubkit import Response
from githubkit.exception import RequestFailed
from githubkit.versions.latest.models import FullRepository, GitRef, Repository

from default_branch_renamer.schemas.repository import RepositoryRecord
from default_branch_renamer.utils.constants import DEFAULT_GITHUB_API_URL, FULL_HEADS_REF_PREFIX, HEADS_REF_PREFIX
from default_branch_renamer.utils.pagination import get_last_page

from .abc import GitHubClientBase
from .client import GitHubClient, get_github_pat_client

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def handle_github_422(func: F) -> F:
    """Decorator to handle GitHub 422 Unprocessable Entity errors, logging and raising with details."""

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except RequestFailed as exc:
            if exc.response.status_code == 422:
                try:
                    error_data = exc.response.json()
                except Exception:
                    error_data = {}
                message = error_data.get("message", "Unprocessable Entity")
                errors = error_data.get("errors", [])
                logger.error(
                    "GitHub 422 Unprocessable Entity",
                    function=func.__name__,
                    message=message,
                    errors=errors,
                    url=getattr(exc.response, "url", None),
                    status_code=422,
                )
                raise ValueError(
                    f"GitHub 422 error in {func.__name__}: {message} | errors: {errors} | url: {getattr(exc.response, 'url', None)}"
                ) from exc
            raise

    return wrapper  # type: ignore


class GitHubKitAdapter(GitHubClientBase):
    """GitHub client adapter for the githubkit library.

    Unlike a repository-scoped client, every branch operation takes the owner
    and repository name, because a single run touches many repositories of the
    authenticated account.
    """

    def __init__(self, client: GitHubClient) -> None:
        """Initialize the GitHub client adapter with an already-initialized client."""
        self.client = client

    @classmethod
    async def create(cls, github_pat_token: str, github_api_url: str = DEFAULT_GITHUB_API_URL) -> Self:
        """Create a new GitHub client adapter.

        Args:
            github_pat_token: Personal access token with the "repo" scope
            github_api_url: GitHub API URL (defaults to https://api.github.com)

        Returns:
            Configured GitHubKitAdapter instance
        """
        logger.info("Creating client for GitHub instance", github_api_url=github_api_url)
        client = await get_github_pat_client(github_pat_token=github_pat_token, github_api_url=github_api_url)
        return cls(client)

    # Repository listing
    async def list_repositories_for_authenticated_user(self, per_page: int = 100, **kwargs: Any) -> list[RepositoryRecord]:
        """List all repositories of the authenticated account, handling pagination.

        The number of pages is taken from the Link header of the first response.
        Pages are requested one after another, and the records are returned in
        the order GitHub returned them.

        Args:
            per_page: Number of repositories per page (default: 100, max: 100)
            **kwargs: Additional parameters to pass to the API (e.g. visibility, affiliation)

        Returns:
            List of all repositories visible to the account
        """
        all_repositories: list[RepositoryRecord] = []
        current_page: int = 0
        last_page: int = 1

        while current_page < last_page:
            current_page += 1
            if current_page > 1:
                logger.info(f"Retrieving GitHub repositories ({current_page}/{last_page})", page=current_page, last_page=last_page)
            else:
                logger.info("Retrieving GitHub repositories", per_page=per_page)

            response: Response[list[Repository]] = await self.client.rest.repos.async_list_for_authenticated_user(
                per_page=per_page,
                page=current_page,
                **kwargs,
            )

            # Later pages carry their own Link header, but only the first one
            # decides how many pages are requested.
            if current_page == 1:
                last_page = get_last_page(response.raw_response) or 1

            all_repositories.extend(RepositoryRecord.from_github(repository) for repository in response.parsed_data)

        logger.info("Fetched all repositories for authenticated user", total_repos=len(all_repositories), pages=last_page)
        return all_repositories

    # Repository settings
    @handle_github_422
    async def update_default_branch(self, owner: str, repo: str, default_branch: str) -> FullRepository:
        """Change the default branch setting of a repository."""
        response: Response[FullRepository] = await self.client.rest.repos.async_update(
            owner=owner,
            repo=repo,
            default_branch=default_branch,
        )
        logger.debug("Updated default branch", owner=owner, repo=repo, default_branch=default_branch)
        return response.parsed_data

    # Branch ref operations
    async def get_branch_sha(self, owner: str, repo: str, branch_name: str) -> str:
        """Get the SHA of the commit a branch ref points to."""
        response: Response[GitRef] = await self.client.rest.git.async_get_ref(
            owner=owner,
            repo=repo,
            ref=f"{HEADS_REF_PREFIX}{branch_name}",
        )
        return response.parsed_data.object_.sha

    @handle_github_422
    async def create_branch_ref(self, owner: str, repo: str, branch_name: str, sha: str) -> GitRef:
        """Create a branch ref pointing at the given commit."""
        response: Response[GitRef] = await self.client.rest.git.async_create_ref(
            owner=owner,
            repo=repo,
            ref=f"{FULL_HEADS_REF_PREFIX}{branch_name}",
            sha=sha,
        )
        logger.debug("Created branch", owner=owner, repo=repo, branch=branch_name, sha=sha)
        return response.parsed_data

    @handle_github_422
    async def delete_branch_ref(self, owner: str, repo: str, branch_name: str) -> None:
        """Delete a branch ref."""
        await self.client.rest.git.async_delete_ref(
            owner=owner,
            repo=repo,
            ref=f"{HEADS_REF_PREFIX}{branch_name}",
        )
        logger.debug("Deleted branch", owner=owner, repo=repo, branch=branch_name)
        return None
