"""Models for configuration between CLI arguments and environment variables."""

from dataclasses import dataclass

from default_branch_renamer.utils.constants import DEFAULT_BATCH_SIZE, DEFAULT_GITHUB_API_URL, DEFAULT_PER_PAGE


@dataclass(frozen=True)
class RenameConfig:
    """Configuration for a single default branch rename run."""

    debug: bool
    github_token: str
    from_branch: str
    to_branch: str
    github_api_url: str = DEFAULT_GITHUB_API_URL
    per_page: int = DEFAULT_PER_PAGE
    batch_size: int = DEFAULT_BATCH_SIZE
