"""Reconciles configuration between CLI arguments and environment variables."""

from default_branch_renamer.configuration.env import settings
from default_branch_renamer.configuration.exceptions import GitHubTokenUndefinedError, InvalidConfigurationElementError
from default_branch_renamer.configuration.models import RenameConfig
from default_branch_renamer.utils.constants import DEFAULT_BATCH_SIZE, DEFAULT_PER_PAGE


async def validate_github_token_configuration(github_token: str | None) -> str:
    """Validates that a GitHub personal access token is available.

    Args:
        github_token (str | None): The GitHub personal access token.

    Raises:
        GitHubTokenUndefinedError: If the token is undefined or blank.

    Returns:
        str: The token with surrounding whitespace removed.
    """
    if github_token is None or not github_token.strip():
        raise GitHubTokenUndefinedError()
    return github_token.strip()


async def validate_branch_names(from_branch: str | None, to_branch: str | None) -> tuple[str, str]:
    """Validates the source and target branch names for a rename run."""
    if from_branch is None or not from_branch.strip():
        raise InvalidConfigurationElementError("Source branch name (--from-branch / FROM_BRANCH) must not be empty.")
    if to_branch is None or not to_branch.strip():
        raise InvalidConfigurationElementError("Target branch name (--to-branch / TO_BRANCH) must not be empty.")
    from_branch = from_branch.strip()
    to_branch = to_branch.strip()
    if from_branch == to_branch:
        raise InvalidConfigurationElementError(f"Source and target branch names are both '{from_branch}' - nothing to rename.")
    return from_branch, to_branch


async def reconcile_rename_configuration(
    cli_debug: bool = False,
    cli_github_api_url: str | None = None,
    cli_github_token: str | None = None,
    cli_from_branch: str | None = None,
    cli_to_branch: str | None = None,
    cli_batch_size: int | None = None,
    cli_per_page: int | None = None,
) -> RenameConfig:
    """Reconciles CLI arguments with environment settings into a RenameConfig.

    Values given on the command line take precedence over values read from the
    environment (or a .env file).
    """
    github_token = await validate_github_token_configuration(cli_github_token if cli_github_token is not None else settings.GH_TOKEN)
    from_branch, to_branch = await validate_branch_names(cli_from_branch, cli_to_branch)

    batch_size = cli_batch_size if cli_batch_size is not None else DEFAULT_BATCH_SIZE
    if batch_size < 1:
        raise InvalidConfigurationElementError(f"Batch size must be at least 1, got {batch_size}.")

    per_page = cli_per_page if cli_per_page is not None else DEFAULT_PER_PAGE
    if not 1 <= per_page <= 100:
        raise InvalidConfigurationElementError(f"Page size must be between 1 and 100, got {per_page}.")

    return RenameConfig(
        debug=cli_debug or settings.DEBUG,
        github_api_url=cli_github_api_url or settings.GITHUB_API_URL,
        github_token=github_token,
        from_branch=from_branch,
        to_branch=to_branch,
        per_page=per_page,
        batch_size=batch_size,
    )
