"""Contains exceptions raised when reconciling application configuration."""

from default_branch_renamer.utils.constants import GITHUB_TOKENS_URL


class ConfigurationError(Exception):
    """Base class for invalid or incomplete application configuration."""

    pass


class GitHubTokenUndefinedError(ConfigurationError):
    """Raised when no GitHub personal access token is configured."""

    def __init__(self, env_name: str = "GH_TOKEN") -> None:
        """Initializes the exception with the environment variable that should hold the token."""
        super().__init__(
            f"The environment variable {env_name} needs to contain a personal access token to access your private repositories.\n\n"
            f'Go to {GITHUB_TOKENS_URL} to generate one with the "repo" scope.'
        )
        self.env_name = env_name


class InvalidConfigurationElementError(ConfigurationError):
    """Raised when a configuration element has an unusable value."""

    pass
