"""Shared constants used across the application."""

# GitHub API Constants
# --------------------

DEFAULT_GITHUB_API_URL = "https://api.github.com"
"""Default GitHub REST API base URL (override for GitHub Enterprise Server)."""

DEFAULT_PER_PAGE = 100
"""Number of repositories requested per page (GitHub's maximum)."""

# Rename Constants
# ----------------

DEFAULT_BATCH_SIZE = 10
"""Number of repositories renamed concurrently before waiting for the batch to settle."""

HEADS_REF_PREFIX = "heads/"
"""Prefix used when reading or deleting a branch ref."""

FULL_HEADS_REF_PREFIX = "refs/heads/"
"""Prefix required when creating a branch ref."""

GITHUB_TOKENS_URL = "https://github.com/settings/tokens"
"""Where operators generate a personal access token."""
