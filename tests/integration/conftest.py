"""Pytest configuration for integration tests."""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv


@pytest.fixture(autouse=True, scope="session")
def load_env() -> None:
    """Load environment variables from .env file before running integration tests.

    This fixture is automatically used for all tests in this directory and its subdirectories.
    It loads environment variables from:
    1. .env.integration (if it exists)
    2. .env (if it exists)

    The .env.integration file takes precedence over .env.
    """
    # Get the project root directory (3 levels up from this file)
    project_root = Path(__file__).parent.parent.parent

    integration_env = project_root / ".env.integration"
    if integration_env.exists():
        load_dotenv(dotenv_path=integration_env)

    default_env = project_root / ".env"
    if default_env.exists():
        load_dotenv(dotenv_path=default_env)


@pytest.fixture
def github_token() -> str:
    """The token used by integration tests; tests are skipped without one."""
    token = os.getenv("GH_TOKEN")
    if not token:
        pytest.skip("GH_TOKEN is not set - skipping integration test")
    return token


@pytest.fixture
def github_api_url() -> str:
    """The GitHub API URL used by integration tests."""
    return os.getenv("GITHUB_API_URL", "https://api.github.com")
