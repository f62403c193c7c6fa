"""Synchronous driver for configuration reconciliation for the CLI entry point."""

import asyncio

from default_branch_renamer.configuration import reconcile
from default_branch_renamer.configuration.models import RenameConfig


def get_rename_config(
    debug: bool = False,
    github_api_url: str | None = None,
    github_token: str | None = None,
    from_branch: str | None = None,
    to_branch: str | None = None,
    batch_size: int | None = None,
) -> RenameConfig:
    """Synchronously get the reconciled rename configuration."""
    return asyncio.run(
        reconcile.reconcile_rename_configuration(
            cli_debug=debug,
            cli_github_api_url=github_api_url,
            cli_github_token=github_token,
            cli_from_branch=from_branch,
            cli_to_branch=to_branch,
            cli_batch_size=batch_size,
        )
    )
