"""Defines the Command Line Interface (CLI) using Typer."""

import asyncio

import typer
from dotenv import load_dotenv
from githubkit.exception import GitHubException
from typer import Option
from typing_extensions import Annotated

from default_branch_renamer.configuration.driver import get_rename_config
from default_branch_renamer.configuration.exceptions import ConfigurationError
from default_branch_renamer.configuration.models import RenameConfig
from default_branch_renamer.github.adapter import GitHubKitAdapter
from default_branch_renamer.rename.driver import run_rename_workflow
from default_branch_renamer.rename.exceptions import BatchRenameError, BranchRenameError
from default_branch_renamer.rename.results import RenameWorkflowResult
from default_branch_renamer.rename.selection import prompt_for_repository_selection
from default_branch_renamer.utils.constants import DEFAULT_BATCH_SIZE, DEFAULT_GITHUB_API_URL
from default_branch_renamer.utils.logging_setup import configure_logging

load_dotenv()

typer_app = typer.Typer(pretty_exceptions_show_locals=False)


@typer_app.callback()
def main_callback() -> None:
    """Rename the default branch of the repositories owned by your GitHub account."""


async def run_rename(config: RenameConfig) -> RenameWorkflowResult:
    """Create the GitHub adapter and run the rename workflow with the interactive selector."""
    adapter = await GitHubKitAdapter.create(github_pat_token=config.github_token, github_api_url=config.github_api_url)
    return await run_rename_workflow(config, adapter, prompt_for_repository_selection)


def report_batch_failure(exc: BatchRenameError) -> None:
    """Print which repositories failed and at which step."""
    typer.echo(str(exc), err=True)
    for failure in exc.failures:
        if isinstance(failure, BranchRenameError):
            completed = ", ".join(step.value for step in failure.completed_steps) or "none"
            typer.echo(
                f"  - {failure.repository.full_name}: step '{failure.step.value}' failed (completed steps: {completed}): {failure.__cause__}",
                err=True,
            )
        else:
            typer.echo(f"  - {failure}", err=True)
    typer.echo(
        "Changes already applied were not rolled back. Check the repositories above for a leftover "
        "new branch or a default branch setting that was already switched.",
        err=True,
    )


@typer_app.command(name="rename")
def rename_cli(
    from_branch: Annotated[
        str,
        Option(envvar="FROM_BRANCH", prompt="Enter the branch name you want to move away from", help="Current default branch name, e.g. master."),
    ],
    to_branch: Annotated[
        str,
        Option(envvar="TO_BRANCH", prompt="Enter the branch name you want to change to", help="New default branch name, e.g. main."),
    ],
    github_token: Annotated[
        str | None,
        Option(envvar="GH_TOKEN", help="GitHub Personal Access Token with the 'repo' scope.", show_default=False),
    ] = None,
    github_api_url: Annotated[str, Option(envvar="GITHUB_API_URL", help="GitHub API URL.")] = DEFAULT_GITHUB_API_URL,
    batch_size: Annotated[int, Option(envvar="BATCH_SIZE", help="Number of repositories updated concurrently.")] = DEFAULT_BATCH_SIZE,
    debug: Annotated[bool, Option(envvar="DEBUG", help="Enable debug mode.")] = False,
) -> None:
    """Rename the default branch of selected repositories from one name to another."""
    configure_logging(debug)

    try:
        config = get_rename_config(
            debug=debug,
            github_api_url=github_api_url,
            github_token=github_token,
            from_branch=from_branch,
            to_branch=to_branch,
            batch_size=batch_size,
        )
    except ConfigurationError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc

    try:
        result = asyncio.run(run_rename(config))
    except BatchRenameError as exc:
        report_batch_failure(exc)
        raise typer.Exit(1) from exc
    except GitHubException as exc:
        typer.echo(f"Error talking to GitHub: {exc}", err=True)
        raise typer.Exit(1) from exc

    if not result.candidates:
        typer.echo(f"No repositories found with the default branch {config.from_branch}.")
        return

    if not result.rename_results:
        typer.echo("No repositories selected - nothing was updated.")
        return

    typer.echo(f"Renamed the default branch from '{config.from_branch}' to '{config.to_branch}' in {len(result.rename_results)} repositories:")
    for rename_result in result.rename_results:
        typer.echo(f"  - {rename_result.repository.full_name}")


if __name__ == "__main__":
    typer_app()
