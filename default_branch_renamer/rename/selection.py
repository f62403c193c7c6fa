"""Interactive selection of the repositories to update."""

from typing import Callable

import questionary

from default_branch_renamer.schemas.repository import RepositoryRecord

SELECTION_MESSAGE = "Please choose the repositories that should be updated"


def build_repository_choices(candidates: list[RepositoryRecord]) -> list[questionary.Choice]:
    """Build one unchecked checkbox choice per candidate, labelled with its full name."""
    return [questionary.Choice(title=repository.full_name, value=repository.id, checked=False) for repository in candidates]


async def prompt_for_repository_selection(
    candidates: list[RepositoryRecord],
    checkbox: Callable[..., questionary.Question] = questionary.checkbox,
) -> list[int]:
    """Ask the operator which candidates should be updated and return their ids.

    Nothing is pre-selected. Confirming without ticking anything, or
    cancelling the prompt, selects nothing.
    """
    selected_ids = await checkbox(SELECTION_MESSAGE, choices=build_repository_choices(candidates)).ask_async()
    return list(selected_ids or [])
