"""Models shared by the rename procedure and its orchestration."""

from enum import Enum


class RenameStep(str, Enum):
    """The ordered remote calls that make up a default branch rename."""

    RESOLVE_COMMIT = "resolve_commit"
    CREATE_REF = "create_ref"
    UPDATE_DEFAULT_BRANCH = "update_default_branch"
    DELETE_REF = "delete_ref"


RENAME_STEPS: tuple[RenameStep, ...] = (
    RenameStep.RESOLVE_COMMIT,
    RenameStep.CREATE_REF,
    RenameStep.UPDATE_DEFAULT_BRANCH,
    RenameStep.DELETE_REF,
)
