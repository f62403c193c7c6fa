"""Utility modules for shared functionality."""

from .constants import (
    DEFAULT_BATCH_SIZE,
    DEFAULT_GITHUB_API_URL,
    DEFAULT_PER_PAGE,
)
from .helpers import chunk
from .pagination import get_last_page

__all__ = [
    "DEFAULT_BATCH_SIZE",
    "DEFAULT_GITHUB_API_URL",
    "DEFAULT_PER_PAGE",
    "chunk",
    "get_last_page",
]
