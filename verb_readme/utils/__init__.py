"""Shared utilities for verb_readme."""

from .git import git_user_name
from .parsing import (
    get_value,
    is_empty,
    omit_empty,
    parse_author,
)

__all__ = [
    "get_value",
    "git_user_name",
    "is_empty",
    "omit_empty",
    "parse_author",
]
