"""Git-related utility functions."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import List, Optional, Union

logger = logging.getLogger(__name__)

# Config keys consulted, in order, for the user's code-hosting username
USERNAME_CONFIG_KEYS = ["github.user", "user.username"]


def _git_config(key: str, cwd: Union[str, Path, None]) -> Optional[str]:
    """Read a single git config value, or None if unset or git is unavailable."""
    args: List[str] = ["git", "config", "--get", key]
    try:
        result = subprocess.run(
            args,
            capture_output=True,
            text=True,
            cwd=cwd,
            check=False,
        )
    except (FileNotFoundError, NotADirectoryError) as e:
        logger.debug(f"Could not run {' '.join(args)}: {e}")
        return None

    if result.returncode != 0:
        return None
    return result.stdout.strip() or None


def git_user_name(cwd: Union[str, Path, None] = None) -> Optional[str]:
    """Look up the locally configured code-hosting username.

    Having no username configured is normal; it yields None.

    Args:
        cwd: Directory whose git configuration is consulted.

    Returns:
        The username, or None if none is configured.
    """
    for key in USERNAME_CONFIG_KEYS:
        username = _git_config(key, cwd)
        if username:
            logger.debug(f"Resolved username '{username}' from git config {key}")
            return username
    logger.debug("No username found in git config")
    return None
