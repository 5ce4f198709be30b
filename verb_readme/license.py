"""License statement formatting."""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional, Union

from .constants import (
    DEFAULT_BRANCH,
    DEFAULT_LICENSE,
    GITHUB_HOST,
    LICENSE_FILENAME,
    RELEASE_STATEMENT_MARKER,
)

logger = logging.getLogger(__name__)


def repo_file(repository: Optional[str], filename: str) -> str:
    """Build the GitHub URL of a file in a repository.

    Args:
        repository: Repository identifier in ``owner/name`` form. Not validated.
        filename: Path of the file relative to the repository root.

    Returns:
        ``https://github.com/<owner>/<name>/blob/master/<filename>``.
    """
    return f"https://{GITHUB_HOST}/{repository}/blob/{DEFAULT_BRANCH}/{filename}"


def format_license(
    license: Any = None,
    repository: Optional[str] = None,
    cwd: Union[str, Path, None] = None,
) -> str:
    """Create a "Released under..." statement for the project's license.

    A license that already reads like a release statement is returned as is.
    When a LICENSE file exists in ``cwd`` the license name links to it.

    Args:
        license: The license from package.json (a string or a ``{"type": ...}`` mapping).
        repository: Repository identifier in ``owner/name`` form.
        cwd: Project directory checked for a LICENSE file.

    Returns:
        The license statement.
    """
    if isinstance(license, Mapping):
        license = license.get("type")
    license = license or DEFAULT_LICENSE

    if RELEASE_STATEMENT_MARKER in license:
        return license

    license_file = Path(cwd or ".") / LICENSE_FILENAME
    if license_file.exists():
        if repository:
            url = repo_file(repository, LICENSE_FILENAME)
            return f"Released under the [{license} license]({url})."
        logger.warning(f"Found {license_file} but no repository is defined, license will not be linked")
    return f"Released under the {license} license."
