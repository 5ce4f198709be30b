"""Helper functions exposed to README templates."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, Mapping, Optional

from .constants import GITHUB_HOST
from .versions import previous

logger = logging.getLogger(__name__)

DEFAULT_DATE_FORMAT = "%B %d, %Y"
DEFAULT_ISSUE_TEXT = "please create an issue"


def date(fmt: str = DEFAULT_DATE_FORMAT) -> str:
    """Format today's date, e.g. ``October 19, 2026``."""
    return datetime.now().strftime(fmt)


def copyright(author: Optional[Mapping[str, Any]] = None, year: Optional[int] = None) -> str:
    """Build a copyright statement with the author's name linked to their profile.

    Args:
        author: Normalized person dictionary.
        year: Copyright year, defaults to the current year.

    Returns:
        A statement like ``Copyright © 2026, [Jane Doe](https://github.com/janedoe).``
    """
    author = author or {}
    year = year or datetime.now().year
    name = author.get("name") or author.get("username")
    if not name:
        return f"Copyright © {year}."

    url = author.get("url")
    if not url and author.get("username"):
        url = f"https://{GITHUB_HOST}/{author['username']}"
    holder = f"[{name}]({url})" if url else name
    return f"Copyright © {year}, {holder}."


def issue(owner: Optional[str], repo: Optional[str], text: str = DEFAULT_ISSUE_TEXT) -> str:
    """Markdown link to the "new issue" page of a GitHub repository."""
    return f"[{text}](https://{GITHUB_HOST}/{owner}/{repo}/issues/new)"


def related(get_pkg: Callable[..., Any], names: Iterable[str]) -> str:
    """Render a bullet list describing related packages.

    Args:
        get_pkg: Package lookup, typically ``PackageCache.get``.
        names: Package names to list.

    Returns:
        Markdown list of ``- [name](homepage): description`` lines.
    """
    lines = []
    for name in names:
        pkg = get_pkg(name) or {}
        homepage = pkg.get("homepage") or f"https://www.npmjs.com/package/{name}"
        description = pkg.get("description")
        line = f"- [{name}]({homepage})"
        if description:
            line += f": {description}"
        lines.append(line)
    return "\n".join(lines)


def make_helpers(bundle) -> Dict[str, Callable[..., Any]]:
    """Bind the template helpers to a MetadataBundle.

    Args:
        bundle: The MetadataBundle being rendered.

    Returns:
        Mapping of helper name to callable, suitable for Jinja2 globals.
    """

    def _issue(owner: Optional[str] = None, repo: Optional[str] = None, text: str = DEFAULT_ISSUE_TEXT) -> str:
        owner = owner or bundle.author.get("username")
        repo = repo or bundle.pkg.get("name")
        return issue(owner, repo, text)

    def _copyright(author: Optional[Mapping[str, Any]] = None, year: Optional[int] = None) -> str:
        return copyright(author or bundle.author, year)

    def _related(names: Iterable[str]) -> str:
        return related(bundle.cache.get, names)

    def _read(path: str) -> str:
        file_path = Path(bundle.cwd) / path
        logger.debug(f"Reading {file_path} for template")
        with open(file_path, "r", encoding="utf-8") as f:
            return f.read()

    return {
        "previous": previous,
        "date": date,
        "copyright": _copyright,
        "issue": _issue,
        "get_pkg": bundle.cache.get,
        "related": _related,
        "read": _read,
    }
