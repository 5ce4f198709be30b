"""Assembly of the data passed to README templates.

Package metadata is read from package.json, the author is normalized, the
license statement is computed and everything is collected into a
MetadataBundle that the renderer consumes.
"""

import json
import logging
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

from . import __version__
from .constants import PACKAGE_FILENAME
from .license import format_license
from .naming import to_alias
from .person import expand_person
from .utils import get_value

logger = logging.getLogger(__name__)

RUNNER_NAME = "verb-readme"
RUNNER_HOMEPAGE = "https://github.com/verbose/verb-generate-readme"

# Matches GitHub URLs in https, ssh and shorthand form, capturing "owner/name"
GITHUB_REPOSITORY_PATTERN = re.compile(r"(?:github\.com[/:]|^github:)([^/\s]+/[^/\s]+?)(?:\.git)?/?$")
SHORTHAND_REPOSITORY_PATTERN = re.compile(r"^[^/:\s]+/[^/:\s]+$")


def default_runner() -> Dict[str, str]:
    """Describe this tool for the footer snippet."""
    return {"name": RUNNER_NAME, "version": __version__, "homepage": RUNNER_HOMEPAGE}


def load_package(cwd: Union[str, Path]) -> Dict[str, Any]:
    """Load package.json from the project directory.

    Args:
        cwd: Project directory.

    Returns:
        The parsed package.json with ``repository`` normalized to ``owner/name``.

    Raises:
        FileNotFoundError: If package.json doesn't exist.
        ValueError: If package.json isn't a valid JSON object.
    """
    package_file = Path(cwd) / PACKAGE_FILENAME
    with open(package_file, "r", encoding="utf-8") as f:
        try:
            pkg = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {package_file}: {e}") from e

    if not isinstance(pkg, dict):
        raise ValueError(f"Expected a JSON object in {package_file}")

    pkg["repository"] = normalize_repository(pkg.get("repository"))
    logger.debug(f"Loaded {package_file} for package '{pkg.get('name')}'")
    return pkg


def normalize_repository(repository: Any) -> Optional[str]:
    """Reduce the various package.json repository forms to ``owner/name``.

    Args:
        repository: A string or a ``{"url": ...}`` mapping.

    Returns:
        The ``owner/name`` identifier, or the input string if it isn't a GitHub reference.
    """
    if isinstance(repository, Mapping):
        repository = repository.get("url")
    if not repository:
        return None

    repository = str(repository).strip()
    match = GITHUB_REPOSITORY_PATTERN.search(repository)
    if match:
        return match.group(1)
    if SHORTHAND_REPOSITORY_PATTERN.match(repository):
        return repository
    logger.debug(f"Repository '{repository}' is not a GitHub reference, using it unchanged")
    return repository


def node_modules_resolver(cwd: Union[str, Path]) -> Callable[[str], Dict[str, Any]]:
    """Return a resolver that reads package.json of installed dependencies."""

    def resolve(name: str) -> Dict[str, Any]:
        package_file = Path(cwd) / "node_modules" / name / PACKAGE_FILENAME
        with open(package_file, "r", encoding="utf-8") as f:
            return json.load(f)

    return resolve


class PackageCache:
    """Memoizes related-package lookups for the duration of one run.

    Entries are keyed by ``"<name>:<prop>"`` and are never evicted.
    """

    def __init__(self, resolver: Callable[[str], Dict[str, Any]]):
        """Initialize the cache.

        Args:
            resolver: Callable returning the package.json data of a package name.
        """
        self.resolver = resolver
        self._entries: Dict[str, Any] = {}

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, name: str, prop: Optional[str] = None) -> Any:
        """Get a package's metadata, or one dotted property of it.

        Resolver errors propagate to the caller and nothing is cached.
        """
        key = f"{name}:{prop}"
        if key in self._entries:
            return self._entries[key]

        pkg = self.resolver(name)
        value = get_value(pkg, prop) if prop else pkg
        self._entries[key] = value
        return value


class MetadataBundle:
    """Data handed to the template renderer."""

    def __init__(
        self,
        pkg: Dict[str, Any],
        cwd: Path,
        runner: Dict[str, Any],
        author: Dict[str, Any],
        license: str,
        authors: Optional[List[Dict[str, Any]]] = None,
        cache: Optional[PackageCache] = None,
    ):
        self.pkg = pkg
        self.cwd = cwd
        self.runner = runner
        self.author = author
        self.license = license
        self.authors = authors or []
        self.cache = cache if cache is not None else PackageCache(node_modules_resolver(cwd))

    @property
    def alias(self) -> str:
        """Code alias of the package, derived from its current name."""
        return to_alias(self.pkg.get("name") or "")

    @property
    def options(self) -> Dict[str, Any]:
        """The ``verb`` configuration object from package.json."""
        return self.pkg.get("verb") or {}

    def context(self) -> Dict[str, Any]:
        """Build the template context.

        All package.json fields are exposed at the top level, with the
        normalized values taking precedence.
        """
        context = dict(self.pkg)
        context.update(
            pkg=self.pkg,
            verb=self.options,
            version=self.pkg.get("version"),
            runner=self.runner,
            author=self.author,
            authors=self.authors,
            license=self.license,
            alias=self.alias,
        )
        return context


def assemble_metadata(
    pkg: Dict[str, Any],
    cwd: Union[str, Path],
    runner: Optional[Dict[str, Any]] = None,
    cache: Optional[PackageCache] = None,
) -> MetadataBundle:
    """Normalize package metadata into a MetadataBundle.

    Args:
        pkg: Parsed package.json data.
        cwd: Project directory, used for the git identity lookup and the LICENSE check.
        runner: Description of the tool rendering the README. Defaults to this tool.
        cache: Cache for related-package lookups. A fresh one is created if omitted.

    Returns:
        The assembled MetadataBundle.
    """
    cwd = Path(cwd)

    runner = dict(runner or default_runner())
    runner["url"] = runner.get("homepage")

    author = expand_person(pkg.get("author"), cwd)
    logger.debug(f"Normalized author: {author}")

    authors = []
    if isinstance(pkg.get("authors"), list):
        authors = [expand_person(value, cwd) for value in pkg["authors"]]

    license = format_license(pkg.get("license"), pkg.get("repository"), cwd)
    logger.debug(f"License statement: {license}")

    return MetadataBundle(
        pkg=pkg,
        cwd=cwd,
        runner=runner,
        author=author,
        license=license,
        authors=authors,
        cache=cache,
    )
