"""Normalization of author and contributor descriptors."""

import logging
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict, Union

from .constants import GITHUB_HOST
from .utils import git_user_name, omit_empty, parse_author

logger = logging.getLogger(__name__)

PROFILE_URL_PATTERN = re.compile(re.escape(GITHUB_HOST))


def _parse_descriptor(value: Any) -> Dict[str, Any]:
    """Turn a single string or mapping descriptor into a person dictionary."""
    if isinstance(value, str):
        return parse_author(value)
    if isinstance(value, Mapping):
        return dict(value)
    if value is not None:
        logger.warning(f"Ignoring person descriptor of unsupported type {type(value).__name__}")
    return {}


def expand_person(descriptor: Any, cwd: Union[str, Path, None] = None) -> Dict[str, Any]:
    """Merge person descriptors into a single normalized person record.

    The descriptor may be a ``"Name <email> (url)"`` string, a mapping, or a
    list of either; list entries are merged in order so later entries win.
    A missing ``username`` is taken from a GitHub profile URL, then from the
    git configuration in ``cwd``. ``twitter`` falls back to ``username``.

    Args:
        descriptor: The raw person descriptor.
        cwd: Project directory used for the git identity lookup.

    Returns:
        The person dictionary, without any empty fields.
    """
    person: Dict[str, Any] = {}
    if isinstance(descriptor, (list, tuple)):
        for value in descriptor:
            person = {**person, **_parse_descriptor(value)}
    else:
        person = {**person, **_parse_descriptor(descriptor)}

    url = person.get("url")
    if not person.get("username") and isinstance(url, str) and PROFILE_URL_PATTERN.search(url):
        url = url.rstrip("/")
        person["username"] = url[url.rfind("/") + 1:]

    if not person.get("username"):
        person["username"] = git_user_name(cwd)

    if not person.get("twitter") and person.get("username"):
        person["twitter"] = person["username"]

    return omit_empty(person)
