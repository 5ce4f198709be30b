"""Parsing-related utility functions."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, Dict, Optional

# "Name <email> (url)", every part optional
AUTHOR_PATTERN = re.compile(r"^\s*([^<(]+?)?\s*(?:<([^>(]+?)>)?\s*(?:\(([^)]+?)\))?\s*$")


def parse_author(value: str) -> Dict[str, str]:
    """Parse a person string of the form ``Name <email> (url)``.

    Every part is optional. Strings that don't fit the pattern produce an
    empty dictionary instead of raising.

    Args:
        value: The person string.

    Returns:
        Dictionary with whichever of ``name``, ``email`` and ``url`` were found.
    """
    match = AUTHOR_PATTERN.match(value or "")
    if not match:
        return {}

    name, email, url = match.groups()
    parsed = {"name": name, "email": email, "url": url}
    return {key: val.strip() for key, val in parsed.items() if val and val.strip()}


def is_empty(value: Any) -> bool:
    """Check whether a value carries no information (None, blank string, empty container)."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, set, dict)):
        return len(value) == 0
    return False


def omit_empty(data: Mapping) -> Dict[str, Any]:
    """Return a copy of ``data`` without the keys whose values are empty."""
    return {key: value for key, value in data.items() if not is_empty(value)}


def get_value(data: Any, path: Optional[str], default: Any = None) -> Any:
    """Look up a dotted ``path`` (e.g. ``"verb.readme"``) in nested mappings.

    Args:
        data: The root mapping.
        path: Dotted key path. ``None`` or ``""`` returns ``data`` itself.
        default: Value returned when any segment is missing.

    Returns:
        The value found at ``path``, or ``default``.
    """
    if not path:
        return data

    current = data
    for key in path.split("."):
        if not isinstance(current, Mapping) or key not in current:
            return default
        current = current[key]
    return current
