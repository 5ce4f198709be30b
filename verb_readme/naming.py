"""Identifier helpers for turning package names into code aliases."""

import re

_EDGE_SEPARATORS = re.compile(r"^[\W_]+|[\W_]+$")
_SEPARATOR_RUN = re.compile(r"[\W_]+(\w|$)")
_HAS_SEPARATOR = re.compile(r"[\W_]")


def camelcase(value: str) -> str:
    """Convert a string to a camel-case identifier.

    ``"my-cool_Package"`` becomes ``"myCoolPackage"``. Input without any
    separator is already a single identifier, so only its first letter is
    lower-cased and existing humps are kept.

    Args:
        value: Any string.

    Returns:
        The camel-cased identifier.
    """
    if len(value) == 1:
        return _EDGE_SEPARATORS.sub("", value.lower()) or value.lower()
    value = _EDGE_SEPARATORS.sub("", value)
    # lower() can produce combining marks, e.g. "\u0130" -> "i\u0307"
    lowered = _EDGE_SEPARATORS.sub("", value.lower())
    if not _HAS_SEPARATOR.search(lowered):
        return value[:1].lower() + value[1:]
    return _SEPARATOR_RUN.sub(lambda match: match.group(1).upper(), lowered)


def to_alias(name: str) -> str:
    """Build the variable name used in usage snippets from a package name."""
    if name.startswith("@") and "/" in name:
        name = name.split("/", 1)[1]
    return camelcase(name)
