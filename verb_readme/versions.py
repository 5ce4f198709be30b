"""Version arithmetic used by the upgrade snippets."""

import logging

logger = logging.getLogger(__name__)


def previous(increment: str, version) -> str:
    """Return the version preceding ``version`` at the given increment.

    ``"major"`` decrements the major segment and zeroes the rest. Any other
    increment (including ``"minor"``) decrements the minor segment and zeroes
    the patch segment. Segments are not bounds-checked, so a zero segment
    becomes ``-1``.

    Args:
        increment: Either ``"major"`` or ``"minor"``.
        version: A dot-separated ``X.Y.Z`` version.

    Returns:
        The previous version string, or ``version`` unchanged if it can't be parsed.
    """
    segs = str(version).split(".")
    try:
        if increment == "major":
            return f"{int(segs[0]) - 1}.0.0"
        return f"{int(segs[0])}.{int(segs[1]) - 1}.0"
    except (ValueError, IndexError):
        logger.warning(f"Cannot compute previous {increment} version of '{version}'")
        return str(version)
