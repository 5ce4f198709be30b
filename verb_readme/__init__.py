"""Generate README.md files from a .verb.md template and package metadata.

Package metadata is normalized (author, license statement, code alias) and
rendered with Jinja2 together with a library of reusable markdown snippets.
"""

__version__ = "0.1.0"

from verb_readme.metadata import MetadataBundle, assemble_metadata, load_package  # noqa: E402
from verb_readme.renderer import ReadmeRenderer  # noqa: E402
from verb_readme.writer import ReadmeWriter  # noqa: E402

__all__ = [
    "MetadataBundle",
    "ReadmeRenderer",
    "ReadmeWriter",
    "assemble_metadata",
    "load_package",
]
