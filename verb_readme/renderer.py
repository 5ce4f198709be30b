"""README renderer built on Jinja2."""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from jinja2 import ChoiceLoader, DictLoader, Environment, FileSystemLoader

from .constants import INCLUDES_FILE
from .helpers import make_helpers
from .metadata import MetadataBundle
from .toc import insert_toc

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"
DEFAULT_LAYOUT = "default"


def load_includes(includes_file: Path = TEMPLATES_DIR / INCLUDES_FILE) -> Dict[str, str]:
    """Load the snippet library.

    Args:
        includes_file: YAML file mapping snippet names to template source.

    Returns:
        Dictionary of snippet name to template source.
    """
    with open(includes_file, "r", encoding="utf-8") as f:
        includes = yaml.safe_load(f) or {}
    logger.debug(f"Loaded {len(includes)} snippets from {includes_file.name}")
    return includes


class ReadmeRenderer:
    """Renders README templates with the data of a MetadataBundle."""

    def __init__(self, bundle: MetadataBundle, includes: Optional[Dict[str, str]] = None):
        """Initialize the renderer.

        Templates are looked up in the project directory first, then in the
        snippet library, then in the bundled templates directory.

        Args:
            bundle: The assembled metadata.
            includes: Snippet library, defaults to the bundled includes.yaml.
        """
        self.bundle = bundle
        self.includes = includes if includes is not None else load_includes()

        self.env = Environment(
            loader=ChoiceLoader(
                [
                    FileSystemLoader(bundle.cwd),
                    DictLoader(self.includes),
                    FileSystemLoader(TEMPLATES_DIR),
                ]
            ),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.globals.update(make_helpers(bundle))

    @property
    def layout(self) -> Optional[str]:
        """Layout template name from the ``verb.layout`` option, None when disabled."""
        layout = self.bundle.options.get("layout", DEFAULT_LAYOUT)
        if not layout:
            return None
        return f"layouts/{layout}.md"

    @property
    def toc_enabled(self) -> bool:
        """Whether the ``verb.toc`` option allows inserting a table of contents."""
        return self.bundle.options.get("toc", True) is not False

    def render_string(self, source: str, **extra: Any) -> str:
        """Render template source with the bundle context."""
        context = self.bundle.context()
        context.update(extra)
        return self.env.from_string(source).render(context)

    def render(self, template_name: str) -> str:
        """Render a template into the final README content.

        Args:
            template_name: Template path, relative to the project directory or the bundled templates.

        Returns:
            The rendered README content.
        """
        context = self.bundle.context()
        logger.debug(f"Rendering {template_name}")
        content = self.env.get_template(template_name).render(context)

        if self.layout:
            logger.debug(f"Applying layout {self.layout}")
            content = self.env.get_template(self.layout).render(context, body=content)

        if self.toc_enabled:
            content = insert_toc(content)
        return content
