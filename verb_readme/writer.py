"""README writer for verb projects."""

import logging
import shutil
import sys
from pathlib import Path
from typing import Optional

from jinja2 import TemplateError

from .constants import (
    DEFAULT_TEMPLATE,
    DEFAULT_VERBMD_TEMPLATE,
    EXIT_ERROR,
    README_FILENAME,
)
from .metadata import MetadataBundle, assemble_metadata, load_package
from .renderer import TEMPLATES_DIR, ReadmeRenderer
from .utils import get_value

logger = logging.getLogger(__name__)


class ReadmeWriter:
    """Renders a project's README template and writes README.md."""

    def __init__(
        self,
        project_dir: Path,
        output_file: Optional[Path] = None,
        template: Optional[str] = None,
    ):
        """Initialize the README writer.

        Args:
            project_dir: Path to the project directory (must contain package.json).
            output_file: Optional output path for the generated README.
            template: Template path relative to the project directory. Defaults
                to ``verb.readme`` from package.json, then ``.verb.md``.
        """
        if project_dir is None:
            logger.error("project_dir must be provided")
            raise ValueError("project_dir must be provided")

        self.project_dir = Path(project_dir)
        self.readme_file = output_file if output_file else self.project_dir / README_FILENAME
        self._template = template

    def _load_bundle(self) -> MetadataBundle:
        """Load package.json and assemble the template data, exiting on failure."""
        try:
            pkg = load_package(self.project_dir)
        except (OSError, ValueError) as e:
            logger.error(f"Could not load package metadata: {e}")
            sys.exit(EXIT_ERROR)
        return assemble_metadata(pkg, self.project_dir)

    def _resolve_template(self, bundle: MetadataBundle) -> str:
        """Pick the template to render: explicit argument, ``verb.readme``, then ``.verb.md``."""
        return self._template or get_value(bundle.pkg, "verb.readme") or DEFAULT_TEMPLATE

    def _read_file_content(self, file_path: Path) -> Optional[str]:
        """Read content from a file if it exists.

        Args:
            file_path: Path to the file to read.

        Returns:
            File content as string, or None if file doesn't exist.
        """
        if not file_path.exists():
            return None
        with open(file_path, "r", encoding="utf-8") as f:
            return f.read()

    def _has_diff(self, expected: str, actual: Optional[str]) -> bool:
        """Check if expected content differs from actual content.

        Args:
            expected: The expected content.
            actual: The actual file content (None if file doesn't exist).

        Returns:
            True if there's a diff, False if content matches.
        """
        if actual is None:
            return True
        return expected != actual

    def _check_readme_file(self, readme_content: str) -> bool:
        """Check if README matches expected content.

        Args:
            readme_content: The expected README content.

        Returns:
            True if there's a diff, False if content matches.
        """
        actual_content = self._read_file_content(self.readme_file)
        has_diff = self._has_diff(readme_content, actual_content)
        if has_diff:
            logger.warning(f"Out of sync: {self.readme_file}")
        return has_diff

    def _write_readme_file(self, readme_content: str) -> None:
        """Write the README content to the README file.

        Args:
            readme_content: The content to write.
        """
        # Ensure parent directories exist for custom output paths
        self.readme_file.parent.mkdir(parents=True, exist_ok=True)

        with open(self.readme_file, "w", encoding="utf-8") as f:
            logger.debug(f"Writing README to {self.readme_file}")
            f.write(readme_content)
        logger.info(f"README generated successfully at {self.readme_file}")

    def init_template(self) -> Path:
        """Create a ``.verb.md`` from the bundled default template if none exists.

        Returns:
            Path to the project's template.
        """
        template_file = self.project_dir / (self._template or DEFAULT_TEMPLATE)
        if template_file.exists():
            logger.info(f"Template already exists at {template_file}")
            return template_file

        shutil.copyfile(TEMPLATES_DIR / DEFAULT_VERBMD_TEMPLATE, template_file)
        logger.info(f"Created {template_file} from the default template")
        return template_file

    def render(self) -> str:
        """Render the README content without touching the filesystem.

        Raises:
            SystemExit: If metadata can't be loaded, the template is missing or fails to render,
                including a related package or file the template needs being unavailable.
        """
        bundle = self._load_bundle()
        template_name = self._resolve_template(bundle)

        template_file = self.project_dir / template_name
        if not template_file.exists():
            logger.error(f"Template {template_file} not found. Run with --init to create one.")
            sys.exit(EXIT_ERROR)

        logger.debug(f"Rendering template: {template_file}")
        renderer = ReadmeRenderer(bundle)
        try:
            return renderer.render(template_name)
        except (TemplateError, OSError, ValueError) as e:
            logger.error(f"Could not render {template_file}: {e}")
            sys.exit(EXIT_ERROR)

    def generate(self, fix: bool = False) -> bool:
        """Generate the README documentation.

        Args:
            fix: If True, write/update the README file.
                 If False, only check for diffs without writing files.

        Returns:
            True if there are diffs detected, False otherwise.

        Raises:
            SystemExit: If metadata can't be loaded or the template can't be rendered.
        """
        logger.debug(f"Analyzing project: {self.project_dir}")
        readme_content = self.render()
        logger.debug(f"README content length: {len(readme_content)} characters")

        has_diff = self._check_readme_file(readme_content)
        if has_diff and fix:
            self._write_readme_file(readme_content)

        return has_diff
