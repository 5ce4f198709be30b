"""Command-line interface for the verb_readme package."""

import argparse
import logging
import sys
from pathlib import Path

from .constants import EXIT_DIFF_DETECTED, EXIT_SUCCESS, PACKAGE_FILENAME
from .writer import ReadmeWriter

logger = logging.getLogger(__name__)


def validate_project_directory(dir_path: str) -> Path:
    """Validate that the project directory exists and contains a package.json.

    Args:
        dir_path: String path to the project directory.

    Returns:
        Path: Validated Path object to the project directory.

    Raises:
        argparse.ArgumentTypeError: If validation fails.
    """
    path = Path(dir_path)

    if not path.exists():
        raise argparse.ArgumentTypeError(f"Project directory '{dir_path}' does not exist")

    if not path.is_dir():
        raise argparse.ArgumentTypeError(f"'{dir_path}' is not a directory")

    package_file = path / PACKAGE_FILENAME
    if not package_file.exists():
        raise argparse.ArgumentTypeError(f"'{dir_path}' does not contain a {PACKAGE_FILENAME} file")

    return path


def parse_arguments(argv=None):
    """Parse and validate command-line arguments.

    Args:
        argv: Argument list, defaults to ``sys.argv[1:]``.

    Returns:
        argparse.Namespace: Parsed and validated arguments.
    """
    parser = argparse.ArgumentParser(
        prog="verb-readme",
        description="Generate README.md from a .verb.md template and package.json",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Modes:
  Check mode (default):
    Validates that README.md is up-to-date without modifying files.
    Exits with code 0 if it is in sync, code 1 if a diff is detected.

  Fix mode (--fix):
    Updates or creates README.md to match the rendered template.

Examples:
  # Check if the README is in sync (default, no changes made):
  verb-readme path/to/project

  # Regenerate the README:
  verb-readme path/to/project --fix

  # Create a .verb.md from the default template, then generate:
  verb-readme path/to/project --init --fix
        """,
    )
    parser.add_argument(
        "project_dir",
        nargs="?",
        default=".",
        type=validate_project_directory,
        help="Path to the project directory (must contain package.json, default: current directory)",
    )

    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Output path for the generated README.md (default: README.md in the project directory)",
    )

    parser.add_argument(
        "-t",
        "--template",
        help="Template to render, relative to the project directory (default: verb.readme from package.json or .verb.md)",
    )

    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose output")

    parser.add_argument(
        "--init",
        action="store_true",
        help="Create the template from the bundled default if it does not exist.",
    )

    parser.add_argument(
        "--fix",
        action="store_true",
        help="Write/update README.md. Without this flag, only checks for diffs (exits 1 if found).",
    )

    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point for the CLI."""
    args = parse_arguments(argv)

    # Configure logging at application entry point
    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=log_level, format="%(levelname)s: %(message)s")

    writer = ReadmeWriter(
        project_dir=args.project_dir,
        output_file=args.output,
        template=args.template,
    )

    if args.init:
        writer.init_template()

    has_diff = writer.generate(fix=args.fix)

    if not has_diff:
        logger.info("README is in sync.")
        sys.exit(EXIT_SUCCESS)
    elif args.fix:
        logger.info("README updated successfully.")
        sys.exit(EXIT_SUCCESS)
    else:
        logger.error("README is out of sync. Run with --fix to update it.")
        sys.exit(EXIT_DIFF_DETECTED)
