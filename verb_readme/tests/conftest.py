"""Shared pytest fixtures for verb_readme tests."""

import json
import tempfile
from pathlib import Path

import pytest

SAMPLE_TEMPLATE = """## Install

{% include "install-npm" %}

## Usage

{% include "usage" %}

<!-- toc -->

## About

### Author

{% include "author" %}

### License

{{ license }}
"""


def create_project_dir(
    parent_dir: Path,
    name: str,
    package_data: dict,
    template: str = None,
    license_text: str = None,
) -> Path:
    """Helper to create a project directory with files.

    Args:
        parent_dir: Parent directory to create the project in.
        name: Name of the project directory.
        package_data: Content for package.json.
        template: Optional content for .verb.md.
        license_text: Optional content for LICENSE.

    Returns:
        Path to the created project directory.
    """
    project_dir = parent_dir / name
    project_dir.mkdir(parents=True, exist_ok=True)

    (project_dir / "package.json").write_text(json.dumps(package_data, indent=2))

    if template is not None:
        (project_dir / ".verb.md").write_text(template)

    if license_text is not None:
        (project_dir / "LICENSE").write_text(license_text)

    return project_dir


@pytest.fixture(autouse=True)
def isolate_git_identity(monkeypatch):
    """Keep the developer's git configuration out of person normalization."""
    monkeypatch.setattr("verb_readme.person.git_user_name", lambda cwd=None: None)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_package():
    """Sample package.json data."""
    return {
        "name": "my-cool-package",
        "description": "Does cool things.",
        "version": "2.4.1",
        "author": "Jane Doe <jane@example.com> (https://github.com/janedoe)",
        "license": "MIT",
        "repository": "janedoe/my-cool-package",
    }


@pytest.fixture
def project_dir(temp_dir, sample_package):
    """Create a complete project directory with package.json, .verb.md and LICENSE."""
    return create_project_dir(
        temp_dir,
        "my-cool-package",
        sample_package,
        template=SAMPLE_TEMPLATE,
        license_text="MIT License",
    )
