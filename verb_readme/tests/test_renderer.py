"""Tests for renderer.py module."""

import json

import pytest
from jinja2 import TemplateNotFound

from ..constants import TOC_MARKER, TOC_STOP_MARKER
from ..metadata import assemble_metadata
from ..renderer import ReadmeRenderer, load_includes


@pytest.fixture
def renderer(project_dir, sample_package):
    """Renderer for the sample project."""
    return ReadmeRenderer(assemble_metadata(sample_package, project_dir))


class TestLoadIncludes:
    """Tests for the snippet library."""

    def test_snippets_present(self):
        """Test that the standard snippets are available."""
        includes = load_includes()

        for name in ["usage", "install", "install-npm", "install-yarn", "author", "authors", "footer"]:
            assert name in includes

    def test_aliases(self):
        """Test that snippet aliases share their source."""
        includes = load_includes()

        assert includes["running-tests"] == includes["tests"]
        assert includes["generate-docs"] == includes["build-docs"]
        assert includes["upgrade"] == includes["upgrading"]


class TestReadmeRenderer:
    """Tests for ReadmeRenderer."""

    def test_alias(self, renderer):
        """Test the alias placeholder."""
        assert renderer.render_string("{{ alias }}") == "myCoolPackage"

    def test_previous_helper(self, renderer):
        """Test calling the previous helper with the package version."""
        assert renderer.render_string('{{ previous("minor", version) }}') == "2.3.0"
        assert renderer.render_string('{{ previous("major", version) }}') == "1.0.0"

    def test_install_snippet(self, renderer):
        """Test rendering the install snippet."""
        result = renderer.render_string('{% include "install" %}')

        assert "$ npm install my-cool-package\n" in result

    def test_install_npm_save(self, renderer):
        """Test the save flag of install-npm."""
        assert "$ npm install --save my-cool-package" in renderer.render_string(
            '{% include "install-npm" %}', save=True
        )
        assert "$ npm install my-cool-package" in renderer.render_string('{% include "install-npm" %}')

    def test_usage_snippet(self, renderer):
        """Test that the usage snippet uses the alias."""
        result = renderer.render_string('{% include "usage" %}')

        assert "var myCoolPackage = require('my-cool-package');" in result
        assert "import myCoolPackage from 'my-cool-package';" in result

    def test_author_snippet(self, renderer):
        """Test the author snippet with optional profiles omitted."""
        result = renderer.render_string('{% include "author" %}')

        assert "**Jane Doe**" in result
        assert "+ [GitHub Profile](https://github.com/janedoe)" in result
        assert "+ [Twitter Profile](https://twitter.com/janedoe)" in result
        assert "LinkedIn" not in result
        assert "StackOverflow" not in result

    def test_authors_snippet(self, project_dir, sample_package):
        """Test rendering every normalized author."""
        pkg = dict(sample_package, authors=["A (https://github.com/aaa)", "B (https://github.com/bbb)"])
        renderer = ReadmeRenderer(assemble_metadata(pkg, project_dir))

        result = renderer.render_string('{% include "authors" %}')

        assert "**A**" in result
        assert "https://github.com/aaa" in result
        assert "https://twitter.com/bbb" in result

    def test_upgrading_snippet(self, renderer):
        """Test that the upgrading snippet shows the previous minor version."""
        assert "my-cool-package v2.3.0 or lower" in renderer.render_string('{% include "upgrade" %}')

    def test_footer_snippet(self, renderer):
        """Test that the footer names the runner."""
        result = renderer.render_string('{% include "footer" %}')

        assert "_This file was generated by [verb-readme](" in result

    def test_highlight_snippet(self, project_dir, sample_package):
        """Test the highlight snippet resolving a related package."""
        dep_dir = project_dir / "node_modules" / "other-pkg"
        dep_dir.mkdir(parents=True)
        (dep_dir / "package.json").write_text(json.dumps({"homepage": "https://other.dev"}))
        pkg = dict(sample_package, verb={"related": {"highlight": "other-pkg"}})
        renderer = ReadmeRenderer(assemble_metadata(pkg, project_dir))

        result = renderer.render_string('{% include "highlight" %}')

        assert "You might also be interested in [other-pkg](https://other.dev)." in result

    def test_highlight_snippet_without_option(self, renderer):
        """Test that the highlight snippet renders nothing when unset."""
        assert renderer.render_string('{% include "highlight" %}').strip() == ""

    def test_render_with_layout(self, renderer):
        """Test rendering the project template inside the default layout."""
        result = renderer.render(".verb.md")

        assert result.startswith("# my-cool-package\n\n> Does cool things.\n")
        assert "## Install" in result
        assert "Released under the [MIT license]" in result

    def test_render_inserts_toc(self, renderer):
        """Test that the table of contents is inserted at the marker."""
        result = renderer.render(".verb.md")

        assert TOC_STOP_MARKER in result
        assert "- [Install](#install)" in result
        assert "  - [Author](#author)" in result

    def test_render_without_layout_and_toc(self, project_dir, sample_package):
        """Test disabling the layout and the table of contents."""
        pkg = dict(sample_package, verb={"layout": None, "toc": False})
        renderer = ReadmeRenderer(assemble_metadata(pkg, project_dir))

        result = renderer.render(".verb.md")

        assert result.startswith("## Install")
        assert TOC_MARKER in result
        assert TOC_STOP_MARKER not in result

    def test_missing_template(self, renderer):
        """Test that missing templates raise TemplateNotFound."""
        with pytest.raises(TemplateNotFound):
            renderer.render("missing.md")

    def test_project_snippet_overrides_library(self, project_dir, sample_package):
        """Test that project files take precedence over bundled snippets."""
        (project_dir / "install").write_text("custom install")
        renderer = ReadmeRenderer(assemble_metadata(sample_package, project_dir))

        assert renderer.render_string('{% include "install" %}') == "custom install"
