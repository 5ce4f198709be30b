"""Constants and shared configuration for the verb_readme package."""

# Code hosting
GITHUB_HOST = "github.com"
DEFAULT_BRANCH = "master"

# Licensing
DEFAULT_LICENSE = "MIT"
LICENSE_FILENAME = "LICENSE"
RELEASE_STATEMENT_MARKER = "Released"

# Project files
PACKAGE_FILENAME = "package.json"
DEFAULT_TEMPLATE = ".verb.md"
README_FILENAME = "README.md"

# Bundled templates
INCLUDES_FILE = "includes.yaml"
DEFAULT_VERBMD_TEMPLATE = "verbmd.md"

# Table of contents
TOC_MARKER = "<!-- toc -->"
TOC_STOP_MARKER = "<!-- tocstop -->"
TOC_FOOTER = (
    "_(TOC generated by [verb](https://github.com/verbose/verb) using "
    "[markdown-toc](https://github.com/jonschlinkert/markdown-toc))_"
)

# Exit codes
EXIT_SUCCESS = 0  # README in sync (check mode) or successfully updated (fix mode)
EXIT_DIFF_DETECTED = 1  # Diff detected in check mode
EXIT_ERROR = 2  # Actual error (e.g., missing template, unreadable package.json)
