"""Entry point for running verb_readme as a module.

Usage:
    python -m verb_readme path/to/project
    python -m verb_readme path/to/project --fix
"""

from .cli import main

if __name__ == "__main__":
    main()
