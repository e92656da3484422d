"""CLI package for YiDict command orchestration.

Contains the click interface, the runner managing resources, and the lookup
command itself.
"""

from __future__ import annotations

__all__ = ["CommandRunner", "cli", "main"]

from YiDict.cli.runner import CommandRunner
from YiDict.cli.ui import cli


def main() -> None:
    """Run YiDict CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()
