"""qualinit CLI entry point."""

from __future__ import annotations

import sys
from pathlib import Path

import click


@click.command()
def main() -> None:
    """Set up git hooks, lint-staged, commitizen, eslint and prettier
    for the npm project in the current directory."""
    from qualinit.onboarding.pipeline import run_setup

    sys.exit(run_setup(Path.cwd()))
