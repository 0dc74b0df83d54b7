"""Orchestrator: the linear setup pipeline behind ``qualinit``."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from qualinit.infrastructure.console import console, error, succeed
from qualinit.infrastructure.settings import load_settings
from qualinit.onboarding.configurator import configure_features
from qualinit.onboarding.features import ask_features
from qualinit.onboarding.installer import install_dependencies
from qualinit.onboarding.preconditions import (
    check_manifest,
    check_repository,
    note_directory,
)

if TYPE_CHECKING:
    from pathlib import Path

    from qualinit.infrastructure.settings import Settings
    from qualinit.onboarding.features import FeatureSelection

logger = logging.getLogger(__name__)


def _print_next_steps(selection: FeatureSelection) -> None:
    steps: list[str] = []
    if selection.commit_assistant:
        steps.append("Commit with [bold]npm run commit[/bold]")
    if selection.staged_lint and selection.hooks:
        steps.append("Staged files are checked on every commit")
    if selection.linter:
        steps.append("Review [bold]eslint.config.js[/bold]")
    if not steps:
        return
    console.print("\nNext steps:")
    for i, step in enumerate(steps, 1):
        console.print(f"  {i}. {step}")


def run_setup(project_root: Path, settings: Settings | None = None) -> int:
    """Check, ask, install and configure; return the process exit status.

    Precondition failures, input cancellation and failed shell commands exit
    the process where they happen.  A failed feature routine makes this
    function return 1.
    """
    note_directory(project_root)
    check_manifest(project_root)
    check_repository(project_root)

    if settings is None:
        settings = load_settings(project_root)
    logger.debug("Settings: %s", settings)

    selection = ask_features()
    logger.debug("Selection: %s", selection.as_dict())

    install_dependencies(selection, settings, project_root)

    if not configure_features(selection, settings, project_root):
        error("Setup stopped before all features were configured.")
        return 1

    succeed("Setup complete!")
    _print_next_steps(selection)
    return 0
