"""Dependency installer: one batched dev-dependency install per run."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from qualinit.infrastructure.shell import run_command
from qualinit.onboarding.features import BUNDLES, COMPAT_PACKAGE

if TYPE_CHECKING:
    from pathlib import Path

    from qualinit.infrastructure.settings import Settings
    from qualinit.onboarding.features import FeatureSelection

logger = logging.getLogger(__name__)


def resolve_packages(selection: FeatureSelection) -> list[str]:
    """Packages required by *selection*, in feature order.

    Duplicates are kept as-is.
    """
    packages: list[str] = []
    for feature in selection.enabled():
        packages.extend(BUNDLES[feature])
    if selection.formatter and selection.linter:
        packages.append(COMPAT_PACKAGE)
    return packages


def install_dependencies(
    selection: FeatureSelection,
    settings: Settings,
    project_root: Path,
) -> list[str]:
    """Install every required package with a single command.

    The command runs even when nothing is selected.  Returns the package list.
    """
    packages = resolve_packages(selection)
    logger.debug("Installing %d packages: %s", len(packages), packages)
    command = " ".join([settings.install_command, *packages])
    run_command(command, cwd=project_root)
    return packages
