"""Precondition checks run before any question is asked or file is touched."""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING

from qualinit.infrastructure.console import error, info

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

MANIFEST_FILE = "package.json"
VCS_DIR = ".git"


def note_directory(project_root: Path) -> None:
    info(f"Working directory: {project_root}")


def _check_access(path: Path, mode: int, missing_message: str) -> None:
    try:
        path.stat()
    except FileNotFoundError:
        error(missing_message)
        sys.exit(1)
    except OSError as exc:
        logger.debug("stat(%s) failed", path, exc_info=True)
        error(str(exc))
        sys.exit(1)

    if not os.access(path, mode):
        error(f"Permission denied: '{path}'")
        sys.exit(1)


def check_manifest(project_root: Path) -> None:
    """Require a readable and writable ``package.json`` in *project_root*."""
    _check_access(
        project_root / MANIFEST_FILE,
        os.R_OK | os.W_OK,
        "Not an npm package root. Run `npm init` to create package.json first.",
    )


def check_repository(project_root: Path) -> None:
    """Require a readable ``.git`` directory in *project_root*."""
    _check_access(
        project_root / VCS_DIR,
        os.R_OK,
        "Not a git repository. Run `git init` to initialize one first.",
    )
