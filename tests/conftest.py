"""Shared test fixtures for qualinit."""

from __future__ import annotations

import json
import subprocess
from typing import TYPE_CHECKING
from unittest.mock import patch

import pytest

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path
    from unittest.mock import MagicMock


@pytest.fixture()
def npm_project(tmp_path: Path) -> Path:
    """A git-initialized npm project with a minimal package.json."""
    project = tmp_path / "proj"
    project.mkdir()
    (project / ".git").mkdir()
    (project / "package.json").write_text(
        json.dumps({"name": "demo", "version": "1.0.0", "scripts": {"test": "jest"}}, indent=2)
    )
    return project


@pytest.fixture()
def fake_run() -> Iterator[MagicMock]:
    """Patch ``subprocess.run`` in the shell runner to always succeed."""

    def _ok(argv: list[str], **kwargs: object) -> subprocess.CompletedProcess[str]:
        return subprocess.CompletedProcess(argv, 0, stdout="", stderr="")

    with patch("qualinit.infrastructure.shell.subprocess.run", side_effect=_ok) as mock:
        yield mock
