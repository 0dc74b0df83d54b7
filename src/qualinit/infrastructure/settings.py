"""Optional per-project settings read from ``.qualinit.yml``.

Example::

    install_command: pnpm add -D
    exec_command: pnpm exec
    staged_glob: "*.{js,ts}"

Every key is optional.  A missing file means defaults.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import TYPE_CHECKING

import yaml

from qualinit.infrastructure.console import warn

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

SETTINGS_FILE = ".qualinit.yml"


@dataclass(frozen=True)
class Settings:
    """Commands and patterns used while configuring a project."""

    install_command: str = "npm install --save-dev"
    exec_command: str = "npx"
    staged_glob: str = "*.js"


def load_settings(project_root: Path) -> Settings:
    """Load :class:`Settings` from ``.qualinit.yml`` under *project_root*.

    Falls back to defaults for a missing file, an unreadable file, and for
    any key whose value is not a non-empty string.
    """
    config_path = project_root / SETTINGS_FILE
    if not config_path.is_file():
        return Settings()

    try:
        with config_path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError):
        logger.warning("Failed to read %s, using default settings", SETTINGS_FILE)
        warn(f"{SETTINGS_FILE} could not be read, using defaults")
        return Settings()

    if data is None:
        return Settings()
    if not isinstance(data, dict):
        warn(f"{SETTINGS_FILE} is not a mapping, using defaults")
        return Settings()

    known = {f.name for f in fields(Settings)}
    for key in sorted(set(data) - known):
        logger.warning("Unknown key %r in %s", key, SETTINGS_FILE)
        warn(f"{SETTINGS_FILE}: ignoring unknown key '{key}'")

    kwargs: dict[str, str] = {}
    for name in known:
        if name not in data:
            continue
        value = data[name]
        if isinstance(value, str) and value.strip():
            kwargs[name] = value.strip()
        else:
            warn(f"{SETTINGS_FILE}: '{name}' must be a non-empty string, using default")

    return Settings(**kwargs)
