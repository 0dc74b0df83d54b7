"""Infrastructure domain — console output, shell runner, JSON documents, settings."""

from qualinit.infrastructure.documents import (
    DocumentReadError,
    DocumentWriteError,
    read_document,
    update_document,
    write_document,
)
from qualinit.infrastructure.settings import SETTINGS_FILE, Settings, load_settings
from qualinit.infrastructure.shell import run_command

__all__ = [
    "SETTINGS_FILE",
    "DocumentReadError",
    "DocumentWriteError",
    "Settings",
    "load_settings",
    "read_document",
    "run_command",
    "update_document",
    "write_document",
]
