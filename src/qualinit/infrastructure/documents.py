"""JSON document store: read, write and read-modify-write of config files."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from qualinit.infrastructure.console import error, succeed

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

logger = logging.getLogger(__name__)


class DocumentReadError(Exception):
    """A document could not be read or parsed."""


class DocumentWriteError(Exception):
    """A document could not be written back to disk."""


def read_document(path: Path) -> dict[str, Any]:
    """Load a JSON object from *path*, keeping key order."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise DocumentReadError(f"{path.name}: {exc}") from exc
    if not isinstance(data, dict):
        raise DocumentReadError(f"{path.name}: expected a JSON object")
    return data


def write_document(
    path: Path,
    document: dict[str, Any],
    *,
    indent: int = 2,
    final_newline: bool = False,
) -> None:
    """Serialize *document* to *path*.

    A failed write is reported to the operator and raised as
    :class:`DocumentWriteError` so dependent steps do not continue.
    """
    text = json.dumps(document, indent=indent, ensure_ascii=False)
    if final_newline:
        text += "\n"
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        error(f"{path.name} write failed: {exc.strerror or exc}")
        raise DocumentWriteError(f"{path.name}: {exc}") from exc
    logger.debug("Wrote %s (%d bytes)", path, len(text))
    succeed(f"{path.name} written")


def update_document(
    path: Path,
    mutate: Callable[[dict[str, Any]], dict[str, Any] | None],
    **options: Any,
) -> dict[str, Any]:
    """Read *path*, apply *mutate* and write the result back.

    *mutate* may change the document in place and return ``None``, or return
    a replacement document.  Returns the document that was written.
    """
    document = read_document(path)
    updated = mutate(document)
    if updated is None:
        updated = document
    write_document(path, updated, **options)
    return updated
