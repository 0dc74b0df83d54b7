"""Shell runner: execute one command line and stop the run on failure.

Commands are split on whitespace and executed without a shell, so quoting
and redirection operators are not interpreted.  Redirecting stdout into a
file is done through the *output* argument instead.
"""

from __future__ import annotations

import logging
import subprocess
import sys
from typing import TYPE_CHECKING

from qualinit.infrastructure.console import error, loading, succeed

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


def _short_message(command: str, result: subprocess.CompletedProcess[str]) -> str:
    """One-line diagnostic for a failed command."""
    message = f"Command failed with exit code {result.returncode}: {command}"
    stderr = (result.stderr or "").strip()
    if stderr:
        message += f" ({stderr.splitlines()[0]})"
    return message


def run_command(
    command: str,
    *,
    output: Path | None = None,
    cwd: Path | None = None,
) -> None:
    """Run *command*, exiting the process with status 1 if it fails.

    When *output* is given, the command's standard output is written to that
    file instead of being captured.
    """
    argv = command.split()
    if not argv:
        raise ValueError("empty command")

    logger.debug("Running %s (output=%s, cwd=%s)", argv, output, cwd)
    with loading(command):
        try:
            if output is not None:
                with output.open("w", encoding="utf-8") as fh:
                    result = subprocess.run(  # noqa: S603
                        argv,
                        cwd=cwd,
                        stdout=fh,
                        stderr=subprocess.PIPE,
                        text=True,
                        check=False,
                    )
            else:
                result = subprocess.run(  # noqa: S603
                    argv,
                    cwd=cwd,
                    capture_output=True,
                    text=True,
                    check=False,
                )
        except FileNotFoundError:
            error(f"Command not found: {argv[0]}")
            sys.exit(1)

    if result.returncode != 0:
        logger.debug("stderr of %r: %s", command, result.stderr)
        error(_short_message(command, result))
        sys.exit(1)

    succeed(f"{command} done")
