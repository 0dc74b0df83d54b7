"""Tests for qualinit.infrastructure.shell — the command runner."""

from __future__ import annotations

import subprocess
from typing import TYPE_CHECKING
from unittest.mock import patch

import pytest

from qualinit.infrastructure.shell import run_command

if TYPE_CHECKING:
    from pathlib import Path
    from unittest.mock import MagicMock


class TestRunCommand:
    def test_splits_on_whitespace(self, fake_run: MagicMock) -> None:
        run_command("npm  install --save-dev   husky")
        argv = fake_run.call_args.args[0]
        assert argv == ["npm", "install", "--save-dev", "husky"]

    def test_passes_cwd(self, fake_run: MagicMock, tmp_path: Path) -> None:
        run_command("npx husky init", cwd=tmp_path)
        assert fake_run.call_args.kwargs["cwd"] == tmp_path

    def test_success_reports_done(
        self, fake_run: MagicMock, capsys: pytest.CaptureFixture[str]
    ) -> None:
        run_command("npx husky init")
        assert "npx husky init done" in capsys.readouterr().out

    def test_empty_command_rejected(self) -> None:
        with pytest.raises(ValueError, match="empty"):
            run_command("   ")

    def test_nonzero_exit_terminates(self, capsys: pytest.CaptureFixture[str]) -> None:
        failed = subprocess.CompletedProcess(
            ["npm"], 1, stdout="", stderr="npm ERR! 404 Not Found\nmore detail\n"
        )
        with (
            patch("qualinit.infrastructure.shell.subprocess.run", return_value=failed),
            pytest.raises(SystemExit) as excinfo,
        ):
            run_command("npm install --save-dev nope")
        assert excinfo.value.code == 1
        out = capsys.readouterr().out
        assert "exit code 1" in out
        assert "404 Not Found" in out
        assert "more detail" not in out

    def test_missing_program_terminates(self, capsys: pytest.CaptureFixture[str]) -> None:
        with (
            patch(
                "qualinit.infrastructure.shell.subprocess.run",
                side_effect=FileNotFoundError("npx"),
            ),
            pytest.raises(SystemExit) as excinfo,
        ):
            run_command("npx husky init")
        assert excinfo.value.code == 1
        assert "Command not found: npx" in capsys.readouterr().out

    def test_output_redirects_stdout_to_file(self, tmp_path: Path) -> None:
        target = tmp_path / "out.txt"
        run_command("echo lint-staged", output=target)
        assert target.read_text().strip() == "lint-staged"

    def test_output_file_receives_stream(self, tmp_path: Path) -> None:
        target = tmp_path / "out.txt"
        captured: dict[str, object] = {}

        def _run(argv: list[str], **kwargs: object) -> subprocess.CompletedProcess[str]:
            captured.update(kwargs)
            return subprocess.CompletedProcess(argv, 0, stdout=None, stderr="")

        with patch("qualinit.infrastructure.shell.subprocess.run", side_effect=_run):
            run_command("echo hi", output=target)
        assert str(getattr(captured["stdout"], "name", "")) == str(target)
        assert "capture_output" not in captured
